from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.app.services.payment_gateway import IPaymentGateway
from src.app.use_cases.checkout import (
    CreateChangeOrderCheckoutCommand,
    CreateChangeOrderCheckoutResponse,
    CreateChangeOrderCheckoutUseCase,
)
from src.depends import get_payment_gateway

router = APIRouter(tags=["Checkout"])


@router.post(
    "/create-change-order-checkout", response_model=CreateChangeOrderCheckoutResponse
)
async def create_change_order_checkout(
    request: CreateChangeOrderCheckoutCommand,
    payments: IPaymentGateway = Depends(get_payment_gateway),
):
    """
    Create an embedded checkout session for a change order payment

    Returns the session client secret used by the embedded checkout form.

    Raises:
        - 400 Bad Request: Missing changeOrderId/amount or non-positive amount
        - 500 Internal Server Error: Payments not configured or provider failure
    """
    use_case = CreateChangeOrderCheckoutUseCase(payments, ApplicationConfig.SITE_URL)
    result = await use_case.execute(request)

    if result.is_err():
        error = result.error
        if error.code in ("MISSING_REQUIRED_FIELDS", "INVALID_AMOUNT"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
