from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.app.services.sms_gateway import ISmsGateway
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.notifications import (
    NotifyChangeOrderApprovalCommand,
    NotifyChangeOrderApprovalResponse,
    NotifyChangeOrderApprovalUseCase,
    SendClientPortalCatchupCommand,
    SendClientPortalCatchupResponse,
    SendClientPortalCatchupUseCase,
    SmsFailureDetails,
)
from src.depends import get_sms_gateway, get_unit_of_work

router = APIRouter(tags=["Notifications"])


@router.post(
    "/notify-change-order-approval",
    response_model=NotifyChangeOrderApprovalResponse,
    response_model_exclude_none=True,
)
async def notify_change_order_approval(
    request: NotifyChangeOrderApprovalCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    sms: ISmsGateway = Depends(get_sms_gateway),
):
    """
    Text the responsible team member that a change order was approved

    Delivery is best-effort: when no SMS can be sent the response is
    200 with success=false and the reason.

    Raises:
        - 400 Bad Request: Missing changeOrderId or projectId
        - 404 Not Found: Change order does not exist
    """
    use_case = NotifyChangeOrderApprovalUseCase(uow, sms)
    result = await use_case.execute(request)

    if result.is_err():
        error = result.error
        if error.code in ("MISSING_PARAMETERS", "INVALID_PARAMETERS"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "CHANGE_ORDER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post("/send-client-portal-catchup", response_model=SendClientPortalCatchupResponse)
async def send_client_portal_catchup(
    request: SendClientPortalCatchupCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    sms: ISmsGateway = Depends(get_sms_gateway),
):
    """
    Text the project's client a summary of recent updates with a portal link

    Raises:
        - 400 Bad Request: Missing fields or no valid client phone
        - 404 Not Found: Project does not exist
        - 500 Internal Server Error: SMS not configured or not delivered
          (body carries portalUrl, and twilioError when delivery failed)
    """
    use_case = SendClientPortalCatchupUseCase(
        uow, sms, ApplicationConfig.SITE_URL, signature=ApplicationConfig.SMS_SIGNATURE
    )
    result = await use_case.execute(request)

    if result.is_err():
        error = result.error
        if error.code in ("MISSING_REQUIRED_FIELDS", "INVALID_CLIENT_PHONE"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "PROJECT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        extra = None
        if isinstance(error.details, SmsFailureDetails):
            extra = error.details.model_dump(by_alias=True, exclude_none=True)
        raise ServerError(error, extra=extra)

    return result.value
