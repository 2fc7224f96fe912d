from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError, ServerError
from src.app.services.ai_gateway import IAiGateway
from src.app.use_cases.parsing import (
    EstimateTotals,
    ParseEstimateCommand,
    ParseEstimatePdfUseCase,
    ParsePurchaseOrderCommand,
    ParsePurchaseOrderPdfUseCase,
    ParsePurchaseOrderResponse,
)
from src.depends import get_ai_gateway

router = APIRouter(tags=["Document Parsing"])


def _raise_upstream(error: Error):
    if error.code == "MISSING_TEXT":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    if error.code == "UPSTREAM_RATE_LIMITED":
        raise ClientError(error, status_code=status.HTTP_429_TOO_MANY_REQUESTS)
    if error.code == "UPSTREAM_PAYMENT_REQUIRED":
        raise ClientError(error, status_code=status.HTTP_402_PAYMENT_REQUIRED)
    raise ServerError(error)


@router.post("/parse-estimate-pdf", response_model=EstimateTotals)
async def parse_estimate_pdf(
    request: ParseEstimateCommand, ai: IAiGateway = Depends(get_ai_gateway)
):
    """
    Extract contract, labor, materials, overhead and profit totals from
    the text of an estimate PDF

    Raises:
        - 400 Bad Request: rawText missing
        - 402 Payment Required: AI credits exhausted
        - 429 Too Many Requests: AI rate limit
        - 500 Internal Server Error: AI not configured or extraction failed
    """
    use_case = ParseEstimatePdfUseCase(ai, ApplicationConfig.ESTIMATE_PARSER_MODEL)
    result = await use_case.execute(request)

    if result.is_err():
        _raise_upstream(result.error)

    return result.value


@router.post(
    "/parse-purchase-order-pdf",
    response_model=ParsePurchaseOrderResponse,
    response_model_exclude_none=True,
)
async def parse_purchase_order_pdf(
    request: ParsePurchaseOrderCommand, ai: IAiGateway = Depends(get_ai_gateway)
):
    """
    Extract material line items from the text of a purchase order PDF

    Unusable model output is a 200 with an empty item list and an error.

    Raises:
        - 400 Bad Request: pdfText missing
        - 402 Payment Required: AI credits exhausted
        - 429 Too Many Requests: AI rate limit
        - 500 Internal Server Error: AI not configured or upstream failure
    """
    use_case = ParsePurchaseOrderPdfUseCase(ai, ApplicationConfig.PURCHASE_ORDER_PARSER_MODEL)
    result = await use_case.execute(request)

    if result.is_err():
        _raise_upstream(result.error)

    return result.value
