"""
Parse Purchase Order PDF Use Case

Extracts material line items from a supplier material order.
"""

import json
import logging
from typing import Any, Dict

from libs.result import Error, Result, Return
from src.app.services.ai_gateway import AiGatewayError, IAiGateway

from . import prompts
from .dtos import MaterialItem, ParsePurchaseOrderCommand, ParsePurchaseOrderResponse
from .upstream import upstream_error

logger = logging.getLogger(__name__)

LOG_PREFIX = "[parse-purchase-order-pdf]"


def _quantity(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    try:
        return float(str(value).strip().split()[0]) or 1.0
    except (ValueError, IndexError):
        return 1.0


def _normalize_item(item: Dict[str, Any]) -> MaterialItem:
    return MaterialItem(
        category=item.get("category") or "General Materials",
        item_name=item.get("item_name") or "Unknown Item",
        quantity=_quantity(item.get("quantity")),
        unit=item.get("unit") or "EA",
        measurement=item.get("measurement") or "",
        unit_cost=item.get("unit_cost") or 0,
        total=item.get("total") or 0,
    )


class ParsePurchaseOrderPdfUseCase:
    """
    Use case for extracting material items from a purchase order.

    Business Rules:
    - pdfText must be a non-empty string
    - Upstream 429/402 are passed through, other upstream failures are 500
    - Unusable model output yields an empty item list with an error message
    - Items get defaults for every missing field
    """

    RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."
    PAYMENT_REQUIRED_MESSAGE = "Payment required. Please add credits to continue."

    def __init__(self, ai: IAiGateway, model: str):
        self.ai = ai
        self.model = model

    async def execute(
        self, command: ParsePurchaseOrderCommand
    ) -> Result[ParsePurchaseOrderResponse]:
        if not command.pdf_text:
            return Return.err(Error("MISSING_TEXT", "Missing or invalid pdfText"))

        if not self.ai.is_configured:
            logger.error(f"{LOG_PREFIX} AI gateway API key not configured")
            return Return.err(Error("AI_NOT_CONFIGURED", "API key not configured"))

        logger.info(f"{LOG_PREFIX} Parsing PDF text, length: {len(command.pdf_text)}")

        try:
            tool_call = await self.ai.call_function(
                model=self.model,
                system_prompt=prompts.PURCHASE_ORDER_SYSTEM_PROMPT,
                user_prompt=prompts.PURCHASE_ORDER_USER_PROMPT.format(text=command.pdf_text),
                function_name=prompts.PURCHASE_ORDER_FUNCTION_NAME,
                function_description=prompts.PURCHASE_ORDER_FUNCTION_DESCRIPTION,
                parameters=prompts.PURCHASE_ORDER_PARAMETERS,
            )
        except AiGatewayError as exc:
            logger.error(f"{LOG_PREFIX} AI gateway error: {exc.status_code} {exc.body}")
            return Return.err(
                upstream_error(
                    exc, self.RATE_LIMIT_MESSAGE, self.PAYMENT_REQUIRED_MESSAGE, "Failed to parse PDF"
                )
            )

        if tool_call is None or tool_call.name != prompts.PURCHASE_ORDER_FUNCTION_NAME:
            logger.error(f"{LOG_PREFIX} No valid tool call in response")
            return Return.ok(ParsePurchaseOrderResponse(items=[], error="Failed to extract materials"))

        try:
            args = json.loads(tool_call.arguments)
            items = [_normalize_item(item) for item in args.get("items") or []]
        except (json.JSONDecodeError, AttributeError, TypeError, ValueError) as exc:
            logger.error(f"{LOG_PREFIX} Failed to parse tool arguments: {exc}")
            return Return.ok(ParsePurchaseOrderResponse(items=[], error="Failed to parse AI response"))

        logger.info(f"{LOG_PREFIX} Parsed {len(items)} items")
        return Return.ok(ParsePurchaseOrderResponse(items=items))
