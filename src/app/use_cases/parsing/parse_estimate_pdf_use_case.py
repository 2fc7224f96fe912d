"""
Parse Estimate PDF Use Case

Extracts contract price and cost totals from estimate text with the AI gateway.
"""

import json
import logging
from typing import Any

from libs.result import Error, Result, Return
from src.app.services.ai_gateway import AiGatewayError, IAiGateway

from . import prompts
from .dtos import EstimateTotals, ParseEstimateCommand
from .upstream import upstream_error

logger = logging.getLogger(__name__)

LOG_PREFIX = "[parse-estimate-pdf]"


def _amount(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


class ParseEstimatePdfUseCase:
    """
    Use case for extracting estimate totals.

    Business Rules:
    - rawText must be a non-empty string
    - Upstream 429/402 are passed through, other upstream failures are 500
    - Missing categories come back as 0
    """

    RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again in a moment."
    PAYMENT_REQUIRED_MESSAGE = "AI credits exhausted. Please add credits or enter values manually."

    def __init__(self, ai: IAiGateway, model: str):
        self.ai = ai
        self.model = model

    async def execute(self, command: ParseEstimateCommand) -> Result[EstimateTotals]:
        if not command.raw_text:
            return Return.err(Error("MISSING_TEXT", "rawText is required"))

        if not self.ai.is_configured:
            return Return.err(Error("AI_NOT_CONFIGURED", "AI gateway API key is not configured"))

        logger.info(f"{LOG_PREFIX} Received text length: {len(command.raw_text)}")
        logger.debug(f"{LOG_PREFIX} First 500 chars: {command.raw_text[:500]}")

        try:
            tool_call = await self.ai.call_function(
                model=self.model,
                system_prompt=prompts.ESTIMATE_SYSTEM_PROMPT,
                user_prompt=prompts.ESTIMATE_USER_PROMPT.format(text=command.raw_text),
                function_name=prompts.ESTIMATE_FUNCTION_NAME,
                function_description=prompts.ESTIMATE_FUNCTION_DESCRIPTION,
                parameters=prompts.ESTIMATE_PARAMETERS,
            )
        except AiGatewayError as exc:
            logger.error(f"{LOG_PREFIX} AI gateway error: {exc.status_code} {exc.body}")
            return Return.err(
                upstream_error(exc, self.RATE_LIMIT_MESSAGE, self.PAYMENT_REQUIRED_MESSAGE, str(exc))
            )

        if tool_call is None or tool_call.name != prompts.ESTIMATE_FUNCTION_NAME:
            logger.error(f"{LOG_PREFIX} No valid tool call in response")
            return Return.err(
                Error("EXTRACTION_FAILED", "Failed to extract estimate totals from AI response")
            )

        try:
            args = json.loads(tool_call.arguments)
        except json.JSONDecodeError as exc:
            logger.error(f"{LOG_PREFIX} Unparsable tool arguments: {exc}")
            return Return.err(
                Error("EXTRACTION_FAILED", "Failed to extract estimate totals from AI response")
            )

        totals = EstimateTotals(
            contract_price=_amount(args.get("contract_price")),
            labor_total=_amount(args.get("labor_total")),
            materials_total=_amount(args.get("materials_total")),
            overhead_total=_amount(args.get("overhead_total")),
            profit_total=_amount(args.get("profit_total")),
        )
        logger.info(f"{LOG_PREFIX} Extracted totals: {totals.model_dump()}")
        return Return.ok(totals)
