from libs.result import Error
from src.app.services.ai_gateway import AiGatewayError


def upstream_error(
    exc: AiGatewayError, rate_limit_message: str, payment_message: str, fallback_message: str
) -> Error:
    """Map an AI gateway failure to a pass-through or generic error"""
    if exc.status_code == 429:
        return Error("UPSTREAM_RATE_LIMITED", rate_limit_message)
    if exc.status_code == 402:
        return Error("UPSTREAM_PAYMENT_REQUIRED", payment_message)
    return Error("AI_GATEWAY_ERROR", fallback_message)
