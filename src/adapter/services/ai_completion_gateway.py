import logging
from typing import Any, Dict, Optional

import httpx

from src.app.services.ai_gateway import AiGatewayError, IAiGateway, ToolCall

logger = logging.getLogger(__name__)


class AiCompletionGateway(IAiGateway):
    """OpenAI-compatible chat completions endpoint with tool calling"""

    def __init__(
        self,
        url: str,
        api_key: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def call_function(
        self,
        model: str,
        system_prompt: str,
        user_prompt: str,
        function_name: str,
        function_description: str,
        parameters: Dict[str, Any],
    ) -> Optional[ToolCall]:
        body = {
            "model": model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "tools": [
                {
                    "type": "function",
                    "function": {
                        "name": function_name,
                        "description": function_description,
                        "parameters": parameters,
                    },
                }
            ],
            "tool_choice": {"type": "function", "function": {"name": function_name}},
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(
                    self.url,
                    json=body,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
            except httpx.HTTPError as exc:
                logger.error(f"AI gateway unreachable: {exc}")
                raise AiGatewayError(502, str(exc)) from exc

        if response.is_error:
            raise AiGatewayError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as exc:
            logger.error(f"AI gateway returned a non-JSON body: {response.text[:200]}")
            raise AiGatewayError(502, response.text) from exc
        if not isinstance(data, dict):
            raise AiGatewayError(502, response.text)

        choices = data.get("choices") or [{}]
        tool_calls = (choices[0].get("message") or {}).get("tool_calls") or []
        if not tool_calls:
            return None

        function = tool_calls[0].get("function") or {}
        return ToolCall(name=function.get("name", ""), arguments=function.get("arguments", "{}"))
