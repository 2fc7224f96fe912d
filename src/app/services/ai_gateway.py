from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class AiGatewayError(Exception):
    """Non-OK response from the AI completion gateway"""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"AI gateway error: {status_code}")


class ToolCall:
    """A function call returned by the model"""

    def __init__(self, name: str, arguments: str):
        self.name = name
        self.arguments = arguments


class IAiGateway(ABC):
    """Chat completion service with structured (function calling) output"""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        pass

    @abstractmethod
    async def call_function(
        self,
        model: str,
        system_prompt: str,
        user_prompt: str,
        function_name: str,
        function_description: str,
        parameters: Dict[str, Any],
    ) -> Optional[ToolCall]:
        """
        Ask the model to answer by calling ``function_name``.

        Returns the first tool call of the first choice, or None when the
        model did not produce one. Raises AiGatewayError on non-OK status.
        """
        pass
