from abc import ABC, abstractmethod
from typing import Any, Optional


class SmsDeliveryError(Exception):
    """Messaging provider refused or failed to send"""

    def __init__(self, message: str, provider_response: Optional[Any] = None):
        self.provider_response = provider_response
        super().__init__(message)


class ISmsGateway(ABC):
    """Outbound SMS provider"""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        pass

    @abstractmethod
    async def send(self, to: str, body: str) -> str:
        """Send an SMS to an E.164 number, return the provider message id"""
        pass
