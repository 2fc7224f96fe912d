from abc import ABC, abstractmethod
from typing import Dict, Optional

from pydantic import BaseModel


class PaymentGatewayError(Exception):
    """Payment provider rejected the request or could not be reached"""


class CheckoutLineItem(BaseModel):
    name: str
    description: str
    unit_amount: int  # minor currency units
    currency: str = "usd"
    quantity: int = 1


class CheckoutSessionRequest(BaseModel):
    line_item: CheckoutLineItem
    return_url: str
    customer_email: Optional[str] = None
    metadata: Dict[str, str] = {}


class CheckoutSession(BaseModel):
    id: str
    client_secret: str


class IPaymentGateway(ABC):
    """Hosted/embedded payment session provider"""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        pass

    @abstractmethod
    async def create_checkout_session(self, request: CheckoutSessionRequest) -> CheckoutSession:
        """Create an embedded checkout session, raises PaymentGatewayError"""
        pass
