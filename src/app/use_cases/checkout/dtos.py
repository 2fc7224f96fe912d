"""
Checkout Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional

from src.domain.base import CamelModel


class CreateChangeOrderCheckoutCommand(CamelModel):
    """Checkout request for a change order payment"""

    change_order_id: Optional[str] = None
    amount: Optional[float] = None
    customer_email: Optional[str] = None
    project_slug: Optional[str] = None
    co_number: Optional[str] = None
    description: Optional[str] = None
    is_partial_payment: bool = False


class CreateChangeOrderCheckoutResponse(CamelModel):
    """Response for create change order checkout use case"""

    client_secret: str
