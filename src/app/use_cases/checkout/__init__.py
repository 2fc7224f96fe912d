"""
Checkout Use Cases
"""

from .create_change_order_checkout_use_case import (
    CreateChangeOrderCheckoutUseCase,
    to_minor_units,
)
from .dtos import CreateChangeOrderCheckoutCommand, CreateChangeOrderCheckoutResponse

__all__ = [
    "CreateChangeOrderCheckoutUseCase",
    "CreateChangeOrderCheckoutCommand",
    "CreateChangeOrderCheckoutResponse",
    "to_minor_units",
]
