"""
Create Change Order Checkout Use Case

Creates an embedded payment session for a change order.
"""

import logging
import math
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.payment_gateway import (
    CheckoutLineItem,
    CheckoutSessionRequest,
    IPaymentGateway,
    PaymentGatewayError,
)

from .dtos import CreateChangeOrderCheckoutCommand, CreateChangeOrderCheckoutResponse

logger = logging.getLogger(__name__)

CHECKOUT_SESSION_PLACEHOLDER = "{CHECKOUT_SESSION_ID}"


def to_minor_units(amount: float) -> int:
    """Dollars to cents, rounding the float product half up (125.5 -> 12550, 1.005 -> 100)."""
    return math.floor(amount * 100 + 0.5)


class CreateChangeOrderCheckoutUseCase:
    """
    Use case for creating a change order checkout session.

    Business Rules:
    - changeOrderId and a non-zero amount are required
    - Amount must be strictly positive
    - Validation happens before any payment provider call
    - Session metadata ties the payment back to the change order
    """

    def __init__(self, payments: IPaymentGateway, site_url: str):
        self.payments = payments
        self.site_url = site_url.rstrip("/")

    def _return_url(self, project_slug: Optional[str]) -> str:
        if project_slug:
            return (
                f"{self.site_url}/portal/{project_slug}/change-order-complete"
                f"?session_id={CHECKOUT_SESSION_PLACEHOLDER}"
            )
        return f"{self.site_url}/change-order-complete?session_id={CHECKOUT_SESSION_PLACEHOLDER}"

    async def execute(
        self, command: CreateChangeOrderCheckoutCommand
    ) -> Result[CreateChangeOrderCheckoutResponse]:
        logger.info(
            f"Received checkout request: change_order_id={command.change_order_id} "
            f"amount={command.amount} project_slug={command.project_slug} "
            f"partial={command.is_partial_payment}"
        )

        if not command.change_order_id or not command.amount:
            logger.error(
                f"Missing required fields: change_order_id={command.change_order_id} "
                f"amount={command.amount}"
            )
            return Return.err(Error("MISSING_REQUIRED_FIELDS", "Missing required fields"))

        if command.amount <= 0:
            logger.error(f"Invalid amount: {command.amount}")
            return Return.err(Error("INVALID_AMOUNT", "Amount must be greater than zero"))

        if not self.payments.is_configured:
            logger.error("Stripe secret key not configured")
            return Return.err(
                Error("PAYMENTS_NOT_CONFIGURED", "Stripe secret key not configured")
            )

        amount_in_cents = to_minor_units(command.amount)
        logger.info(f"Creating checkout session for amount: {amount_in_cents} cents")

        customer_email = (command.customer_email or "").strip() or None

        request = CheckoutSessionRequest(
            line_item=CheckoutLineItem(
                name=f"Change Order {command.co_number or command.change_order_id[:8]}",
                description=command.description or "Change order payment",
                unit_amount=amount_in_cents,
            ),
            return_url=self._return_url(command.project_slug),
            customer_email=customer_email,
            metadata={
                "change_order_id": command.change_order_id,
                "type": "change_order",
                "is_partial_payment": "true" if command.is_partial_payment else "false",
            },
        )

        try:
            session = await self.payments.create_checkout_session(request)
        except PaymentGatewayError as exc:
            logger.error(f"Error creating checkout session: {exc}")
            return Return.err(Error("CHECKOUT_FAILED", str(exc)))

        logger.info(f"Checkout session created successfully: {session.id}")
        return Return.ok(CreateChangeOrderCheckoutResponse(client_secret=session.client_secret))
