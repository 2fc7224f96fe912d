import logging
from typing import Any, Dict

import stripe

from src.app.services.payment_gateway import (
    CheckoutSession,
    CheckoutSessionRequest,
    IPaymentGateway,
    PaymentGatewayError,
)

logger = logging.getLogger(__name__)


class StripePaymentGateway(IPaymentGateway):
    """Stripe Checkout (embedded mode) through the Stripe SDK"""

    def __init__(self, secret_key: str, api_version: str = "2023-10-16"):
        self.secret_key = secret_key
        self.api_version = api_version

    @property
    def is_configured(self) -> bool:
        return bool(self.secret_key)

    @staticmethod
    def _session_params(request: CheckoutSessionRequest) -> Dict[str, Any]:
        item = request.line_item
        params: Dict[str, Any] = {
            "ui_mode": "embedded",
            "mode": "payment",
            "line_items": [
                {
                    "price_data": {
                        "currency": item.currency,
                        "product_data": {"name": item.name, "description": item.description},
                        "unit_amount": item.unit_amount,
                    },
                    "quantity": item.quantity,
                }
            ],
            "return_url": request.return_url,
            "metadata": dict(request.metadata),
        }
        if request.customer_email:
            params["customer_email"] = request.customer_email
        return params

    async def create_checkout_session(self, request: CheckoutSessionRequest) -> CheckoutSession:
        try:
            session = await stripe.checkout.Session.create_async(
                api_key=self.secret_key,
                stripe_version=self.api_version,
                **self._session_params(request),
            )
        except stripe.StripeError as exc:
            message = exc.user_message or str(exc) or "Stripe request failed"
            logger.error(f"Stripe checkout session failed: {exc.http_status} {message}")
            raise PaymentGatewayError(message) from exc

        if not session.get("id") or not session.get("client_secret"):
            raise PaymentGatewayError("Stripe returned no checkout session")

        return CheckoutSession(id=session["id"], client_secret=session["client_secret"])
