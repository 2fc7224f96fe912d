from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.services.payment_gateway import CheckoutSession, PaymentGatewayError
from src.app.use_cases.checkout import (
    CreateChangeOrderCheckoutCommand,
    CreateChangeOrderCheckoutUseCase,
    to_minor_units,
)

SITE_URL = "https://roofingfriend.example"


@pytest.fixture
def mock_payments():
    payments = MagicMock()
    payments.is_configured = True
    payments.create_checkout_session = AsyncMock(
        return_value=CheckoutSession(id="cs_test_1", client_secret="cs_test_1_secret")
    )
    return payments


@pytest.mark.parametrize(
    "amount, cents",
    [
        (125.5, 12550),
        (0.01, 1),
        (19.995, 2000),
        (1234.565, 123457),
        (100, 10000),
        (1.005, 100),
        (0.285, 28),
    ],
)
def test_to_minor_units_rounds_float_product_half_up(amount, cents):
    assert to_minor_units(amount) == cents


@pytest.mark.asyncio
async def test_creates_session_with_change_order_metadata(mock_payments):
    command = CreateChangeOrderCheckoutCommand(
        change_order_id="9f1c2d3e-aaaa-bbbb-cccc-000000000001",
        amount=125.5,
        customer_email="  client@example.com ",
        project_slug="smith-residence",
        is_partial_payment=True,
    )

    result = await CreateChangeOrderCheckoutUseCase(mock_payments, SITE_URL).execute(command)

    assert result.value.client_secret == "cs_test_1_secret"
    request = mock_payments.create_checkout_session.call_args.args[0]
    assert request.line_item.unit_amount == 12550
    assert request.line_item.currency == "usd"
    assert request.line_item.name == "Change Order 9f1c2d3e"
    assert request.customer_email == "client@example.com"
    assert request.return_url == (
        f"{SITE_URL}/portal/smith-residence/change-order-complete"
        "?session_id={CHECKOUT_SESSION_ID}"
    )
    assert request.metadata == {
        "change_order_id": "9f1c2d3e-aaaa-bbbb-cccc-000000000001",
        "type": "change_order",
        "is_partial_payment": "true",
    }


@pytest.mark.asyncio
async def test_uses_co_number_and_site_return_url(mock_payments):
    command = CreateChangeOrderCheckoutCommand(
        change_order_id="co-1", amount=10, co_number="CO-007", customer_email="   "
    )

    await CreateChangeOrderCheckoutUseCase(mock_payments, SITE_URL + "/").execute(command)

    request = mock_payments.create_checkout_session.call_args.args[0]
    assert request.line_item.name == "Change Order CO-007"
    assert request.customer_email is None
    assert request.return_url.startswith(f"{SITE_URL}/change-order-complete?session_id=")


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", [None, 0])
async def test_missing_amount_is_missing_fields(mock_payments, amount):
    command = CreateChangeOrderCheckoutCommand(change_order_id="co-1", amount=amount)

    result = await CreateChangeOrderCheckoutUseCase(mock_payments, SITE_URL).execute(command)

    assert result.error.code == "MISSING_REQUIRED_FIELDS"
    assert result.error.message == "Missing required fields"
    mock_payments.create_checkout_session.assert_not_awaited()


@pytest.mark.asyncio
async def test_negative_amount_rejected_before_provider_call(mock_payments):
    command = CreateChangeOrderCheckoutCommand(change_order_id="co-1", amount=-5)

    result = await CreateChangeOrderCheckoutUseCase(mock_payments, SITE_URL).execute(command)

    assert result.error.code == "INVALID_AMOUNT"
    assert result.error.message == "Amount must be greater than zero"
    mock_payments.create_checkout_session.assert_not_awaited()


@pytest.mark.asyncio
async def test_unconfigured_payments(mock_payments):
    mock_payments.is_configured = False
    command = CreateChangeOrderCheckoutCommand(change_order_id="co-1", amount=5)

    result = await CreateChangeOrderCheckoutUseCase(mock_payments, SITE_URL).execute(command)

    assert result.error.code == "PAYMENTS_NOT_CONFIGURED"


@pytest.mark.asyncio
async def test_provider_failure(mock_payments):
    mock_payments.create_checkout_session.side_effect = PaymentGatewayError("card_declined")
    command = CreateChangeOrderCheckoutCommand(change_order_id="co-1", amount=5)

    result = await CreateChangeOrderCheckoutUseCase(mock_payments, SITE_URL).execute(command)

    assert result.error.code == "CHECKOUT_FAILED"
    assert result.error.message == "card_declined"
