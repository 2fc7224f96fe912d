import pytest

from src.app.services.ai_gateway import AiGatewayError, ToolCall
from src.app.use_cases.parsing import (
    ParseEstimateCommand,
    ParseEstimatePdfUseCase,
    ParsePurchaseOrderCommand,
    ParsePurchaseOrderPdfUseCase,
)
from tests.fixtures.json_loader import TestDataLoader

MODEL = "test-model"


@pytest.mark.asyncio
async def test_estimate_totals_default_missing_to_zero(mock_ai):
    mock_ai.call_function.return_value = ToolCall(
        "extract_estimate_totals", TestDataLoader.get_json("estimate_tool_arguments")
    )

    result = await ParseEstimatePdfUseCase(mock_ai, MODEL).execute(
        ParseEstimateCommand(raw_text="CONTRACT PRICE $48,250.00 ...")
    )

    totals = result.value
    assert totals.contract_price == 48250.0
    assert totals.labor_total == 15200.5
    assert totals.materials_total == 21400
    assert totals.overhead_total == 4825
    assert totals.profit_total == 0
    kwargs = mock_ai.call_function.call_args.kwargs
    assert kwargs["model"] == MODEL
    assert kwargs["function_name"] == "extract_estimate_totals"
    assert "CONTRACT PRICE $48,250.00" in kwargs["user_prompt"]


@pytest.mark.asyncio
async def test_estimate_requires_text(mock_ai):
    result = await ParseEstimatePdfUseCase(mock_ai, MODEL).execute(ParseEstimateCommand(raw_text=""))

    assert result.error.code == "MISSING_TEXT"
    mock_ai.call_function.assert_not_awaited()


@pytest.mark.asyncio
async def test_estimate_unconfigured_gateway(mock_ai):
    mock_ai.is_configured = False

    result = await ParseEstimatePdfUseCase(mock_ai, MODEL).execute(ParseEstimateCommand(raw_text="x"))

    assert result.error.code == "AI_NOT_CONFIGURED"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status_code, code",
    [(429, "UPSTREAM_RATE_LIMITED"), (402, "UPSTREAM_PAYMENT_REQUIRED"), (500, "AI_GATEWAY_ERROR")],
)
async def test_estimate_upstream_errors(mock_ai, status_code, code):
    mock_ai.call_function.side_effect = AiGatewayError(status_code, "upstream body")

    result = await ParseEstimatePdfUseCase(mock_ai, MODEL).execute(ParseEstimateCommand(raw_text="x"))

    assert result.error.code == code


@pytest.mark.asyncio
async def test_estimate_without_tool_call_fails(mock_ai):
    mock_ai.call_function.return_value = None

    result = await ParseEstimatePdfUseCase(mock_ai, MODEL).execute(ParseEstimateCommand(raw_text="x"))

    assert result.error.code == "EXTRACTION_FAILED"


@pytest.mark.asyncio
async def test_purchase_order_items_get_defaults(mock_ai):
    mock_ai.call_function.return_value = ToolCall(
        "extract_materials", TestDataLoader.get_json("purchase_order_tool_arguments")
    )

    result = await ParsePurchaseOrderPdfUseCase(mock_ai, MODEL).execute(
        ParsePurchaseOrderCommand(pdf_text="MATERIAL ORDER ...")
    )

    response = result.value
    assert response.error is None
    assert len(response.items) == 3

    panel, screws, empty = response.items
    assert panel.item_name == "24ga Standing Seam Panel"
    assert panel.total == 3675

    assert screws.category == "General Materials"
    assert screws.quantity == 2
    assert screws.unit == "EA"
    assert screws.total == 0

    assert empty.item_name == "Unknown Item"
    assert empty.quantity == 1
    assert empty.measurement == ""
    assert empty.unit_cost == 0


@pytest.mark.asyncio
async def test_purchase_order_missing_tool_call_is_soft_failure(mock_ai):
    mock_ai.call_function.return_value = None

    result = await ParsePurchaseOrderPdfUseCase(mock_ai, MODEL).execute(
        ParsePurchaseOrderCommand(pdf_text="x")
    )

    assert result.is_ok()
    assert result.value.items == []
    assert result.value.error == "Failed to extract materials"


@pytest.mark.asyncio
async def test_purchase_order_unparsable_arguments_is_soft_failure(mock_ai):
    mock_ai.call_function.return_value = ToolCall("extract_materials", "{not json")

    result = await ParsePurchaseOrderPdfUseCase(mock_ai, MODEL).execute(
        ParsePurchaseOrderCommand(pdf_text="x")
    )

    assert result.value.items == []
    assert result.value.error == "Failed to parse AI response"


@pytest.mark.asyncio
async def test_purchase_order_upstream_failure(mock_ai):
    mock_ai.call_function.side_effect = AiGatewayError(503)

    result = await ParsePurchaseOrderPdfUseCase(mock_ai, MODEL).execute(
        ParsePurchaseOrderCommand(pdf_text="x")
    )

    assert result.error.code == "AI_GATEWAY_ERROR"
    assert result.error.message == "Failed to parse PDF"
