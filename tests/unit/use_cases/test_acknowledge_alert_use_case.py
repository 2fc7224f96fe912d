from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from src.app.use_cases.portal import AcknowledgeAlertCommand, AcknowledgeAlertUseCase
from src.domain.entities import ClientPortalAlert


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock()
    uow.portal_alerts.acknowledge = AsyncMock(return_value=[])
    return uow


@pytest.mark.asyncio
async def test_reports_number_of_acknowledged_alerts(mock_uow):
    project_id = uuid4()
    mock_uow.portal_alerts.acknowledge.return_value = [
        ClientPortalAlert(project_id=project_id, item_type="estimate", item_id="e1"),
        ClientPortalAlert(project_id=project_id, item_type="estimate", item_id="e1"),
    ]
    command = AcknowledgeAlertCommand(item_type="estimate", item_id="e1", project_id=str(project_id))

    result = await AcknowledgeAlertUseCase(mock_uow).execute(command)

    assert result.value.success is True
    assert result.value.acknowledged == 2
    args = mock_uow.portal_alerts.acknowledge.call_args.args
    assert args[:3] == (project_id, "estimate", "e1")


@pytest.mark.asyncio
async def test_missing_fields(mock_uow):
    result = await AcknowledgeAlertUseCase(mock_uow).execute(
        AcknowledgeAlertCommand(item_type="estimate", item_id="e1")
    )

    assert result.error.code == "MISSING_PARAMETERS"
    mock_uow.portal_alerts.acknowledge.assert_not_awaited()


@pytest.mark.asyncio
async def test_database_failure(mock_uow):
    mock_uow.portal_alerts.acknowledge.side_effect = OperationalError("UPDATE", {}, Exception("x"))
    command = AcknowledgeAlertCommand(item_type="estimate", item_id="e1", project_id=str(uuid4()))

    result = await AcknowledgeAlertUseCase(mock_uow).execute(command)

    assert result.error.code == "ACKNOWLEDGE_FAILED"


@pytest.mark.asyncio
async def test_acknowledged_at_is_naive_utc_now(mock_uow):
    command = AcknowledgeAlertCommand(item_type="estimate", item_id="e1", project_id=str(uuid4()))

    await AcknowledgeAlertUseCase(mock_uow).execute(command)

    acknowledged_at = mock_uow.portal_alerts.acknowledge.call_args.args[3]
    assert acknowledged_at.tzinfo is None
    now = datetime.now(UTC).replace(tzinfo=None)
    assert now - timedelta(minutes=1) <= acknowledged_at <= now
