import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_sms():
    sms = MagicMock()
    sms.is_configured = True
    sms.send = AsyncMock(return_value="SM123")
    return sms


@pytest.fixture
def mock_ai():
    ai = MagicMock()
    ai.is_configured = True
    ai.call_function = AsyncMock()
    return ai
