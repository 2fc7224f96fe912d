from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from src.app.use_cases.registration import (
    RegisterTenantUserCommand,
    RegisterTenantUserUseCase,
)
from src.domain.entities import Membership, MembershipRole, MembershipStatus


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with the repositories registration touches"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.memberships = MagicMock()
    uow.memberships.get_by_user_and_tenant = AsyncMock(return_value=None)
    uow.memberships.count_by_tenant = AsyncMock(return_value=0)
    uow.memberships.create = AsyncMock(side_effect=lambda membership: membership)

    uow.admin_users = MagicMock()
    uow.admin_users.upsert = AsyncMock()
    return uow


def _command(**overrides):
    data = {
        "user_id": str(uuid4()),
        "user_email": None,
        "user_phone": "+15105550142",
        "user_metadata": {},
        "tenant_id": str(uuid4()),
        "phone": "+15105550142",
    }
    data.update(overrides)
    return RegisterTenantUserCommand(**data)


@pytest.mark.asyncio
async def test_first_user_becomes_auto_admin(mock_uow):
    # Act
    result = await RegisterTenantUserUseCase(mock_uow).execute(_command())

    # Assert
    assert result.is_ok()
    response = result.value
    assert response.role == MembershipRole.admin
    assert response.status == MembershipStatus.active
    assert response.is_auto_admin is True
    assert response.message == "Welcome! You have been automatically assigned as an admin."
    mock_uow.admin_users.upsert.assert_awaited_once()
    assert mock_uow.commit.await_count == 2


@pytest.mark.asyncio
async def test_third_user_is_pending(mock_uow):
    mock_uow.memberships.count_by_tenant.return_value = 2

    result = await RegisterTenantUserUseCase(mock_uow).execute(_command())

    response = result.value
    assert response.role == MembershipRole.member
    assert response.status == MembershipStatus.pending
    assert response.is_auto_admin is False
    mock_uow.admin_users.upsert.assert_not_awaited()


@pytest.mark.asyncio
async def test_system_owner_bypasses_admin_count(mock_uow):
    mock_uow.memberships.count_by_tenant.return_value = 5

    result = await RegisterTenantUserUseCase(mock_uow).execute(_command(is_system_owner=True))

    response = result.value
    assert response.role == MembershipRole.owner
    assert response.status == MembershipStatus.active
    mock_uow.admin_users.upsert.assert_awaited_once()


@pytest.mark.asyncio
async def test_existing_membership_is_returned_unchanged(mock_uow):
    # Arrange
    existing = Membership(
        id=uuid4(),
        tenant_id=uuid4(),
        user_id=uuid4(),
        name="Jane",
        role=MembershipRole.member,
        status=MembershipStatus.pending,
    )
    mock_uow.memberships.get_by_user_and_tenant.return_value = existing

    # Act
    result = await RegisterTenantUserUseCase(mock_uow).execute(_command())

    # Assert
    response = result.value
    assert response.role == MembershipRole.member
    assert response.status == MembershipStatus.pending
    assert response.is_auto_admin is False
    assert response.message == "Welcome back! You are logged in as member."
    assert response.member.id == str(existing.id)
    mock_uow.memberships.create.assert_not_awaited()
    mock_uow.memberships.count_by_tenant.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_tenant_id(mock_uow):
    result = await RegisterTenantUserUseCase(mock_uow).execute(_command(tenant_id=None))

    assert result.is_err()
    assert result.error.code == "MISSING_TENANT_ID"


@pytest.mark.asyncio
async def test_invalid_tenant_id(mock_uow):
    result = await RegisterTenantUserUseCase(mock_uow).execute(_command(tenant_id="acme"))

    assert result.error.code == "INVALID_TENANT_ID"


@pytest.mark.asyncio
async def test_invalid_user_id_is_authentication_error(mock_uow):
    result = await RegisterTenantUserUseCase(mock_uow).execute(_command(user_id="anonymous"))

    assert result.error.code == "INVALID_AUTHENTICATION"


@pytest.mark.asyncio
async def test_name_and_email_fallbacks(mock_uow):
    command = _command(
        user_email=None,
        user_phone="+15105550142",
        user_metadata={"full_name": "Jane Roe"},
        name=None,
    )

    await RegisterTenantUserUseCase(mock_uow).execute(command)

    created = mock_uow.memberships.create.call_args.args[0]
    assert created.name == "Jane Roe"
    assert created.email == "+15105550142"


@pytest.mark.asyncio
async def test_name_defaults_to_phone(mock_uow):
    await RegisterTenantUserUseCase(mock_uow).execute(_command(user_metadata={}))

    created = mock_uow.memberships.create.call_args.args[0]
    assert created.name == "+15105550142"


@pytest.mark.asyncio
async def test_count_failure_is_treated_as_zero(mock_uow):
    mock_uow.memberships.count_by_tenant.side_effect = OperationalError("SELECT", {}, Exception("down"))

    result = await RegisterTenantUserUseCase(mock_uow).execute(_command())

    assert result.value.role == MembershipRole.admin


@pytest.mark.asyncio
async def test_concurrent_insert_returns_existing_row(mock_uow):
    # Arrange
    winner = Membership(
        id=uuid4(),
        tenant_id=uuid4(),
        user_id=uuid4(),
        role=MembershipRole.admin,
        status=MembershipStatus.active,
    )
    mock_uow.memberships.get_by_user_and_tenant.side_effect = [None, winner]
    mock_uow.memberships.create.side_effect = IntegrityError("INSERT", {}, Exception("unique"))

    # Act
    result = await RegisterTenantUserUseCase(mock_uow).execute(_command())

    # Assert
    assert result.is_ok()
    assert result.value.member.id == str(winner.id)
    assert result.value.message == "Welcome back! You are logged in as admin."
    mock_uow.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_insert_failure_returns_details(mock_uow):
    mock_uow.memberships.create.side_effect = OperationalError("INSERT", {}, Exception("disk full"))

    result = await RegisterTenantUserUseCase(mock_uow).execute(_command())

    assert result.error.code == "REGISTRATION_FAILED"
    assert "disk full" in result.error.details


@pytest.mark.asyncio
async def test_admin_flag_failure_is_not_fatal(mock_uow):
    mock_uow.admin_users.upsert.side_effect = OperationalError("UPSERT", {}, Exception("locked"))

    result = await RegisterTenantUserUseCase(mock_uow).execute(_command())

    assert result.is_ok()
    assert result.value.role == MembershipRole.admin
    mock_uow.rollback.assert_awaited_once()
