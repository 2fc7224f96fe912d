from typing import Optional

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.registration import (
    RegisterTenantUserCommand,
    RegisterTenantUserResponse,
    RegisterTenantUserUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.base import CamelModel

router = APIRouter(tags=["Registration"])


class RegisterTenantUserRequest(CamelModel):
    """Register tenant user HTTP request payload"""

    tenant_id: Optional[str] = None
    phone: Optional[str] = None
    name: Optional[str] = None
    is_system_owner: bool = False


@router.post(
    "/register-tenant-user",
    response_model=RegisterTenantUserResponse,
    response_model_exclude_none=True,
)
async def register_tenant_user(
    request: RegisterTenantUserRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register the authenticated user with a tenant

    Creates the team directory membership on first login. The first two
    regular users become admins, later users wait for approval. Calling
    again returns the existing membership unchanged.

    Raises:
        - 400 Bad Request: Missing or invalid tenantId
        - 401 Unauthorized: Missing or invalid bearer token
        - 500 Internal Server Error: Membership could not be created
    """
    command = RegisterTenantUserCommand(
        user_id=current_user["sub"],
        user_email=current_user.get("email") or None,
        user_phone=current_user.get("phone") or None,
        user_metadata=current_user.get("user_metadata") or {},
        tenant_id=request.tenant_id,
        phone=request.phone,
        name=request.name,
        is_system_owner=request.is_system_owner,
    )

    use_case = RegisterTenantUserUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("MISSING_TENANT_ID", "INVALID_TENANT_ID"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "INVALID_AUTHENTICATION":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error, extra={"details": error.details})

    return result.value
