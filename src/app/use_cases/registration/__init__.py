"""
Registration Use Cases

Tenant membership bootstrap on first login.
"""

from .dtos import MemberRecord, RegisterTenantUserCommand, RegisterTenantUserResponse
from .register_tenant_user_use_case import RegisterTenantUserUseCase

__all__ = [
    "RegisterTenantUserUseCase",
    "RegisterTenantUserCommand",
    "RegisterTenantUserResponse",
    "MemberRecord",
]
