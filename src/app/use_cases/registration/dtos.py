"""
Registration Use Case DTOs (Data Transfer Objects)

All Command and Response classes for tenant user registration.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel

from src.domain.base import CamelModel
from src.domain.entities import Membership, MembershipRole, MembershipStatus


class RegisterTenantUserCommand(BaseModel):
    """
    Register command - authenticated caller plus the request body

    Identity fields come from the verified bearer token, never from the body.
    """

    user_id: str
    user_email: Optional[str] = None
    user_phone: Optional[str] = None
    user_metadata: Dict[str, Any] = {}

    tenant_id: Optional[str] = None
    phone: Optional[str] = None
    name: Optional[str] = None
    is_system_owner: bool = False


class MemberRecord(BaseModel):
    """Stored team directory row, returned in its table shape"""

    id: str
    tenant_id: str
    user_id: str
    name: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    role: MembershipRole
    status: MembershipStatus
    created_at: Optional[datetime]

    @classmethod
    def from_entity(cls, membership: Membership) -> "MemberRecord":
        return cls(
            id=str(membership.id),
            tenant_id=str(membership.tenant_id),
            user_id=str(membership.user_id),
            name=membership.name,
            email=membership.email,
            phone=membership.phone,
            role=membership.role,
            status=membership.status,
            created_at=membership.created_at,
        )


class RegisterTenantUserResponse(CamelModel):
    """Response for register tenant user use case"""

    role: MembershipRole
    status: MembershipStatus
    is_auto_admin: bool
    message: str
    member: Optional[MemberRecord] = None
