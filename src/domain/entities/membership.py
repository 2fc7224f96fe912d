"""
Membership Entity

Links a user to a tenant with a role and an approval status.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import MembershipRole, MembershipStatus


class Membership(SQLModel, table=True):
    """
    Membership entity - one row of the tenant team directory.

    Business Rules:
    - (tenant_id, user_id) must be unique
    - Created on first login by the registration service
    - Role/status only change through admin approval, never on re-login
    - First two regular registrants of a tenant are auto-promoted to admin
    """

    __tablename__ = "team_directory"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    user_id: UUID = Field(nullable=False, index=True)

    name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)

    role: MembershipRole = Field(nullable=False)
    status: MembershipStatus = Field(default=MembershipStatus.pending)

    sms_notifications_enabled: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC).replace(tzinfo=None), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC).replace(tzinfo=None), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_team_directory_tenant_user", "tenant_id", "user_id", unique=True),
        Index("idx_team_directory_tenant_status_role", "tenant_id", "status", "role"),
    )
