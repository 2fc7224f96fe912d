"""
AdminUser Entity

Legacy "is this user an admin" flag kept alongside memberships.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class AdminUser(SQLModel, table=True):
    """
    AdminUser entity - compatibility record for legacy admin checks.

    Business Rules:
    - One row per user_id (upserted on auto-promotion)
    - is_active=True grants admin dashboard access regardless of tenant
    """

    __tablename__ = "admin_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(unique=True, index=True, nullable=False)
    email: Optional[str] = Field(default=None, max_length=255)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC).replace(tzinfo=None), sa_column=Column(DateTime)
    )
