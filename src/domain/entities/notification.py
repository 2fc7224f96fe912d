"""
TeamMemberNotification Entity

In-app notification shown in the admin dashboard.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from .enums import NotificationPriority


class TeamMemberNotification(SQLModel, table=True):
    __tablename__ = "team_member_notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    member_id: UUID = Field(foreign_key="team_directory.id", index=True)

    type: str = Field(max_length=64)
    title: str = Field(max_length=255)
    message: str
    priority: NotificationPriority = Field(default=NotificationPriority.normal)

    reference_type: Optional[str] = Field(default=None, max_length=64)
    reference_id: Optional[str] = Field(default=None, max_length=64)
    action_url: Optional[str] = None

    is_read: bool = Field(default=False)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC).replace(tzinfo=None), sa_column=Column(DateTime)
    )
