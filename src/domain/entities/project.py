"""
Project Entities

Customer projects and the change orders attached to them. Their lifecycle is
managed elsewhere; the endpoints here only read them and stamp notifications.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Project(SQLModel, table=True):
    """Customer project"""

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: Optional[UUID] = Field(default=None, index=True)

    name: str = Field(max_length=255)
    address: Optional[str] = None

    client_name: Optional[str] = None
    client_phone: Optional[str] = Field(default=None, max_length=32)
    client_email: Optional[str] = None

    project_manager_id: Optional[UUID] = None

    client_last_notified_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC).replace(tzinfo=None), sa_column=Column(DateTime)
    )


class ChangeOrder(SQLModel, table=True):
    """Contract amendment on a project"""

    __tablename__ = "change_orders"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", index=True)

    co_number: Optional[str] = Field(default=None, max_length=32)
    amount: Optional[float] = None

    created_by: Optional[UUID] = None
    project_manager_id: Optional[UUID] = None

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC).replace(tzinfo=None), sa_column=Column(DateTime)
    )
