"""
Client Portal Entities

Per-project portal link and the alerts shown to the client there.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class ClientPortalAccess(SQLModel, table=True):
    """Public portal slug of a project"""

    __tablename__ = "client_portal_access"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", unique=True, index=True)
    url_slug: str = Field(max_length=255, unique=True)


class ClientPortalAlert(SQLModel, table=True):
    """
    Alert about a project item (change order, invoice, ...) awaiting client
    acknowledgement.
    """

    __tablename__ = "client_portal_alerts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", nullable=False)

    item_type: str = Field(max_length=64)
    item_id: str = Field(max_length=64)

    is_acknowledged: bool = Field(default=False)
    acknowledged_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC).replace(tzinfo=None), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_portal_alert_item", "project_id", "item_type", "item_id"),
    )
