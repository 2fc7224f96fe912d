from datetime import datetime
from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.portal_alert_repository import IPortalAlertRepository
from src.domain.entities import ClientPortalAlert


class PortalAlertRepository(IPortalAlertRepository):
    """Client portal alert repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def acknowledge(
        self,
        project_id: UUID,
        item_type: str,
        item_id: str,
        acknowledged_at: datetime,
    ) -> List[ClientPortalAlert]:
        """Mark matching unacknowledged alerts as acknowledged, return the updated rows"""
        stmt = select(ClientPortalAlert).where(
            ClientPortalAlert.project_id == project_id,
            ClientPortalAlert.item_type == item_type,
            ClientPortalAlert.item_id == item_id,
            ClientPortalAlert.is_acknowledged.is_(False),
        )
        result = await self.session.execute(stmt)
        alerts = list(result.scalars().all())

        for alert in alerts:
            alert.is_acknowledged = True
            alert.acknowledged_at = acknowledged_at
            self.session.add(alert)

        await self.session.flush()
        return alerts
