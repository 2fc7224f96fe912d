from abc import ABC, abstractmethod
from datetime import datetime
from typing import List
from uuid import UUID

from src.domain.entities import ClientPortalAlert


class IPortalAlertRepository(ABC):
    """Client portal alert repository interface - application layer"""

    @abstractmethod
    async def acknowledge(
        self,
        project_id: UUID,
        item_type: str,
        item_id: str,
        acknowledged_at: datetime,
    ) -> List[ClientPortalAlert]:
        """Mark matching unacknowledged alerts as acknowledged, return the updated rows"""
        pass
