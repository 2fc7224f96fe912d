from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import ChangeOrder, ClientPortalAccess, Project


class IProjectRepository(ABC):
    """Project repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        pass

    @abstractmethod
    async def update(self, project: Project) -> Project:
        """Update existing project"""
        pass

    @abstractmethod
    async def get_portal_access(self, project_id: UUID) -> Optional[ClientPortalAccess]:
        """Get the client portal link of a project"""
        pass


class IChangeOrderRepository(ABC):
    """Change order repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, change_order_id: UUID) -> Optional[ChangeOrder]:
        """Get change order by ID"""
        pass
