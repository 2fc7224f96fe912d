from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.project_repository import (
    IChangeOrderRepository,
    IProjectRepository,
)
from src.domain.entities import ChangeOrder, ClientPortalAccess, Project


class ProjectRepository(IProjectRepository):
    """Project repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        stmt = select(Project).where(Project.id == project_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, project: Project) -> Project:
        """Update existing project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def get_portal_access(self, project_id: UUID) -> Optional[ClientPortalAccess]:
        """Get the client portal link of a project"""
        stmt = select(ClientPortalAccess).where(ClientPortalAccess.project_id == project_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()


class ChangeOrderRepository(IChangeOrderRepository):
    """Change order repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, change_order_id: UUID) -> Optional[ChangeOrder]:
        """Get change order by ID"""
        stmt = select(ChangeOrder).where(ChangeOrder.id == change_order_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
