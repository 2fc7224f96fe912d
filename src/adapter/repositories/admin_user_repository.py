from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.admin_user_repository import IAdminUserRepository
from src.domain.entities import AdminUser


class AdminUserRepository(IAdminUserRepository):
    """Admin flag repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_active_by_user_id(self, user_id: UUID) -> Optional[AdminUser]:
        """Get the admin flag of a user if it is active"""
        stmt = select(AdminUser).where(
            AdminUser.user_id == user_id, AdminUser.is_active.is_(True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, user_id: UUID, email: Optional[str], is_active: bool) -> AdminUser:
        """Create or update the admin flag, keyed by user_id"""
        stmt = select(AdminUser).where(AdminUser.user_id == user_id)
        result = await self.session.execute(stmt)
        admin_user = result.scalar_one_or_none()

        if admin_user is None:
            admin_user = AdminUser(user_id=user_id, email=email, is_active=is_active)
        else:
            admin_user.email = email
            admin_user.is_active = is_active

        self.session.add(admin_user)
        await self.session.flush()
        await self.session.refresh(admin_user)
        return admin_user
