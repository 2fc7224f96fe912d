from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.membership_repository import IMembershipRepository
from src.domain.entities import Membership, MembershipRole, MembershipStatus


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_tenant(
        self, user_id: UUID, tenant_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and tenant"""
        stmt = select(Membership).where(
            Membership.user_id == user_id, Membership.tenant_id == tenant_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_id(self, user_id: UUID) -> Optional[Membership]:
        """Get the first membership of a user across tenants"""
        stmt = (
            select(Membership)
            .where(Membership.user_id == user_id)
            .order_by(Membership.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_by_tenant(
        self, tenant_id: UUID, status: MembershipStatus, role: MembershipRole
    ) -> int:
        """Count memberships of a tenant with the given status and role"""
        stmt = select(func.count()).select_from(Membership).where(
            Membership.tenant_id == tenant_id,
            Membership.status == status,
            Membership.role == role,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def upsert(self, membership: Membership) -> Membership:
        """Insert, or overwrite role/status/contact of the (tenant, user) row"""
        existing = await self.get_by_user_and_tenant(membership.user_id, membership.tenant_id)
        if existing is None:
            return await self.create(membership)

        existing.name = membership.name
        existing.email = membership.email
        existing.role = membership.role
        existing.status = membership.status
        existing.updated_at = datetime.now(UTC).replace(tzinfo=None)
        self.session.add(existing)
        await self.session.flush()
        await self.session.refresh(existing)
        return existing
