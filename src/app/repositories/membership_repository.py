from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Membership, MembershipRole, MembershipStatus


class IMembershipRepository(ABC):
    """Membership (team directory) repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_tenant(
        self, user_id: UUID, tenant_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and tenant"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[Membership]:
        """Get the first membership of a user across tenants"""
        pass

    @abstractmethod
    async def count_by_tenant(
        self, tenant_id: UUID, status: MembershipStatus, role: MembershipRole
    ) -> int:
        """Count memberships of a tenant with the given status and role"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass

    @abstractmethod
    async def upsert(self, membership: Membership) -> Membership:
        """Insert, or overwrite role/status/contact of the (tenant, user) row"""
        pass
