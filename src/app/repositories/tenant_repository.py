from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Tenant, TenantBranding, TenantProfile


class ITenantRepository(ABC):
    """Tenant repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID"""
        pass

    @abstractmethod
    async def get_profile(self, tenant_id: UUID) -> Optional[TenantProfile]:
        """Get the business profile of a tenant"""
        pass

    @abstractmethod
    async def get_branding(self, tenant_id: UUID) -> Optional[TenantBranding]:
        """Get the branding of a tenant"""
        pass
