from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import AdminUser


class IAdminUserRepository(ABC):
    """Legacy admin flag repository interface - application layer"""

    @abstractmethod
    async def get_active_by_user_id(self, user_id: UUID) -> Optional[AdminUser]:
        """Get the admin flag of a user if it is active"""
        pass

    @abstractmethod
    async def upsert(self, user_id: UUID, email: Optional[str], is_active: bool) -> AdminUser:
        """Create or update the admin flag, keyed by user_id"""
        pass
