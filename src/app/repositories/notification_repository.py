from abc import ABC, abstractmethod

from src.domain.entities import TeamMemberNotification


class INotificationRepository(ABC):
    """In-app notification repository interface - application layer"""

    @abstractmethod
    async def create(self, notification: TeamMemberNotification) -> TeamMemberNotification:
        """Create a new notification"""
        pass
