from abc import ABC, abstractmethod

from src.app.repositories.admin_user_repository import IAdminUserRepository
from src.app.repositories.membership_repository import IMembershipRepository
from src.app.repositories.notification_repository import INotificationRepository
from src.app.repositories.portal_alert_repository import IPortalAlertRepository
from src.app.repositories.project_repository import (
    IChangeOrderRepository,
    IProjectRepository,
)
from src.app.repositories.tenant_repository import ITenantRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    tenants: ITenantRepository
    memberships: IMembershipRepository
    admin_users: IAdminUserRepository
    projects: IProjectRepository
    change_orders: IChangeOrderRepository
    portal_alerts: IPortalAlertRepository
    notifications: INotificationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
