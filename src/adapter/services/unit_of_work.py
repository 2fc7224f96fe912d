from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.admin_user_repository import AdminUserRepository
from src.adapter.repositories.membership_repository import MembershipRepository
from src.adapter.repositories.notification_repository import NotificationRepository
from src.adapter.repositories.portal_alert_repository import PortalAlertRepository
from src.adapter.repositories.project_repository import (
    ChangeOrderRepository,
    ProjectRepository,
)
from src.adapter.repositories.tenant_repository import TenantRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.tenants = TenantRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.admin_users = AdminUserRepository(self.session)
        self.projects = ProjectRepository(self.session)
        self.change_orders = ChangeOrderRepository(self.session)
        self.portal_alerts = PortalAlertRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
