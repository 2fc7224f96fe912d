"""
Register Tenant User Use Case

Bootstraps the membership of a user logging in to a tenant for the first time.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Membership, MembershipRole, MembershipStatus
from src.domain.registration_policy import decide_role, welcome_back_message

from .dtos import MemberRecord, RegisterTenantUserCommand, RegisterTenantUserResponse

logger = logging.getLogger(__name__)


class RegisterTenantUserUseCase:
    """
    Use case for registering an authenticated user with a tenant.

    Business Rules:
    - Idempotent per (tenant, user): an existing membership is returned unchanged
    - System owner gets owner/active regardless of the admin count
    - First two regular users get admin/active, later users member/pending
    - Auto-promoted users also get an active admin_users flag
    - Admin count lookup failure is logged and counted as zero
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @staticmethod
    def _existing_response(membership: Membership) -> RegisterTenantUserResponse:
        return RegisterTenantUserResponse(
            role=membership.role,
            status=membership.status,
            is_auto_admin=False,
            message=welcome_back_message(membership.role),
            member=MemberRecord.from_entity(membership),
        )

    async def execute(
        self, command: RegisterTenantUserCommand
    ) -> Result[RegisterTenantUserResponse]:
        """
        Execute register tenant user use case.

        Args:
            command: Caller identity and registration request

        Returns:
            Result with RegisterTenantUserResponse, or Error
        """
        if not command.tenant_id:
            return Return.err(Error("MISSING_TENANT_ID", "Missing tenantId"))

        try:
            user_id = UUID(command.user_id)
        except ValueError:
            return Return.err(Error("INVALID_AUTHENTICATION", "Invalid authentication"))

        try:
            tenant_id = UUID(command.tenant_id)
        except ValueError:
            return Return.err(Error("INVALID_TENANT_ID", "Invalid tenantId"))

        logger.info(
            f"Registering user: user_id={user_id} tenant_id={tenant_id} phone={command.phone}"
        )

        async with self.uow:
            existing = await self.uow.memberships.get_by_user_and_tenant(user_id, tenant_id)
            if existing is not None:
                logger.info(f"Existing member found: {existing.id} role={existing.role.value}")
                return Return.ok(self._existing_response(existing))

            try:
                admin_count = await self.uow.memberships.count_by_tenant(
                    tenant_id, MembershipStatus.active, MembershipRole.admin
                )
            except SQLAlchemyError as exc:
                logger.error(f"Error counting admins for tenant {tenant_id}: {exc}")
                admin_count = 0

            logger.info(f"Current active admin count: {admin_count}")
            decision = decide_role(command.is_system_owner, admin_count)

            email = command.user_email or command.user_phone or command.phone
            name = (
                command.name
                or command.user_metadata.get("name")
                or command.user_metadata.get("full_name")
                or command.phone
            )

            membership = Membership(
                tenant_id=tenant_id,
                user_id=user_id,
                name=name,
                email=email,
                phone=command.phone,
                role=decision.role,
                status=decision.status,
            )

            try:
                membership = await self.uow.memberships.create(membership)
                await self.uow.commit()
            except IntegrityError as exc:
                # Concurrent first login for the same (tenant, user) won the insert
                await self.uow.rollback()
                existing = await self.uow.memberships.get_by_user_and_tenant(user_id, tenant_id)
                if existing is not None:
                    logger.info(f"Membership created concurrently, returning {existing.id}")
                    return Return.ok(self._existing_response(existing))
                logger.error(f"Error creating team member: {exc}")
                return Return.err(
                    Error("REGISTRATION_FAILED", "Failed to register user", details=str(exc.orig))
                )
            except SQLAlchemyError as exc:
                logger.error(f"Error creating team member: {exc}")
                return Return.err(
                    Error("REGISTRATION_FAILED", "Failed to register user", details=str(exc))
                )

            logger.info(f"New member created: {membership.id} role={decision.role.value}")

            if decision.is_auto_admin and decision.role.is_admin:
                try:
                    await self.uow.admin_users.upsert(user_id, email, is_active=True)
                    await self.uow.commit()
                except SQLAlchemyError as exc:
                    await self.uow.rollback()
                    logger.error(f"Error adding to admin_users: {exc}")

            return Return.ok(
                RegisterTenantUserResponse(
                    role=decision.role,
                    status=decision.status,
                    is_auto_admin=decision.is_auto_admin,
                    message=decision.message,
                    member=MemberRecord.from_entity(membership),
                )
            )
