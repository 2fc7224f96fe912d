"""
Notify Change Order Approval Use Case

Texts the responsible team member when a client approves a change order.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.sms_gateway import ISmsGateway, SmsDeliveryError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import NotificationPriority, TeamMemberNotification
from src.domain.phone import format_phone_to_e164, is_valid_phone

from .dtos import NotifyChangeOrderApprovalCommand, NotifyChangeOrderApprovalResponse
from .formatting import format_whole_dollars

logger = logging.getLogger(__name__)

LOG_PREFIX = "[notify-change-order-approval]"


def _skipped(message: str) -> Result[NotifyChangeOrderApprovalResponse]:
    return Return.ok(NotifyChangeOrderApprovalResponse(success=False, message=message))


class NotifyChangeOrderApprovalUseCase:
    """
    Use case for notifying a team member of a change order approval.

    Business Rules:
    - Recipient: change order creator, else its project manager, else the
      project's manager
    - Delivery is best-effort: every missing precondition returns success=False
    - No SMS is attempted when notifications are disabled or the phone is invalid
    - A successful SMS is mirrored as an in-app notification
    """

    def __init__(self, uow: UnitOfWork, sms: ISmsGateway, signature: str = "Roofing Friend"):
        self.uow = uow
        self.sms = sms
        self.signature = signature

    async def execute(
        self, command: NotifyChangeOrderApprovalCommand
    ) -> Result[NotifyChangeOrderApprovalResponse]:
        if not command.change_order_id or not command.project_id:
            return Return.err(Error("MISSING_PARAMETERS", "Missing required parameters"))

        try:
            change_order_id = UUID(command.change_order_id)
            project_id = UUID(command.project_id)
        except ValueError:
            return Return.err(Error("INVALID_PARAMETERS", "Invalid changeOrderId or projectId"))

        logger.info(f"{LOG_PREFIX} Processing approval notification for CO: {change_order_id}")

        async with self.uow:
            change_order = await self.uow.change_orders.get_by_id(change_order_id)
            if change_order is None:
                logger.error(f"{LOG_PREFIX} Change order not found: {change_order_id}")
                return Return.err(Error("CHANGE_ORDER_NOT_FOUND", "Change order not found"))

            project = await self.uow.projects.get_by_id(project_id)

            recipient_id = change_order.created_by or change_order.project_manager_id
            if recipient_id is None and project is not None:
                recipient_id = project.project_manager_id

            if recipient_id is None:
                logger.info(f"{LOG_PREFIX} No recipient found for notification")
                return _skipped("No recipient found")

            if project is not None and project.tenant_id is not None:
                member = await self.uow.memberships.get_by_user_and_tenant(
                    recipient_id, project.tenant_id
                )
            else:
                member = await self.uow.memberships.get_by_user_id(recipient_id)

            if member is None:
                logger.info(f"{LOG_PREFIX} Team member not found for user: {recipient_id}")
                return _skipped("Team member not found")

            if member.sms_notifications_enabled is False:
                logger.info(f"{LOG_PREFIX} SMS notifications disabled for: {member.name}")
                return _skipped("SMS notifications disabled")

            if not member.phone:
                logger.info(f"{LOG_PREFIX} No phone number for: {member.name}")
                return _skipped("No phone number on file")

            if not is_valid_phone(member.phone):
                logger.info(f"{LOG_PREFIX} Invalid phone number for: {member.name}")
                return _skipped("Invalid phone number on file")

            phone_number = format_phone_to_e164(member.phone)

            project_address = (
                (project.address if project is not None else None)
                or command.project_name
                or "your project"
            )
            formatted_amount = format_whole_dollars(command.amount)
            display_co_number = command.co_number or "N/A"
            display_client_name = command.client_name or "A client"

            sms_message = (
                "✅ Change Order Approved!\n\n"
                f"{display_client_name} at {project_address} approved Change Order "
                f"#{display_co_number} for {formatted_amount}.\n\n"
                f"- {self.signature}"
            )

            if not self.sms.is_configured:
                logger.error(f"{LOG_PREFIX} Missing Twilio credentials")
                return _skipped("SMS service not configured")

            logger.info(f"{LOG_PREFIX} Sending SMS to: {phone_number}")
            try:
                sid = await self.sms.send(phone_number, sms_message)
            except SmsDeliveryError as exc:
                logger.error(f"{LOG_PREFIX} Twilio error: {exc} {exc.provider_response}")
                return _skipped("Failed to send SMS")

            logger.info(f"{LOG_PREFIX} SMS sent successfully: {sid}")

            notification = TeamMemberNotification(
                member_id=member.id,
                type="change_order_approved",
                title="Change Order Approved",
                message=(
                    f"{display_client_name} approved CO #{display_co_number} "
                    f"for {formatted_amount}"
                ),
                priority=NotificationPriority.high,
                reference_type="change_order",
                reference_id=str(change_order_id),
                action_url=f"/admin/projects/{project_id}",
            )
            try:
                await self.uow.notifications.create(notification)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error(f"{LOG_PREFIX} Failed to create in-app notification: {exc}")

            return Return.ok(
                NotifyChangeOrderApprovalResponse(
                    success=True,
                    message="Notification sent",
                    recipient_name=member.name,
                )
            )
