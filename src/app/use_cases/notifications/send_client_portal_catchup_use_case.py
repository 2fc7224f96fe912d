"""
Send Client Portal Catch-up Use Case

Texts the client a summary of recent project updates with a portal link.
"""

import logging
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.sms_gateway import ISmsGateway, SmsDeliveryError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.phone import format_phone_to_e164, is_valid_phone

from .dtos import (
    SendClientPortalCatchupCommand,
    SendClientPortalCatchupResponse,
    SmsFailureDetails,
)

logger = logging.getLogger(__name__)

LOG_PREFIX = "[send-client-portal-catchup]"


class SendClientPortalCatchupUseCase:
    """
    Use case for sending a catch-up SMS to a project's client.

    Business Rules:
    - projectId and projectName are required
    - Client phone must be a valid US number before anything is sent
    - Portal URL falls back to the site URL when the project has no portal slug
    - client_last_notified_at is stamped after a successful send; a failed
      stamp does not fail the request
    """

    def __init__(
        self,
        uow: UnitOfWork,
        sms: ISmsGateway,
        site_url: str,
        signature: str = "The Roofing Friend Team",
    ):
        self.uow = uow
        self.sms = sms
        self.site_url = site_url.rstrip("/")
        self.signature = signature

    async def execute(
        self, command: SendClientPortalCatchupCommand
    ) -> Result[SendClientPortalCatchupResponse]:
        logger.info(
            f"{LOG_PREFIX} Request: project_id={command.project_id} "
            f"project_name={command.project_name}"
        )

        if not command.project_id or not command.project_name:
            logger.error(f"{LOG_PREFIX} Missing required fields: projectId or projectName")
            return Return.err(
                Error(
                    "MISSING_REQUIRED_FIELDS",
                    "Missing required fields: projectId and projectName",
                )
            )

        try:
            project_id = UUID(command.project_id)
        except ValueError:
            return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                logger.error(f"{LOG_PREFIX} Project not found: {project_id}")
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            if not project.client_phone or not is_valid_phone(project.client_phone):
                logger.error(f"{LOG_PREFIX} No valid client phone number on project")
                return Return.err(
                    Error("INVALID_CLIENT_PHONE", "No valid client phone number on project")
                )

            portal_url = self.site_url
            try:
                portal_access = await self.uow.projects.get_portal_access(project_id)
            except SQLAlchemyError as exc:
                logger.error(f"{LOG_PREFIX} Error fetching portal access: {exc}")
                portal_access = None

            if portal_access is not None and portal_access.url_slug:
                portal_url = f"{self.site_url}/client-portal/{portal_access.url_slug}"
            logger.info(f"{LOG_PREFIX} Portal URL: {portal_url}")

            if not self.sms.is_configured:
                logger.error(f"{LOG_PREFIX} Twilio credentials not configured")
                return Return.err(
                    Error(
                        "SMS_NOT_CONFIGURED",
                        "SMS service not configured",
                        details=SmsFailureDetails(portal_url=portal_url),
                    )
                )

            formatted_phone = format_phone_to_e164(project.client_phone)
            sms_message = (
                f"🔔 Project Update: {command.project_name}\n\n"
                f"{command.updates_summary}\n\n"
                f"View all updates: {portal_url}\n\n"
                f"- {self.signature}"
            )

            logger.info(f"{LOG_PREFIX} Sending catch-up SMS to: {formatted_phone}")
            try:
                sid = await self.sms.send(formatted_phone, sms_message)
            except SmsDeliveryError as exc:
                logger.error(f"{LOG_PREFIX} Twilio SMS failed: {exc.provider_response}")
                return Return.err(
                    Error(
                        "SMS_FAILED",
                        "Failed to send SMS",
                        details=SmsFailureDetails(
                            portal_url=portal_url, twilio_error=exc.provider_response
                        ),
                    )
                )

            logger.info(f"{LOG_PREFIX} SMS sent successfully: {sid}")

            notified_at = datetime.now(UTC)
            try:
                project.client_last_notified_at = notified_at.replace(tzinfo=None)
                await self.uow.projects.update(project)
                await self.uow.commit()
                logger.info(f"{LOG_PREFIX} Updated client_last_notified_at timestamp")
            except SQLAlchemyError as exc:
                logger.error(f"{LOG_PREFIX} Failed to update client_last_notified_at: {exc}")

            return Return.ok(
                SendClientPortalCatchupResponse(
                    success=True,
                    message="Catch-up notification sent to client",
                    portal_url=portal_url,
                    sms_sent=True,
                    notified_at=notified_at.isoformat(),
                )
            )
