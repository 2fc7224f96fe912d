"""
Acknowledge Client Portal Alert Use Case
"""

import logging
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import AcknowledgeAlertCommand, AcknowledgeAlertResponse

logger = logging.getLogger(__name__)

LOG_PREFIX = "[client-portal-acknowledge-alert]"


class AcknowledgeAlertUseCase:
    """
    Use case for acknowledging client portal alerts.

    Business Rules:
    - Only unacknowledged alerts matching (project, item type, item id) change
    - Acknowledging twice is a no-op reporting zero rows
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: AcknowledgeAlertCommand) -> Result[AcknowledgeAlertResponse]:
        if not command.item_type or not command.item_id or not command.project_id:
            return Return.err(Error("MISSING_PARAMETERS", "Missing required parameters"))

        try:
            project_id = UUID(command.project_id)
        except ValueError:
            return Return.err(Error("INVALID_PARAMETERS", "Invalid projectId"))

        logger.info(
            f"{LOG_PREFIX} Acknowledging alert: item_type={command.item_type} "
            f"item_id={command.item_id} project_id={project_id}"
        )

        async with self.uow:
            try:
                acknowledged_at = datetime.now(UTC).replace(tzinfo=None)
                alerts = await self.uow.portal_alerts.acknowledge(
                    project_id, command.item_type, command.item_id, acknowledged_at
                )
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error(f"{LOG_PREFIX} Error: {exc}")
                return Return.err(Error("ACKNOWLEDGE_FAILED", "Failed to acknowledge alert"))

        logger.info(f"{LOG_PREFIX} Acknowledged alerts: {len(alerts)}")
        return Return.ok(AcknowledgeAlertResponse(success=True, acknowledged=len(alerts)))
