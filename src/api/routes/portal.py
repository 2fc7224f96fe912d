from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.portal import (
    AcknowledgeAlertCommand,
    AcknowledgeAlertResponse,
    AcknowledgeAlertUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(tags=["Client Portal"])


@router.post("/client-portal-acknowledge-alert", response_model=AcknowledgeAlertResponse)
async def acknowledge_alert(
    request: AcknowledgeAlertCommand, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Mark the client portal alerts of an item as acknowledged

    Returns the number of alerts that changed; repeating the call reports 0.

    Raises:
        - 400 Bad Request: Missing itemType, itemId or projectId
        - 500 Internal Server Error: Database failure
    """
    use_case = AcknowledgeAlertUseCase(uow)
    result = await use_case.execute(request)

    if result.is_err():
        error = result.error
        if error.code in ("MISSING_PARAMETERS", "INVALID_PARAMETERS"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
