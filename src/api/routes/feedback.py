from typing import List

from fastapi import APIRouter, Depends, Request

from src.app.services.feedback_tracker import (
    ConsoleError,
    FeedbackContext,
    FeedbackTracker,
    UserAction,
)
from src.depends import get_feedback_tracker
from src.domain.base import CamelModel

router = APIRouter(prefix="/feedback", tags=["Feedback"])


class RecordedResponse(CamelModel):
    recorded: int


class ClearedResponse(CamelModel):
    cleared: bool


@router.get("/context", response_model=FeedbackContext, response_model_exclude_none=True)
async def get_context(request: Request, tracker: FeedbackTracker = Depends(get_feedback_tracker)):
    """Snapshot of recent actions and errors, attached to a feedback submission"""
    client_info = {
        "userAgent": request.headers.get("user-agent", ""),
        "url": request.headers.get("referer", ""),
    }
    return tracker.get_context(client_info)


@router.delete("/context", response_model=ClearedResponse)
async def clear_context(tracker: FeedbackTracker = Depends(get_feedback_tracker)):
    """Clear the tracked history after a successful submission"""
    tracker.clear()
    return ClearedResponse(cleared=True)


@router.post("/actions", response_model=RecordedResponse)
async def record_actions(
    actions: List[UserAction], tracker: FeedbackTracker = Depends(get_feedback_tracker)
):
    for action in actions:
        tracker.record_action(action)
    return RecordedResponse(recorded=len(actions))


@router.post("/console-errors", response_model=RecordedResponse)
async def record_console_errors(
    errors: List[ConsoleError], tracker: FeedbackTracker = Depends(get_feedback_tracker)
):
    recorded = sum(1 for error in errors if tracker.record_console_error(error))
    return RecordedResponse(recorded=recorded)
