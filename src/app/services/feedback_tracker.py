"""
Feedback Context Tracker

Keeps the most recent user actions, console errors and API errors so they
can be attached to a feedback submission. One tracker is owned by each
application instance; nothing here is module-global.
"""

import logging
import re
import time
from collections import deque
from enum import Enum
from typing import Deque, Dict, List, Optional

from pydantic import Field

from src.domain.base import CamelModel

logger = logging.getLogger(__name__)

MAX_ACTIONS = 20
MAX_ERRORS = 10
CONSOLE_DEDUPE_WINDOW_MS = 1000

_DOMAIN_PREFIX = re.compile(r"^https?://[^/]+")


def now_ms() -> int:
    return int(time.time() * 1000)


class UserActionType(str, Enum):
    click = "click"
    navigate = "navigate"
    form_submit = "form_submit"
    input_change = "input_change"


class ConsoleErrorType(str, Enum):
    error = "error"
    warn = "warn"


class UserActionDetails(CamelModel):
    element: Optional[str] = None
    path: Optional[str] = None
    form_id: Optional[str] = None
    input_name: Optional[str] = None


class UserAction(CamelModel):
    type: UserActionType
    timestamp: int = Field(default_factory=now_ms)
    details: UserActionDetails = Field(default_factory=UserActionDetails)


class ConsoleError(CamelModel):
    timestamp: int = Field(default_factory=now_ms)
    message: str
    stack: Optional[str] = None
    type: ConsoleErrorType = ConsoleErrorType.error


class ApiError(CamelModel):
    timestamp: int = Field(default_factory=now_ms)
    endpoint: str
    method: str
    status: Optional[int] = None
    message: str


class FeedbackContext(CamelModel):
    user_actions: List[UserAction]
    console_errors: List[ConsoleError]
    api_errors: List[ApiError]
    client_info: Dict[str, str] = Field(default_factory=dict)


class FeedbackTracker:
    """Bounded history of recent activity, oldest entries dropped first"""

    def __init__(self, max_actions: int = MAX_ACTIONS, max_errors: int = MAX_ERRORS):
        self._actions: Deque[UserAction] = deque(maxlen=max_actions)
        self._console_errors: Deque[ConsoleError] = deque(maxlen=max_errors)
        self._api_errors: Deque[ApiError] = deque(maxlen=max_errors)

    def record_action(self, action: UserAction) -> None:
        self._actions.append(action)

    def record_console_error(self, error: ConsoleError) -> bool:
        """
        Record a console error.

        Returns False when the error repeats the previous message within
        the dedupe window and was dropped.
        """
        if self._console_errors:
            last = self._console_errors[-1]
            if (
                last.message == error.message
                and error.timestamp - last.timestamp < CONSOLE_DEDUPE_WINDOW_MS
            ):
                return False
        self._console_errors.append(error)
        return True

    def record_api_error(
        self, endpoint: str, method: str, message: str, status: Optional[int] = None
    ) -> ApiError:
        error = ApiError(
            endpoint=_DOMAIN_PREFIX.sub("", endpoint),
            method=method.upper(),
            status=status,
            message=message,
        )
        self._api_errors.append(error)
        return error

    def get_context(self, client_info: Optional[Dict[str, str]] = None) -> FeedbackContext:
        """Snapshot of the tracked history"""
        return FeedbackContext(
            user_actions=list(self._actions),
            console_errors=list(self._console_errors),
            api_errors=list(self._api_errors),
            client_info=client_info or {},
        )

    def clear(self) -> None:
        self._actions.clear()
        self._console_errors.clear()
        self._api_errors.clear()
        logger.debug("Feedback context cleared")
