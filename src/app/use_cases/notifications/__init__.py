"""
Notification Use Cases

SMS notifications to team members and clients.
"""

from .dtos import (
    NotifyChangeOrderApprovalCommand,
    NotifyChangeOrderApprovalResponse,
    SendClientPortalCatchupCommand,
    SendClientPortalCatchupResponse,
    SmsFailureDetails,
)
from .formatting import format_whole_dollars
from .notify_change_order_approval_use_case import NotifyChangeOrderApprovalUseCase
from .send_client_portal_catchup_use_case import SendClientPortalCatchupUseCase

__all__ = [
    "NotifyChangeOrderApprovalUseCase",
    "SendClientPortalCatchupUseCase",
    "NotifyChangeOrderApprovalCommand",
    "NotifyChangeOrderApprovalResponse",
    "SendClientPortalCatchupCommand",
    "SendClientPortalCatchupResponse",
    "SmsFailureDetails",
    "format_whole_dollars",
]
