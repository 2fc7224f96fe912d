"""
Notification Use Case DTOs (Data Transfer Objects)
"""

from typing import Any, Optional

from src.domain.base import CamelModel


class NotifyChangeOrderApprovalCommand(CamelModel):
    """Approval notification request"""

    change_order_id: Optional[str] = None
    project_id: Optional[str] = None
    project_name: Optional[str] = None
    client_name: Optional[str] = None
    co_number: Optional[str] = None
    amount: Optional[float] = None


class NotifyChangeOrderApprovalResponse(CamelModel):
    """Best-effort delivery outcome; success=False is not an error"""

    success: bool
    message: str
    recipient_name: Optional[str] = None


class SendClientPortalCatchupCommand(CamelModel):
    """Client catch-up SMS request"""

    project_id: Optional[str] = None
    project_name: Optional[str] = None
    updates_summary: str = ""


class SendClientPortalCatchupResponse(CamelModel):
    """Response for send client portal catch-up use case"""

    success: bool
    message: str
    portal_url: str
    sms_sent: bool
    notified_at: str


class SmsFailureDetails(CamelModel):
    """Error details returned when the catch-up SMS could not be sent"""

    portal_url: str
    twilio_error: Optional[Any] = None
