"""
Client Portal Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional

from src.domain.base import CamelModel


class AcknowledgeAlertCommand(CamelModel):
    """Alert acknowledgement request"""

    item_type: Optional[str] = None
    item_id: Optional[str] = None
    project_id: Optional[str] = None


class AcknowledgeAlertResponse(CamelModel):
    """Response for acknowledge alert use case"""

    success: bool
    acknowledged: int
