"""
Client Portal Use Cases
"""

from .acknowledge_alert_use_case import AcknowledgeAlertUseCase
from .dtos import AcknowledgeAlertCommand, AcknowledgeAlertResponse

__all__ = [
    "AcknowledgeAlertUseCase",
    "AcknowledgeAlertCommand",
    "AcknowledgeAlertResponse",
]
