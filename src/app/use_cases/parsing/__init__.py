"""
Document Parsing Use Cases

AI-assisted extraction from estimate and purchase order PDFs.
"""

from .dtos import (
    EstimateTotals,
    MaterialItem,
    ParseEstimateCommand,
    ParsePurchaseOrderCommand,
    ParsePurchaseOrderResponse,
)
from .parse_estimate_pdf_use_case import ParseEstimatePdfUseCase
from .parse_purchase_order_pdf_use_case import ParsePurchaseOrderPdfUseCase

__all__ = [
    "ParseEstimatePdfUseCase",
    "ParsePurchaseOrderPdfUseCase",
    "ParseEstimateCommand",
    "ParsePurchaseOrderCommand",
    "EstimateTotals",
    "MaterialItem",
    "ParsePurchaseOrderResponse",
]
