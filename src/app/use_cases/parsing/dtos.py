"""
Document Parsing Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.base import CamelModel


class ParseEstimateCommand(CamelModel):
    raw_text: Optional[str] = None


class EstimateTotals(BaseModel):
    """Totals extracted from an estimate, in dollars"""

    contract_price: float = 0
    labor_total: float = 0
    materials_total: float = 0
    overhead_total: float = 0
    profit_total: float = 0


class ParsePurchaseOrderCommand(CamelModel):
    pdf_text: Optional[str] = None


class MaterialItem(BaseModel):
    category: str
    item_name: str
    quantity: float
    unit: str
    measurement: str
    unit_cost: float
    total: float


class ParsePurchaseOrderResponse(BaseModel):
    """Extracted items; error is set when the model output was unusable"""

    items: List[MaterialItem]
    error: Optional[str] = None
