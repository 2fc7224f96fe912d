from decimal import ROUND_HALF_UP, Decimal
from typing import Optional


def format_whole_dollars(amount: Optional[float]) -> str:
    """1234.5 -> '$1,235'; missing amount -> 'N/A'"""
    if not amount:
        return "N/A"
    rounded = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,}"
