"""
Site Use Case DTOs (Data Transfer Objects)
"""

from typing import Dict, Optional

from src.domain.base import CamelModel
from src.domain.site_content import Address


class TenantCompanyConfig(CamelModel):
    """Company identity shown on the site, tenant rows overlaid on the static config"""

    # Identity
    name: str
    short_name: str
    tagline: Optional[str] = None
    description: Optional[str] = None

    # Contact
    phone: Optional[str] = None
    phone_raw: Optional[str] = None
    email: Optional[str] = None

    address: Address

    # Branding
    logo: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None
    hero_image: Optional[str] = None
    theme: Dict[str, str] = {}

    # Business details
    license_number: Optional[str] = None
    owner_name: Optional[str] = None
    years_in_business: Optional[int] = None

    tenant_id: Optional[str] = None
    is_resolved: bool = False
