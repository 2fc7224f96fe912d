"""
Resolve Tenant Config Use Case

Overlays the stored tenant profile and branding on the static business
configuration. Falls back to the static configuration when the tenant or
its profile is not stored.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.site_config import SiteConfig
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TenantBranding, TenantProfile
from src.domain.phone import digits_only
from src.domain.site_content import Address, BusinessConfig
from src.domain.theme import theme_variables

from .dtos import TenantCompanyConfig

logger = logging.getLogger(__name__)


def static_company_config(business: BusinessConfig) -> TenantCompanyConfig:
    return TenantCompanyConfig(
        name=business.name,
        short_name=business.name,
        tagline=business.tagline,
        description=business.description,
        phone=business.phone,
        phone_raw=business.phone_raw,
        email=business.email,
        address=business.address,
        logo=business.logo,
        license_number=business.license_number,
        is_resolved=False,
    )


def overlay_company_config(
    business: BusinessConfig,
    tenant_id: UUID,
    profile: TenantProfile,
    branding: Optional[TenantBranding],
) -> TenantCompanyConfig:
    static_address = business.address
    full_address = ", ".join(
        part
        for part in (profile.address_line_1, profile.city, profile.state, profile.zip_code)
        if part
    )

    primary = branding.primary_color if branding else None
    secondary = branding.secondary_color if branding else None
    accent = branding.accent_color if branding else None

    return TenantCompanyConfig(
        name=profile.business_name or business.name,
        short_name=profile.business_name or business.name,
        tagline=profile.tagline or business.tagline,
        description=profile.description or business.description,
        phone=profile.phone or business.phone,
        phone_raw=digits_only(profile.phone) if profile.phone else business.phone_raw,
        email=profile.email or business.email,
        address=Address(
            street=profile.address_line_1 or static_address.street,
            city=profile.city or static_address.city,
            state=profile.state or static_address.state,
            zip=profile.zip_code or static_address.zip,
            full=full_address or static_address.full,
        ),
        logo=(branding.logo_url if branding else None) or business.logo,
        primary_color=primary or None,
        secondary_color=secondary or None,
        accent_color=accent or None,
        hero_image=(branding.hero_image_url if branding else None) or None,
        theme=theme_variables(primary, secondary, accent),
        license_number=profile.license_number or business.license_number,
        owner_name=profile.owner_name or None,
        years_in_business=profile.years_in_business or None,
        tenant_id=str(tenant_id),
        is_resolved=True,
    )


class ResolveTenantConfigUseCase:
    """
    Use case for resolving the company configuration of the deployed tenant.

    Business Rules:
    - Resolved only when both the tenant and its profile rows exist
    - Each profile field falls back to the static business config when empty
    - Theme variables are produced only for configured brand colours
    """

    def __init__(self, uow: UnitOfWork, site_config: SiteConfig):
        self.uow = uow
        self.site_config = site_config

    async def execute(self, tenant_id: Optional[str]) -> Result[TenantCompanyConfig]:
        business = self.site_config.business
        if not tenant_id:
            return Return.ok(static_company_config(business))

        try:
            tenant_uuid = UUID(tenant_id)
        except ValueError:
            logger.warning(f"Configured tenant id is not a UUID: {tenant_id}")
            return Return.ok(static_company_config(business))

        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_uuid)
            profile = await self.uow.tenants.get_profile(tenant_uuid) if tenant else None
            if tenant is None or profile is None:
                logger.info(f"Tenant {tenant_uuid} not resolved, using static config")
                return Return.ok(static_company_config(business))

            branding = await self.uow.tenants.get_branding(tenant_uuid)
            # Rows expire when the unit of work rolls back on exit
            config = overlay_company_config(business, tenant.id, profile, branding)

        return Return.ok(config)
