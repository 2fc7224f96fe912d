"""
Tenant Entities

A tenant is one deployment of the templated site. Profile and branding rows
override the static business configuration when present.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Tenant(SQLModel, table=True):
    """
    Tenant entity - created out-of-band by provisioning, read-only here.
    """

    __tablename__ = "tenants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    slug: Optional[str] = Field(default=None, max_length=255, index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC).replace(tzinfo=None), sa_column=Column(DateTime)
    )


class TenantProfile(SQLModel, table=True):
    """Business identity, contact and address of a tenant"""

    __tablename__ = "tenant_profiles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", unique=True, index=True)

    business_name: Optional[str] = Field(default=None, max_length=255)
    tagline: Optional[str] = None
    description: Optional[str] = None
    phone: Optional[str] = Field(default=None, max_length=32)
    email: Optional[str] = Field(default=None, max_length=255)

    address_line_1: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = Field(default=None, max_length=16)

    license_number: Optional[str] = None
    owner_name: Optional[str] = None
    years_in_business: Optional[int] = None


class TenantBranding(SQLModel, table=True):
    """Logo and theme colours of a tenant"""

    __tablename__ = "tenant_branding"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", unique=True, index=True)

    logo_url: Optional[str] = None
    primary_color: Optional[str] = Field(default=None, max_length=16)
    secondary_color: Optional[str] = Field(default=None, max_length=16)
    accent_color: Optional[str] = Field(default=None, max_length=16)
    hero_image_url: Optional[str] = None
