"""
Site Use Cases
"""

from .dtos import TenantCompanyConfig
from .resolve_tenant_config_use_case import ResolveTenantConfigUseCase

__all__ = [
    "ResolveTenantConfigUseCase",
    "TenantCompanyConfig",
]
