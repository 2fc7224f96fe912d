"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    MembershipRole,
    MembershipStatus,
    NotificationPriority,
)

# Export all entities
from .tenant import Tenant, TenantBranding, TenantProfile
from .membership import Membership
from .admin_user import AdminUser
from .project import ChangeOrder, Project
from .client_portal import ClientPortalAccess, ClientPortalAlert
from .notification import TeamMemberNotification

__all__ = [
    # Enums
    "MembershipRole",
    "MembershipStatus",
    "NotificationPriority",
    # Entities
    "Tenant",
    "TenantProfile",
    "TenantBranding",
    "Membership",
    "AdminUser",
    "Project",
    "ChangeOrder",
    "ClientPortalAccess",
    "ClientPortalAlert",
    "TeamMemberNotification",
]
