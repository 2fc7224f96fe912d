"""
Domain Enums

Role and status values shared by the registration service, the admin login
flow and the membership store.
"""

from enum import Enum


class MembershipRole(str, Enum):
    """User role within a tenant"""

    owner = "owner"
    admin = "admin"
    member = "member"

    @property
    def is_admin(self) -> bool:
        return self in (MembershipRole.owner, MembershipRole.admin)


class MembershipStatus(str, Enum):
    """Membership approval status"""

    active = "active"
    pending = "pending"


class NotificationPriority(str, Enum):
    """In-app notification priority"""

    low = "low"
    normal = "normal"
    high = "high"
