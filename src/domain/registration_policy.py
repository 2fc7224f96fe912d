"""
Role bootstrap policy for first-time tenant registrants.
"""

from dataclasses import dataclass

from src.domain.entities import MembershipRole, MembershipStatus

# Regular users auto-promoted to admin before approval is required
AUTO_ADMIN_LIMIT = 2


@dataclass(frozen=True)
class RoleDecision:
    role: MembershipRole
    status: MembershipStatus
    is_auto_admin: bool
    message: str


def decide_role(is_system_owner: bool, active_admin_count: int) -> RoleDecision:
    """
    Decide role/status of a new membership.

    The system owner always gets owner/active and does not consume an admin
    slot. The first AUTO_ADMIN_LIMIT regular users become active admins, later
    ones are pending members until approved.
    """
    if is_system_owner:
        return RoleDecision(
            role=MembershipRole.owner,
            status=MembershipStatus.active,
            is_auto_admin=True,
            message="Welcome, System Owner! You have full access to this business.",
        )

    if active_admin_count < AUTO_ADMIN_LIMIT:
        return RoleDecision(
            role=MembershipRole.admin,
            status=MembershipStatus.active,
            is_auto_admin=True,
            message="Welcome! You have been automatically assigned as an admin.",
        )

    return RoleDecision(
        role=MembershipRole.member,
        status=MembershipStatus.pending,
        is_auto_admin=False,
        message="Your account has been created and is pending admin approval.",
    )


def welcome_back_message(role: MembershipRole) -> str:
    return f"Welcome back! You are logged in as {role.value}."
