"""
Admin Login Flow

Phone OTP login to the admin dashboard, as an explicit state machine:

    awaiting_code -> bypass_attempted -> standard_verifying -> registered | denied

The system owner may skip OTP verification through the bypass edge function.
Every other caller verifies the OTP, is registered with the tenant (which
bootstraps their role) and is let in only as an active owner or admin.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from src.app.services.edge_functions import EdgeFunctionError, IEdgeFunctions
from src.app.services.identity_provider import (
    AuthSession,
    IdentityProviderError,
    IIdentityProvider,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Membership, MembershipRole, MembershipStatus
from src.domain.phone import format_phone_to_e164, is_valid_phone, same_us_number

logger = logging.getLogger(__name__)

LOOPBACK_ADDRESSES = ("127.0.0.1", "::1")

INVALID_PHONE_MESSAGE = "Please enter a valid US phone number"

_OTP_CODE = re.compile(r"^\d{6}$")


class LoginState(str, Enum):
    awaiting_code = "awaiting_code"
    bypass_attempted = "bypass_attempted"
    standard_verifying = "standard_verifying"
    registered = "registered"
    denied = "denied"


TRANSITIONS = {
    LoginState.awaiting_code: {
        LoginState.bypass_attempted,
        LoginState.standard_verifying,
        LoginState.registered,
        LoginState.denied,
    },
    LoginState.bypass_attempted: {LoginState.registered, LoginState.standard_verifying},
    LoginState.standard_verifying: {LoginState.registered, LoginState.denied},
    LoginState.registered: set(),
    LoginState.denied: set(),
}


class IllegalTransitionError(Exception):
    def __init__(self, current: LoginState, target: LoginState):
        self.current = current
        self.target = target
        super().__init__(f"Illegal login transition {current.value} -> {target.value}")


@dataclass
class LoginOutcome:
    state: LoginState
    title: str
    message: str
    role: Optional[MembershipRole] = None
    status: Optional[MembershipStatus] = None
    session: Optional[AuthSession] = None

    @property
    def granted(self) -> bool:
        return self.state == LoginState.registered


class AdminLoginFlow:
    """
    One login attempt. Create a new flow per request; finished flows
    (registered or denied) reject any further transition.
    """

    def __init__(
        self,
        identity: IIdentityProvider,
        edge_functions: IEdgeFunctions,
        uow: UnitOfWork,
        tenant_id: Optional[str] = None,
        system_owner_phone: str = "",
        dev_test_phone: str = "",
        dev_admin_email: str = "",
        dev_admin_password: str = "",
        dev_login_enabled: bool = False,
    ):
        self.identity = identity
        self.edge_functions = edge_functions
        self.uow = uow
        self.tenant_id = tenant_id or None
        self.system_owner_phone = system_owner_phone
        self.dev_test_phone = dev_test_phone
        self.dev_admin_email = dev_admin_email
        self.dev_admin_password = dev_admin_password
        self.dev_login_enabled = dev_login_enabled
        self.state = LoginState.awaiting_code

    def _transition(self, target: LoginState) -> None:
        if target not in TRANSITIONS[self.state]:
            raise IllegalTransitionError(self.state, target)
        logger.debug(f"Login state {self.state.value} -> {target.value}")
        self.state = target

    def _finish(self, target: LoginState, title: str, message: str, **kwargs) -> LoginOutcome:
        self._transition(target)
        return LoginOutcome(state=target, title=title, message=message, **kwargs)

    def is_system_owner_phone(self, phone: str) -> bool:
        return bool(self.system_owner_phone) and same_us_number(phone, self.system_owner_phone)

    def is_dev_login(self, phone: str, client_address: Optional[str]) -> bool:
        """
        Dev shortcut: enabled explicitly, requested from the machine itself
        (peer address, never the Host header) and with the dev test phone.
        """
        return (
            self.dev_login_enabled
            and bool(self.dev_test_phone)
            and client_address in LOOPBACK_ADDRESSES
            and same_us_number(phone, self.dev_test_phone)
        )

    async def send_code(self, phone: str, client_address: Optional[str] = None) -> LoginOutcome:
        """Request an OTP, or log the dev user straight in from a loopback client"""
        if not is_valid_phone(phone):
            return self._finish(LoginState.denied, "Error", INVALID_PHONE_MESSAGE)

        e164_phone = format_phone_to_e164(phone)

        if self.is_dev_login(e164_phone, client_address):
            return await self._dev_login()

        try:
            await self.identity.send_otp(e164_phone)
        except IdentityProviderError as exc:
            logger.error(f"Failed to send OTP to {e164_phone}: {exc}")
            return self._finish(
                LoginState.denied, "Error", str(exc) or "Failed to send verification code"
            )

        return LoginOutcome(
            state=self.state,
            title="Code sent!",
            message="Check your phone for the verification code.",
        )

    async def _dev_login(self) -> LoginOutcome:
        try:
            try:
                session = await self.identity.sign_in_with_password(
                    self.dev_admin_email, self.dev_admin_password
                )
            except IdentityProviderError:
                logger.info("Dev user missing, signing up")
                await self.identity.sign_up(self.dev_admin_email, self.dev_admin_password)
                session = await self.identity.sign_in_with_password(
                    self.dev_admin_email, self.dev_admin_password
                )

            user_id = UUID(session.user_id)
            async with self.uow:
                await self.uow.admin_users.upsert(user_id, self.dev_admin_email, is_active=True)
                if self.tenant_id:
                    await self.uow.memberships.upsert(
                        Membership(
                            tenant_id=UUID(self.tenant_id),
                            user_id=user_id,
                            name="Dev Admin",
                            email=self.dev_admin_email,
                            role=MembershipRole.owner,
                            status=MembershipStatus.active,
                        )
                    )
                await self.uow.commit()
        except (IdentityProviderError, SQLAlchemyError, ValueError) as exc:
            logger.error(f"Dev login failed: {exc}")
            return self._finish(LoginState.denied, "Dev Login Error", str(exc))

        suffix = f" (Tenant: {self.tenant_id[:8]}...)" if self.tenant_id else ""
        return self._finish(
            LoginState.registered,
            "Dev Login Success!",
            f"Welcome to local admin.{suffix}",
            role=MembershipRole.owner,
            status=MembershipStatus.active,
            session=session,
        )

    async def verify(self, phone: str, code: str) -> LoginOutcome:
        if not _OTP_CODE.match(code or ""):
            return self._finish(
                LoginState.denied, "Error", "Verification code must be exactly 6 digits"
            )

        if not is_valid_phone(phone):
            return self._finish(LoginState.denied, "Error", INVALID_PHONE_MESSAGE)

        e164_phone = format_phone_to_e164(phone)

        if self.edge_functions.is_configured and self.is_system_owner_phone(e164_phone):
            self._transition(LoginState.bypass_attempted)
            outcome = await self._try_bypass(e164_phone, code)
            if outcome is not None:
                return outcome

        self._transition(LoginState.standard_verifying)
        return await self._verify_standard(e164_phone, code)

    async def _try_bypass(self, phone: str, code: str) -> Optional[LoginOutcome]:
        """Registered outcome, or None to fall through to standard verification"""
        try:
            data = await self.edge_functions.system_owner_auth(phone, code)
        except EdgeFunctionError as exc:
            logger.info(f"Bypass attempt failed, using standard auth: {exc}")
            return None

        if not (data.get("success") and data.get("bypass")):
            return None

        tokens = data.get("session") or {}
        if not (tokens.get("access_token") and tokens.get("refresh_token")):
            if data.get("noSession"):
                logger.info("Bypass auth succeeded but no session, using standard OTP")
            return None

        try:
            session = await self.identity.set_session(
                tokens["access_token"], tokens["refresh_token"]
            )
        except IdentityProviderError as exc:
            logger.error(f"Failed to set bypass session: {exc}")
            return None

        if self.tenant_id:
            try:
                await self.edge_functions.register_tenant_user(
                    session.access_token,
                    self.tenant_id,
                    phone,
                    name="System Owner",
                    is_system_owner=True,
                )
            except EdgeFunctionError as exc:
                logger.info(f"System owner registration (non-critical): {exc}")

        return self._finish(
            LoginState.registered,
            "Welcome, System Owner!",
            "Admin access granted.",
            role=MembershipRole.owner,
            status=MembershipStatus.active,
            session=session,
        )

    async def _verify_standard(self, phone: str, code: str) -> LoginOutcome:
        try:
            session = await self.identity.verify_otp(phone, code)
        except IdentityProviderError as exc:
            return self._finish(LoginState.denied, "Error", str(exc) or "Invalid verification code")

        if self.tenant_id and self.edge_functions.is_configured:
            registration = await self._register(session, phone)
            if registration is not None:
                role = registration.get("role")
                status = registration.get("status")
                if role in (MembershipRole.owner.value, MembershipRole.admin.value):
                    return self._finish(
                        LoginState.registered,
                        "Welcome!" if registration.get("isAutoAdmin") else "Welcome back!",
                        registration.get("message")
                        or "Successfully signed in to admin dashboard.",
                        role=MembershipRole(role),
                        status=MembershipStatus(status) if status else None,
                        session=session,
                    )
                if status == MembershipStatus.pending.value:
                    await self.identity.sign_out(session)
                    return self._finish(
                        LoginState.denied,
                        "Account Pending",
                        "Your account is pending approval from an admin. "
                        "Please contact your administrator.",
                        role=MembershipRole(role) if role else None,
                        status=MembershipStatus.pending,
                    )

        return await self._check_direct_access(session)

    async def _register(self, session: AuthSession, phone: str) -> Optional[Dict[str, Any]]:
        try:
            result = await self.edge_functions.register_tenant_user(
                session.access_token, self.tenant_id, phone, name=session.display_name
            )
        except EdgeFunctionError as exc:
            logger.error(f"Error registering user: {exc}")
            return None
        logger.info(f"User registration result: {result}")
        return result

    async def _check_direct_access(self, session: AuthSession) -> LoginOutcome:
        """Active admin flag, or active owner/admin membership of the tenant"""
        has_admin_flag = False
        membership_role = None
        try:
            user_id = UUID(session.user_id)
            async with self.uow:
                admin_flag = await self.uow.admin_users.get_active_by_user_id(user_id)
                has_admin_flag = admin_flag is not None
                if self.tenant_id:
                    membership = await self.uow.memberships.get_by_user_and_tenant(
                        user_id, UUID(self.tenant_id)
                    )
                    if (
                        membership is not None
                        and membership.status == MembershipStatus.active
                        and membership.role.is_admin
                    ):
                        membership_role = membership.role
        except (SQLAlchemyError, ValueError) as exc:
            logger.error(f"Direct admin check failed for {session.user_id}: {exc}")

        if not has_admin_flag and membership_role is None:
            await self.identity.sign_out(session)
            return self._finish(
                LoginState.denied,
                "Access denied",
                "You do not have permission to access the admin dashboard.",
            )

        return self._finish(
            LoginState.registered,
            "Welcome!",
            "Successfully signed in to admin dashboard.",
            role=membership_role or MembershipRole.admin,
            status=MembershipStatus.active,
            session=session,
        )
