import logging
from typing import Any, Optional

from supabase import AsyncClient, AuthError, acreate_client
from supabase.lib.client_options import AsyncClientOptions

from src.app.services.identity_provider import (
    AuthSession,
    IdentityProviderError,
    IIdentityProvider,
)

logger = logging.getLogger(__name__)


class SupabaseIdentityProvider(IIdentityProvider):
    """Supabase Auth through the supabase async client"""

    def __init__(self, url: str, anon_key: str):
        self.url = url
        self.anon_key = anon_key
        self._client: Optional[AsyncClient] = None

    async def _auth(self):
        if self._client is None:
            if not self.url or not self.anon_key:
                raise IdentityProviderError("Identity provider is not configured")
            self._client = await acreate_client(
                self.url,
                self.anon_key,
                options=AsyncClientOptions(auto_refresh_token=False, persist_session=False),
            )
        return self._client.auth

    @staticmethod
    def _to_session(response: Any) -> AuthSession:
        session = getattr(response, "session", None)
        user = getattr(response, "user", None) or getattr(session, "user", None)
        if session is None or user is None or not session.access_token:
            raise IdentityProviderError("No session returned by identity provider")
        return AuthSession(
            user_id=str(user.id),
            access_token=session.access_token,
            refresh_token=session.refresh_token or "",
            email=user.email or None,
            phone=user.phone or None,
            user_metadata=user.user_metadata or {},
        )

    async def send_otp(self, phone: str) -> None:
        auth = await self._auth()
        try:
            await auth.sign_in_with_otp({"phone": phone})
        except AuthError as exc:
            raise IdentityProviderError(exc.message) from exc

    async def verify_otp(self, phone: str, code: str) -> AuthSession:
        auth = await self._auth()
        try:
            response = await auth.verify_otp({"phone": phone, "token": code, "type": "sms"})
        except AuthError as exc:
            raise IdentityProviderError(exc.message) from exc
        return self._to_session(response)

    async def set_session(self, access_token: str, refresh_token: str) -> AuthSession:
        auth = await self._auth()
        try:
            response = await auth.set_session(access_token, refresh_token)
        except AuthError as exc:
            raise IdentityProviderError(exc.message) from exc
        return self._to_session(response)

    async def sign_out(self, session: AuthSession) -> None:
        auth = await self._auth()
        try:
            await auth.admin.sign_out(session.access_token)
        except AuthError as exc:
            logger.warning(f"Sign out failed for user {session.user_id}: {exc.message}")

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        auth = await self._auth()
        try:
            response = await auth.sign_in_with_password({"email": email, "password": password})
        except AuthError as exc:
            raise IdentityProviderError(exc.message) from exc
        return self._to_session(response)

    async def sign_up(self, email: str, password: str) -> AuthSession:
        auth = await self._auth()
        try:
            response = await auth.sign_up({"email": email, "password": password})
        except AuthError as exc:
            raise IdentityProviderError(exc.message) from exc
        return self._to_session(response)
