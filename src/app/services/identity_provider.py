from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pydantic import BaseModel


class IdentityProviderError(Exception):
    """OTP request/verification or session operation failed"""


class AuthSession(BaseModel):
    """Session issued by the identity provider"""

    user_id: str
    access_token: str
    refresh_token: str
    email: Optional[str] = None
    phone: Optional[str] = None
    user_metadata: Dict[str, Any] = {}

    @property
    def display_name(self) -> Optional[str]:
        return self.user_metadata.get("name") or self.user_metadata.get("full_name")


class IIdentityProvider(ABC):
    """Phone OTP identity provider"""

    @abstractmethod
    async def send_otp(self, phone: str) -> None:
        pass

    @abstractmethod
    async def verify_otp(self, phone: str, code: str) -> AuthSession:
        pass

    @abstractmethod
    async def set_session(self, access_token: str, refresh_token: str) -> AuthSession:
        """Install a session obtained out-of-band"""
        pass

    @abstractmethod
    async def sign_out(self, session: AuthSession) -> None:
        pass

    @abstractmethod
    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        pass

    @abstractmethod
    async def sign_up(self, email: str, password: str) -> AuthSession:
        pass
