from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class EdgeFunctionError(Exception):
    """Edge function returned a non-OK status or could not be reached"""


class IEdgeFunctions(ABC):
    """Remote functions called by the admin login flow"""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        pass

    @abstractmethod
    async def system_owner_auth(self, phone: str, code: str) -> Dict[str, Any]:
        """POST /system-owner-auth; returns the decoded body of an OK response"""
        pass

    @abstractmethod
    async def register_tenant_user(
        self,
        access_token: str,
        tenant_id: str,
        phone: str,
        name: Optional[str] = None,
        is_system_owner: bool = False,
    ) -> Dict[str, Any]:
        """POST /register-tenant-user with the caller's bearer token"""
        pass
