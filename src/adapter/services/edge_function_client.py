import logging
from typing import Any, Dict, Optional

import httpx

from src.app.services.edge_functions import EdgeFunctionError, IEdgeFunctions

logger = logging.getLogger(__name__)


class EdgeFunctionClient(IEdgeFunctions):
    """HTTP client for the platform's edge functions"""

    def __init__(self, base_url: str, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url)

    async def _post(
        self, path: str, body: Dict[str, Any], access_token: Optional[str] = None
    ) -> Dict[str, Any]:
        headers = {}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(f"{self.base_url}{path}", json=body, headers=headers)
            except httpx.HTTPError as exc:
                raise EdgeFunctionError(f"{path} unreachable: {exc}") from exc

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if response.is_error:
            message = payload.get("error") if isinstance(payload, dict) else None
            raise EdgeFunctionError(message or f"{path} failed with {response.status_code}")
        return payload if isinstance(payload, dict) else {}

    async def system_owner_auth(self, phone: str, code: str) -> Dict[str, Any]:
        return await self._post("/system-owner-auth", {"phone": phone, "code": code})

    async def register_tenant_user(
        self,
        access_token: str,
        tenant_id: str,
        phone: str,
        name: Optional[str] = None,
        is_system_owner: bool = False,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {"tenantId": tenant_id, "phone": phone}
        if name:
            body["name"] = name
        if is_system_owner:
            body["isSystemOwner"] = True
        return await self._post("/register-tenant-user", body, access_token=access_token)
