"""In-memory stand-ins for the external services used by the API"""

from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

from src.app.services.ai_gateway import AiGatewayError, IAiGateway, ToolCall
from src.app.services.edge_functions import EdgeFunctionError, IEdgeFunctions
from src.app.services.identity_provider import (
    AuthSession,
    IdentityProviderError,
    IIdentityProvider,
)
from src.app.services.payment_gateway import (
    CheckoutSession,
    CheckoutSessionRequest,
    IPaymentGateway,
)
from src.app.services.sms_gateway import ISmsGateway, SmsDeliveryError


class FakePaymentGateway(IPaymentGateway):
    def __init__(self):
        self.requests: List[CheckoutSessionRequest] = []

    @property
    def is_configured(self) -> bool:
        return True

    async def create_checkout_session(self, request: CheckoutSessionRequest) -> CheckoutSession:
        self.requests.append(request)
        return CheckoutSession(id="cs_test_1", client_secret="cs_test_1_secret")


class FakeSmsGateway(ISmsGateway):
    def __init__(self):
        self.sent: List[Tuple[str, str]] = []
        self.configured = True
        self.failure: Optional[Dict[str, Any]] = None

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def send(self, to: str, body: str) -> str:
        if self.failure is not None:
            raise SmsDeliveryError("Failed to send SMS", provider_response=self.failure)
        self.sent.append((to, body))
        return f"SM{len(self.sent)}"


class FakeAiGateway(IAiGateway):
    def __init__(self):
        self.tool_call: Optional[ToolCall] = None
        self.status_code: Optional[int] = None

    @property
    def is_configured(self) -> bool:
        return True

    async def call_function(
        self,
        model,
        system_prompt,
        user_prompt,
        function_name,
        function_description,
        parameters,
    ) -> Optional[ToolCall]:
        if self.status_code is not None:
            raise AiGatewayError(self.status_code, "upstream")
        return self.tool_call


class FakeIdentityProvider(IIdentityProvider):
    """Password accounts and phone OTPs kept in memory; every code is 123456"""

    CODE = "123456"

    def __init__(self):
        self.accounts: Dict[str, Tuple[str, str]] = {}
        self.phone_users: Dict[str, str] = {}
        self.signed_out: List[str] = []

    def _session(self, user_id: str, email=None, phone=None) -> AuthSession:
        return AuthSession(
            user_id=user_id,
            access_token=f"access-{user_id}",
            refresh_token=f"refresh-{user_id}",
            email=email,
            phone=phone,
        )

    async def send_otp(self, phone: str) -> None:
        self.phone_users.setdefault(phone, str(uuid4()))

    async def verify_otp(self, phone: str, code: str) -> AuthSession:
        if code != self.CODE or phone not in self.phone_users:
            raise IdentityProviderError("Token has expired or is invalid")
        return self._session(self.phone_users[phone], phone=phone)

    async def set_session(self, access_token: str, refresh_token: str) -> AuthSession:
        return self._session(access_token.removeprefix("access-"))

    async def sign_out(self, session: AuthSession) -> None:
        self.signed_out.append(session.user_id)

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        account = self.accounts.get(email)
        if account is None or account[1] != password:
            raise IdentityProviderError("Invalid login credentials")
        return self._session(account[0], email=email)

    async def sign_up(self, email: str, password: str) -> AuthSession:
        user_id = str(uuid4())
        self.accounts[email] = (user_id, password)
        return self._session(user_id, email=email)


class UnconfiguredEdgeFunctions(IEdgeFunctions):
    @property
    def is_configured(self) -> bool:
        return False

    async def system_owner_auth(self, phone: str, code: str) -> Dict[str, Any]:
        raise EdgeFunctionError("Edge functions not configured")

    async def register_tenant_user(
        self, access_token, tenant_id, phone, name=None, is_system_owner=False
    ) -> Dict[str, Any]:
        raise EdgeFunctionError("Edge functions not configured")
