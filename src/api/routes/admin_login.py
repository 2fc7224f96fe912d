from typing import Optional

from fastapi import APIRouter, Depends, Request

from config import ApplicationConfig
from src.app.services.admin_login_flow import AdminLoginFlow, LoginOutcome, LoginState
from src.app.services.edge_functions import IEdgeFunctions
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_edge_functions, get_identity_provider, get_unit_of_work
from src.domain.base import CamelModel
from src.domain.entities import MembershipRole, MembershipStatus

router = APIRouter(prefix="/admin-login", tags=["Admin Login"])


class SendCodeRequest(CamelModel):
    phone: str


class VerifyCodeRequest(CamelModel):
    phone: str
    code: str


class LoginOutcomeResponse(CamelModel):
    """
    Login step result. Denied logins are still 200 responses; the client
    shows title/message and stays on the login form.
    """

    state: LoginState
    granted: bool
    title: str
    message: str
    role: Optional[MembershipRole] = None
    status: Optional[MembershipStatus] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None

    @classmethod
    def from_outcome(cls, outcome: LoginOutcome) -> "LoginOutcomeResponse":
        return cls(
            state=outcome.state,
            granted=outcome.granted,
            title=outcome.title,
            message=outcome.message,
            role=outcome.role,
            status=outcome.status,
            access_token=outcome.session.access_token if outcome.session else None,
            refresh_token=outcome.session.refresh_token if outcome.session else None,
        )


def get_login_flow(
    identity: IIdentityProvider = Depends(get_identity_provider),
    edge_functions: IEdgeFunctions = Depends(get_edge_functions),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> AdminLoginFlow:
    return AdminLoginFlow(
        identity,
        edge_functions,
        uow,
        tenant_id=ApplicationConfig.TENANT_ID,
        system_owner_phone=ApplicationConfig.SYSTEM_OWNER_PHONE,
        dev_test_phone=ApplicationConfig.DEV_TEST_PHONE,
        dev_admin_email=ApplicationConfig.DEV_ADMIN_EMAIL,
        dev_admin_password=ApplicationConfig.DEV_ADMIN_PASSWORD,
        dev_login_enabled=ApplicationConfig.DEV_LOGIN_ENABLED,
    )


@router.post(
    "/send-code", response_model=LoginOutcomeResponse, response_model_exclude_none=True
)
async def send_code(
    body: SendCodeRequest, request: Request, flow: AdminLoginFlow = Depends(get_login_flow)
):
    """
    Request a login code by SMS

    With DEV_LOGIN_ENABLED, the dev test phone requested from a loopback
    client address logs the dev admin in directly.
    """
    client_address = request.client.host if request.client else None
    outcome = await flow.send_code(body.phone, client_address)
    return LoginOutcomeResponse.from_outcome(outcome)


@router.post("/verify", response_model=LoginOutcomeResponse, response_model_exclude_none=True)
async def verify(body: VerifyCodeRequest, flow: AdminLoginFlow = Depends(get_login_flow)):
    """Verify the login code and grant admin dashboard access to owners and admins"""
    outcome = await flow.verify(body.phone, body.code)
    return LoginOutcomeResponse.from_outcome(outcome)
