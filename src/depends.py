from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.ai_completion_gateway import AiCompletionGateway
from src.adapter.services.edge_function_client import EdgeFunctionClient
from src.adapter.services.stripe_payment_gateway import StripePaymentGateway
from src.adapter.services.supabase_identity_provider import SupabaseIdentityProvider
from src.adapter.services.twilio_sms_gateway import TwilioSmsGateway
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt
from src.app.services.ai_gateway import IAiGateway
from src.app.services.edge_functions import IEdgeFunctions
from src.app.services.feedback_tracker import FeedbackTracker
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.payment_gateway import IPaymentGateway
from src.app.services.site_config import SiteConfig
from src.app.services.sms_gateway import ISmsGateway

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and verify the identity provider token from the
    Authorization header.

    Returns:
        Decoded JWT payload (sub, email, phone, user_metadata)

    Raises:
        ClientError: 401 if the header is missing or the token is invalid
    """
    if credentials is None or not credentials.credentials:
        raise ClientError(
            Error("MISSING_AUTHORIZATION", "Missing authorization header"), status_code=401
        )

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise ClientError(
            Error("INVALID_AUTHENTICATION", "Invalid authentication"), status_code=401
        )

    return payload


def get_payment_gateway() -> IPaymentGateway:
    return StripePaymentGateway(
        secret_key=ApplicationConfig.STRIPE_SECRET_KEY,
        api_version=ApplicationConfig.STRIPE_API_VERSION,
    )


def get_sms_gateway() -> ISmsGateway:
    return TwilioSmsGateway(
        account_sid=ApplicationConfig.TWILIO_ACCOUNT_SID,
        auth_token=ApplicationConfig.TWILIO_AUTH_TOKEN,
        from_number=ApplicationConfig.TWILIO_PHONE_NUMBER,
        api_url=ApplicationConfig.TWILIO_API_URL,
        timeout=ApplicationConfig.HTTP_TIMEOUT_SECONDS,
    )


def get_ai_gateway() -> IAiGateway:
    return AiCompletionGateway(
        url=ApplicationConfig.AI_GATEWAY_URL,
        api_key=ApplicationConfig.AI_GATEWAY_API_KEY,
        timeout=ApplicationConfig.HTTP_TIMEOUT_SECONDS,
    )


def get_identity_provider() -> IIdentityProvider:
    return SupabaseIdentityProvider(
        url=ApplicationConfig.SUPABASE_URL,
        anon_key=ApplicationConfig.SUPABASE_ANON_KEY,
    )


def get_edge_functions() -> IEdgeFunctions:
    return EdgeFunctionClient(
        base_url=ApplicationConfig.EDGE_FUNCTIONS_URL,
        timeout=ApplicationConfig.HTTP_TIMEOUT_SECONDS,
    )


@lru_cache(maxsize=None)
def load_site_config(directory: str) -> SiteConfig:
    return SiteConfig.from_directory(directory)


def get_site_config() -> SiteConfig:
    return load_site_config(ApplicationConfig.SITE_CONFIG_DIR)


def get_feedback_tracker(request: Request) -> FeedbackTracker:
    return request.app.state.feedback_tracker
