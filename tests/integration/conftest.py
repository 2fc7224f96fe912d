import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.api.utils.jwt import create_access_token
from src.depends import (
    get_ai_gateway,
    get_edge_functions,
    get_identity_provider,
    get_payment_gateway,
    get_sms_gateway,
    get_unit_of_work,
)
from tests.fixtures.gateways import (
    FakeAiGateway,
    FakeIdentityProvider,
    FakePaymentGateway,
    FakeSmsGateway,
    UnconfiguredEdgeFunctions,
)
from tests.fixtures.json_loader import TestDataLoader


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def payments():
    return FakePaymentGateway()


@pytest.fixture
def sms():
    return FakeSmsGateway()


@pytest.fixture
def ai():
    return FakeAiGateway()


@pytest.fixture
def identity():
    return FakeIdentityProvider()


@pytest.fixture
def app(db_session, payments, sms, ai, identity):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_payment_gateway] = lambda: payments
    app.dependency_overrides[get_sms_gateway] = lambda: sms
    app.dependency_overrides[get_ai_gateway] = lambda: ai
    app.dependency_overrides[get_identity_provider] = lambda: identity
    app.dependency_overrides[get_edge_functions] = UnconfiguredEdgeFunctions
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers():
    """Build bearer headers for a user id with optional token claims"""

    def _headers(user_id, **claims):
        token = create_access_token(str(user_id), **claims)
        return {"Authorization": f"Bearer {token}"}

    return _headers
