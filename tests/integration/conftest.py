
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from tests.utils.auth import auth_headers
from community_api.depends import get_unit_of_work
from community_api.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


@pytest_asyncio.fixture
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


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from community_api.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def creator(client: AsyncClient, test_data):
    """Registered user with auth headers"""
    response = await client.post("/users", json=test_data.get_copy("user"))
    assert response.status_code == 201
    user_id = response.json()["id"]
    return {"id": user_id, "headers": auth_headers(user_id)}


@pytest_asyncio.fixture
async def outsider(client: AsyncClient, test_data):
    """Second registered user, not a member of anything"""
    response = await client.post("/users", json=test_data.get_copy("other_user"))
    assert response.status_code == 201
    user_id = response.json()["id"]
    return {"id": user_id, "headers": auth_headers(user_id)}


@pytest_asyncio.fixture
async def organization(client: AsyncClient, test_data, creator):
    """Public organization created by `creator`"""
    response = await client.post(
        "/organizations",
        json=test_data.get_copy("organization"),
        headers=creator["headers"],
    )
    assert response.status_code == 201
    return response.json()
