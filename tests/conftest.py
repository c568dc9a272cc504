import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from libris.database import Base, get_session, install_sqlite_hooks
from libris.app import create_app
import libris.models  # noqa: F401

TEST_DB_URL = "sqlite+aiosqlite://"  # in-memory

engine = create_async_engine(TEST_DB_URL, echo=False)
install_sqlite_hooks(engine)  # foreign keys on, unicode-aware casefold()
TestSession = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(autouse=True)
async def setup_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
def session_factory():
    return TestSession


@pytest.fixture
async def session():
    async with TestSession() as s:
        yield s


@pytest.fixture
async def client():
    app = create_app()

    async def override_session():
        async with TestSession() as s:
            yield s

    app.dependency_overrides[get_session] = override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def author(client):
    resp = await client.post("/api/authors", json={"first_name": "Frank", "last_name": "Herbert"})
    assert resp.status_code == 201
    return resp.json()
