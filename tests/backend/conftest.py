import uuid

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from admin_dashboard.core.db import Database
from admin_dashboard.main import create_app
from admin_dashboard.models.user import Role
from admin_dashboard.services.user_store import UserStore


TEST_DB_URL = "sqlite://:memory:"


@pytest_asyncio.fixture
async def db():
    """
    A clean in-memory SQLite database for every test.
    Tables are created from the models instead of migrations.
    """
    handle = Database(TEST_DB_URL, generate_schemas=True)
    await handle.init()
    yield handle
    await handle.close()


@pytest_asyncio.fixture
async def store(db):
    return UserStore(db)


@pytest_asyncio.fixture
async def client(db):
    """
    Provide an HTTPX AsyncClient bound to an app built around the test database.
    The lifespan is not run; the fixture already opened the database.
    """
    app = create_app(db)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


def _unique(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:6]}"


@pytest_asyncio.fixture
async def create_admin(store):
    """
    Factory fixture to create admin users directly through the store.
    """

    async def _create_admin(password: str = "AdminPass!23"):
        username = _unique("admin")
        user = await store.create(
            name="Admin User",
            email=f"{username}@example.com",
            username=username,
            password=password,
            role=Role.ADMIN,
        )
        return user, password

    return _create_admin


@pytest_asyncio.fixture
async def create_member(store):
    """
    Factory fixture to create regular members directly.
    """

    async def _create_member(password: str = "UserPass!23"):
        username = _unique("member")
        user = await store.create(
            name="Member User",
            email=f"{username}@example.com",
            username=username,
            password=password,
        )
        return user, password

    return _create_member


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    """

    async def _get_headers(email: str, password: str) -> dict[str, str]:
        resp = await client.post(
            "/api/v1/auth/login",
            json={"email": email, "password": password},
        )
        assert resp.status_code == 200, resp.text
        token = resp.json()["data"]["accessToken"]
        # Only the header authenticates later requests
        client.cookies.clear()
        return {"Authorization": f"Bearer {token}"}

    return _get_headers


@pytest_asyncio.fixture
async def admin_headers(create_admin, auth_header_factory):
    admin, password = await create_admin()
    return await auth_header_factory(admin.email, password)
