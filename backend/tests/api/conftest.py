"""API test fixtures — a fresh Chirpy app per test, wired to the test database.

Invariants:
    - Each test builds its own app via create_app, so hit counters never leak
    - get_db dependency overridden to use the in-memory test database
    - /app/ serves a temporary directory containing index.html

Design Decisions:
    - The platform fixture defaults to "dev"; tests parametrize it directly
      to exercise non-dev deployments
"""

import pytest
from httpx import ASGITransport, AsyncClient

from chirpy.config import Settings
from chirpy.infrastructure.database import get_db
from chirpy.main import create_app

INDEX_HTML = "<html><body><h1>Welcome to Chirpy</h1></body></html>"


@pytest.fixture
def static_dir(tmp_path):
    (tmp_path / "index.html").write_text(INDEX_HTML)
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "logo.txt").write_text("chirpy")
    return tmp_path


@pytest.fixture
def platform():
    return "dev"


@pytest.fixture
def settings(static_dir, platform):
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        platform=platform,
        filepath_root=str(static_dir),
        log_format="text",
    )


@pytest.fixture
def app(settings, test_session_factory):
    application = create_app(settings)

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    application.dependency_overrides[get_db] = override_get_db
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def user(client):
    """A user created through the API."""
    res = await client.post("/api/users", json={"email": "saul@bettercall.com"})
    assert res.status_code == 201
    return res.json()
