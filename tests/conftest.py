"""
Journal Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every API test gets its own application built by create_app() on a
       fresh SQLite database file (aiosqlite) and upload directory under
       tmp_path, so tests never share rows or files.

Fixture Hierarchy:
    test_settings ── app ──┬── test_client  (HTTPX AsyncClient over ASGI)
                           ├── db_session   (AsyncSession on the app's Database)
                           └── file_service (the app's FileService)
    mock_db_session: AsyncMock session for repository error paths
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings for testing BEFORE any app imports: importing
# journal.main builds the module-level app from the environment.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="journal_test_"), "import.db"
)
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="journal_uploads_")
os.environ["LOG_LEVEL"] = "WARNING"

from journal.config import Settings  # noqa: E402
from journal.main import create_app  # noqa: E402


# Small enough that oversize uploads are cheap to build in tests
TEST_MAX_FILE_SIZE = 4096


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'journal.db'}",
        upload_dir=str(tmp_path / "uploads"),
        max_file_size=TEST_MAX_FILE_SIZE,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def app(test_settings):
    """
    A fully configured application with its schema created.

    ASGITransport does not run the lifespan, so the tables are created and
    the engine disposed here.
    """
    application = create_app(test_settings)
    await application.state.database.create_all()
    yield application
    await application.state.database.dispose()


@pytest_asyncio.fixture
async def test_client(app):
    """
    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def db_session(app):
    async with app.state.database.session_factory() as session:
        yield session


@pytest.fixture
def file_service(app):
    return app.state.file_service


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.commit.side_effect = OperationalError("stmt", {}, Exception())
        with pytest.raises(StoreError):
            await entry_repository.create_entry(mock_db_session, payload)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_png_bytes():
    """PNG signature followed by filler; never decoded, only stored."""
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest_asyncio.fixture
async def create_entry(test_client):
    """Factory fixture: POST an entry and return its JSON body."""

    async def _create(title="Titre", content="Contenu", category_id=None):
        response = await test_client.post(
            "/api/entries",
            json={"title": title, "content": content, "categoryId": category_id},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _create
