"""Pytest configuration and fixtures."""

import os
import tempfile
from datetime import datetime
from typing import AsyncGenerator

# Keep files written by the app out of the working tree
_TEST_DATA = tempfile.mkdtemp(prefix="dashboard-tests-")
os.environ.setdefault("DATA_SAVE_FOLDER", _TEST_DATA)
os.environ.setdefault("MEDIA_ROOT", os.path.join(_TEST_DATA, "media"))
# Cheapest bcrypt cost keeps password fixtures fast
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.deps import get_db, get_media_store
from app.core.errors import MediaDeleteError, MediaUploadError
from app.core.security import create_session_token, hash_password
from app.db.base import Base
from app.db import models_registry  # noqa: F401 - Import to register models
from app.main import app
from app.models.event import Event
from app.models.user import User
from app.storage.base import MediaAsset, MediaFile, MediaKind

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class FakeMediaStore:
    """In-memory media store that records every call."""

    base_url = "https://media.test"

    def __init__(self):
        self.uploads: list[tuple[MediaKind, str]] = []
        self.deleted: list[str] = []
        self.fail_uploads: set[str] = set()  # filenames
        self.fail_deletes: set[str] = set()  # urls
        self._counter = 0

    async def upload(self, kind: MediaKind, file: MediaFile) -> MediaAsset:
        if file.filename in self.fail_uploads:
            raise MediaUploadError(file.filename, "rejected by test store")
        self._counter += 1
        key = f"{self._counter}-{file.filename}"
        self.uploads.append((kind, file.filename))
        return MediaAsset(url=f"{self.base_url}/{kind.value}/{key}", key=key)

    async def delete(self, url: str) -> None:
        self.deleted.append(url)
        if url in self.fail_deletes:
            raise MediaDeleteError(url, "unavailable")

    @property
    def call_count(self) -> int:
        return len(self.uploads) + len(self.deleted)


def make_file(
    filename: str = "cover.jpg",
    content_type: str = "image/jpeg",
    size: int = 1024,
) -> MediaFile:
    """Build an in-memory upload of the given size."""
    header = b"\xff\xd8\xff\xe0" if content_type == "image/jpeg" else b""
    return MediaFile(
        filename=filename,
        content_type=content_type,
        data=header + b"\x00" * max(size - len(header), 0),
    )


EVENT_FIELDS = {
    "title": "Feria",
    "description": "desc",
    "address": "Calle 1",
    "startDate": "2025-01-01T10:00",
    "endDate": "2025-01-01T12:00",
}


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        future=True,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session


@pytest.fixture
def media_store() -> FakeMediaStore:
    """Create a recording media store."""
    return FakeMediaStore()


@pytest_asyncio.fixture(scope="function")
async def client(
    db_session: AsyncSession,
    media_store: FakeMediaStore,
) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with overridden dependencies."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_media_store] = lambda: media_store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def test_user(db_session: AsyncSession) -> User:
    """Create test user."""
    user = User(
        id="test-user",
        email="editor@example.com",
        name="Editor",
        hashed_password=hash_password("testpassword"),
        is_active=True,
        is_superuser=False,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture(scope="function")
async def admin_user(db_session: AsyncSession) -> User:
    """Create admin user."""
    user = User(
        id="admin",
        email="admin@example.com",
        name="Administrator",
        hashed_password=hash_password("admin"),
        is_active=True,
        is_superuser=True,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(test_user: User) -> dict:
    """Create authorization headers."""
    token = create_session_token(test_user.id, test_user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_auth_headers(admin_user: User) -> dict:
    """Create admin authorization headers."""
    token = create_session_token(admin_user.id, admin_user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture(scope="function")
async def sample_event(db_session: AsyncSession) -> Event:
    """Create an event that already references stored media."""
    event = Event(
        id="event-001",
        title="Concierto",
        description="Concierto de verano",
        address="Plaza Mayor",
        start_date=datetime(2025, 6, 1, 20, 0),
        end_date=datetime(2025, 6, 1, 23, 0),
        billboard="https://x/billboard.png",
        podcast_url="https://x/podcast.mp3",
        video_url="https://www.youtube.com/embed/abc123",
    )
    event.set_images(["https://x/img1.png", "https://x/img2.png"])
    db_session.add(event)
    await db_session.commit()
    await db_session.refresh(event)
    return event
