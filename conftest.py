# conftest.py
import os
from typing import Any, AsyncGenerator, Dict, Optional

# Settings are read at import time; give the app a complete environment first.
os.environ.setdefault("DB_USER", "media")
os.environ.setdefault("DB_PASS", "media")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_PORT", "5432")
os.environ.setdefault("DB_NAME", "media")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.core.auth import get_current_actor
from app.core.database.db import get_session
from app.core.database.base import Base
from media.domain.entities import RemoteMediaMetadata
from media.domain.models import FieldConfig, MediaType
from media.domain.sources import SourceKind
from media.ports.outbound.cache_port import CachePort
from media.services.remote_media.provider_registry import ProviderRegistry
from shared.entities.actor import Actor, RoleName
from shared.wiring import get_cache, get_provider_registry


# ---- Fakes ------------------------------------------------------------------

class _FakeCache(CachePort):
    def __init__(self) -> None:
        self.store: Dict[str, Any] = {}

    async def get(self, key: str) -> Optional[Any]:
        return self.store.get(key)

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        # store the dict directly; the redis adapter handles serialization
        self.store[key] = value
        return True

    async def delete_keys(self, *keys: str) -> int:
        return sum(1 for k in keys if self.store.pop(k, None) is not None)

    # handy helpers used by tests
    def keys(self):
        return list(self.store.keys())


class FakeOEmbedProvider:
    """Answers for URLs under https://videos.example/ without any network I/O."""

    name = "Example Videos"

    def __init__(self) -> None:
        self.titles: Dict[str, str] = {}
        self.fetched: list[str] = []

    def can_handle(self, url: str) -> bool:
        return url.startswith("https://videos.example/")

    def fetch_metadata(self, url: str) -> Optional[RemoteMediaMetadata]:
        self.fetched.append(url)
        if url not in self.titles:
            return None
        return RemoteMediaMetadata(provider=self.name, url=url, title=self.titles[url])


# ---- Async engine + session --------------------------------------------------

@pytest_asyncio.fixture(scope="function")
async def async_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()

@pytest_asyncio.fixture(scope="function")
async def SessionMaker(async_engine):
    return async_sessionmaker(bind=async_engine, expire_on_commit=False, class_=AsyncSession)

@pytest_asyncio.fixture(autouse=True, scope="function")
async def override_get_session(SessionMaker):
    async def _dep():
        async with SessionMaker() as s:
            yield s
    app.dependency_overrides[get_session] = _dep
    yield
    app.dependency_overrides.pop(get_session, None)

@pytest_asyncio.fixture
async def db_session(SessionMaker):
    async with SessionMaker() as s:
        yield s


@pytest.fixture(autouse=True)
def fake_cache() -> _FakeCache:
    fc = _FakeCache()
    app.dependency_overrides[get_cache] = lambda: fc
    yield fc
    app.dependency_overrides.pop(get_cache, None)


@pytest.fixture(autouse=True)
def fake_provider() -> FakeOEmbedProvider:
    fp = FakeOEmbedProvider()
    app.dependency_overrides[get_provider_registry] = lambda: ProviderRegistry([fp])
    yield fp
    app.dependency_overrides.pop(get_provider_registry, None)


# ---- Auth ------------------------------------------------------------------

@pytest.fixture
def login():
    """Call with role names to act as that user; no call means anonymous (401)."""
    def _login(*roles: RoleName, subject: str = "tester") -> Actor:
        actor = Actor(subject=subject, roles=list(roles))
        app.dependency_overrides[get_current_actor] = lambda: actor
        return actor
    yield _login
    app.dependency_overrides.pop(get_current_actor, None)


# ---- Seed helpers ------------------------------------------------------------

@pytest_asyncio.fixture
async def seed_media_type(db_session: AsyncSession):
    """Insert a media type and its source field straight into the database."""
    async def _seed(media_type_id: str, source: SourceKind, label: str | None = None) -> MediaType:
        source_field = source.source_field_name()
        mt = MediaType(
            id=media_type_id,
            label=label or media_type_id.replace("_", " ").title(),
            source=source,
            source_field=source_field,
        )
        fc = FieldConfig(
            id=f"media.{media_type_id}.{source_field}",
            target_entity_type="media",
            target_bundle=media_type_id,
            field_name=source_field,
            field_type=source.definition.field_type,
            label=source.definition.label,
            required=True,
            settings={},
        )
        db_session.add_all([mt, fc])
        await db_session.commit()
        return mt
    return _seed


# ---- HTTP client -------------------------------------------------------------

@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as c:
        yield c
