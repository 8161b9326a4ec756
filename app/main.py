import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.core.cache import cache
from app.core.config import settings
from app.core.database.db import engine, SessionLocal
from app.core.database.base import Base
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging

import media.domain.models  # noqa: F401  (registers tables on Base.metadata)
from media.adapters.outbound.cache_redis import RedisCacheAdapter
from media.domain.repositories import FieldConfigRepository, MediaItemRepository, MediaTypeRepository
from media.services.media_type_service import MediaTypeService
from media.services.type_registry import TypeRegistry

# Routers
from media.routers import (
    field_configs_router,
    field_types_router,
    help_router,
    media_items_router,
    media_types_router,
)

log = logging.getLogger(__name__)


async def seed_default_media_types() -> None:
    async with SessionLocal() as db:
        svc = MediaTypeService(
            TypeRegistry(MediaTypeRepository(db), cache_port=RedisCacheAdapter()),
            types_repo=MediaTypeRepository(db),
            fields_repo=FieldConfigRepository(db),
            items_repo=MediaItemRepository(db),
        )
        created = await svc.ensure_defaults()
    if created:
        log.info("seeded media types: %s", ", ".join(t.id for t in created))


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: dev-friendly table creation
    configure_logging()
    await cache.init()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    if settings.seed_default_media_types:
        await seed_default_media_types()
    yield
    # Shutdown
    await engine.dispose()
    await cache.close()


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    debug=settings.debug,
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)
register_exception_handlers(app)


@app.get("/health", tags=["system"])
async def health():
    return {"status": "ok"}


app.include_router(media_types_router)
app.include_router(field_configs_router)
app.include_router(media_items_router)
app.include_router(field_types_router)
app.include_router(help_router)
