import logging
from typing import List

from app.core.config import settings
from media.domain.errors import MediaTypeNotFound
from media.ports.outbound.cache_port import CachePort
from shared.abstracts.abstract_repository import AbstractRepository
from shared.entities.media_type import MediaTypeOut

log = logging.getLogger(__name__)

def _ck_media_type(media_type_id: str) -> str: return f"media:type:{media_type_id}"

class TypeRegistry:
    """
    Read-side accessor for media types.

    Lookups are read-through cached. Administrative saves write through
    (``remember``) and deletes evict (``forget``), so a change is visible to the
    next lookup.
    """

    def __init__(self, repo: AbstractRepository, cache_port: CachePort):
        self.repo = repo                  # MediaTypeRepository
        self.cache = cache_port

    async def lookup(self, media_type_id: str) -> MediaTypeOut:
        cached = await self.cache.get(_ck_media_type(media_type_id))
        if cached:
            return MediaTypeOut.model_validate(cached)

        obj = await self.repo.get(media_type_id)
        if not obj:
            raise MediaTypeNotFound(media_type_id)

        dto = MediaTypeOut.model_validate(obj)
        await self.remember(dto)
        return dto

    async def list(self) -> List[MediaTypeOut]:
        return [MediaTypeOut.model_validate(row) for row in await self.repo.list()]

    async def remember(self, dto: MediaTypeOut) -> None:
        await self.cache.set(_ck_media_type(dto.id), dto.model_dump(mode="json"), ttl=settings.cache_ttl_seconds)

    async def forget(self, media_type_id: str) -> None:
        await self.cache.delete_keys(_ck_media_type(media_type_id))
        log.debug("type registry: evicted %s", media_type_id)
