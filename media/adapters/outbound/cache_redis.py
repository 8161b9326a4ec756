from __future__ import annotations
from typing import Any

from media.ports.outbound.cache_port import CachePort
from app.core.cache import cache  # shared client opened in the app lifespan


class RedisCacheAdapter(CachePort):
    """CachePort over the process-wide Redis client; a no-op until the client is initialised."""

    async def get(self, key: str) -> Any | None:
        return await cache.get(key)

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        return await cache.set(key, value, ttl)

    async def delete_keys(self, *keys: str) -> int:
        return await cache.delete_keys(*keys)
