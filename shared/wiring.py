from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.db import get_session
from media.adapters.outbound.cache_redis import RedisCacheAdapter
from media.adapters.outbound.remote_media_providers.oembed_provider import default_providers
from media.domain.repositories import FieldConfigRepository, MediaItemRepository, MediaTypeRepository
from media.ports.outbound.cache_port import CachePort
from media.services.access_policy import AdministerFieldsPolicy, FieldConfigAccessHandler, MediaSourceFieldPolicy
from media.services.field_config_service import FieldConfigService
from media.services.media_item_service import MediaItemService
from media.services.media_type_service import MediaTypeService
from media.services.remote_media.provider_registry import ProviderRegistry
from media.services.type_registry import TypeRegistry


def get_cache() -> CachePort:
    return RedisCacheAdapter()

def get_provider_registry() -> ProviderRegistry:
    # Extensible provider list (add Dailymotion etc. later)
    return ProviderRegistry(providers=default_providers())

def get_type_registry(
    db: AsyncSession = Depends(get_session),
    cache: CachePort = Depends(get_cache),
) -> TypeRegistry:
    return TypeRegistry(MediaTypeRepository(db), cache_port=cache)

def get_field_access_handler(
    registry: TypeRegistry = Depends(get_type_registry),
) -> FieldConfigAccessHandler:
    return FieldConfigAccessHandler([MediaSourceFieldPolicy(registry), AdministerFieldsPolicy()])

def get_media_type_service(
    db: AsyncSession = Depends(get_session),
    registry: TypeRegistry = Depends(get_type_registry),
) -> MediaTypeService:
    """
    All repositories share ONE DB session with the registry, so a type and its
    source field are committed together.
    """
    return MediaTypeService(
        registry,
        types_repo=MediaTypeRepository(db),
        fields_repo=FieldConfigRepository(db),
        items_repo=MediaItemRepository(db),
    )

def get_field_config_service(
    db: AsyncSession = Depends(get_session),
    registry: TypeRegistry = Depends(get_type_registry),
    access_handler: FieldConfigAccessHandler = Depends(get_field_access_handler),
) -> FieldConfigService:
    return FieldConfigService(FieldConfigRepository(db), registry, access_handler)

def get_media_item_service(
    db: AsyncSession = Depends(get_session),
    registry: TypeRegistry = Depends(get_type_registry),
    providers: ProviderRegistry = Depends(get_provider_registry),
) -> MediaItemService:
    return MediaItemService(MediaItemRepository(db), registry, providers)
