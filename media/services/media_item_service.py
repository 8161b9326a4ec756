import logging
import posixpath
from typing import List
from urllib.parse import urlparse
from uuid import UUID

from media.domain.entities.media_item import MediaItemCreate
from media.domain.errors import MediaItemNotFound, UnsupportedRemoteMedia
from media.domain.models.media_item import LABEL_MAX_LENGTH
from media.services.remote_media.provider_registry import ProviderRegistry
from media.services.template_suggestions import suggest_templates
from media.services.type_registry import TypeRegistry
from shared.abstracts.abstract_repository import AbstractRepository
from shared.entities.media import MediaItemOut, TemplateSuggestionsOut
from shared.entities.media_type import MediaTypeOut

log = logging.getLogger(__name__)

class MediaItemService:
    def __init__(
        self,
        repo: AbstractRepository,          # MediaItemRepository
        registry: TypeRegistry,
        providers: ProviderRegistry,
    ):
        self.repo = repo
        self.registry = registry
        self.providers = providers

    # ---------- Mutations ----------

    async def create(self, payload: MediaItemCreate) -> MediaItemOut:
        media_type = await self.registry.lookup(payload.bundle)
        # runs for every item so remote URLs are validated even when a label is given
        derived = self._derive_label(media_type, payload.source_value)
        label = payload.label or derived[:LABEL_MAX_LENGTH]

        obj = await self.repo.insert(
            bundle=media_type.id,
            label=label,
            status=payload.status,
            source_value=payload.source_value,
        )
        log.info("media item %s created in %s", obj.id, media_type.id)
        return MediaItemOut.model_validate(obj)

    async def delete(self, media_id: UUID) -> None:
        if not await self.repo.delete(media_id):
            raise MediaItemNotFound(media_id)

    # ---------- Queries ----------

    async def get(self, media_id: UUID) -> MediaItemOut:
        obj = await self.repo.get(media_id)
        if not obj:
            raise MediaItemNotFound(media_id)
        return MediaItemOut.model_validate(obj)

    async def list(self, bundle: str | None, limit: int, offset: int) -> List[MediaItemOut]:
        rows = await self.repo.list(bundle=bundle, limit=limit, offset=offset)
        return [MediaItemOut.model_validate(r) for r in rows]

    async def template_suggestions(self, media_id: UUID, view_mode: str) -> TemplateSuggestionsOut:
        item = await self.get(media_id)
        return TemplateSuggestionsOut(
            media_id=item.id,
            view_mode=view_mode,
            suggestions=suggest_templates(item, view_mode),
        )

    # ---------- Internal helpers ----------

    def _derive_label(self, media_type: MediaTypeOut, source_value: str | None) -> str:
        """
        The name a source derives for a new item: the provider title for remote
        media, the file name for local files. Remote URLs are always validated.
        """
        if media_type.source.definition.remote:
            if not source_value:
                raise UnsupportedRemoteMedia("")
            metadata = self.providers.fetch(source_value)
            if metadata and metadata.title:
                return metadata.title
            return source_value

        if source_value:
            name = posixpath.basename(urlparse(source_value).path)
            if name:
                return name
        return f"{media_type.label} item"
