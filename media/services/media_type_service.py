import logging
from typing import List

from media.domain.entities.field_config import FieldConfigCreate
from media.domain.entities.media_type import MediaTypeCreate, MediaTypeUpdate
from media.domain.errors import MediaTypeExists, MediaTypeInUse, MediaTypeNotFound
from media.domain.sources import SourceKind
from media.services.access_policy import MEDIA_ENTITY_TYPE
from media.services.type_registry import TypeRegistry
from shared.abstracts.abstract_repository import AbstractRepository
from shared.entities.media_type import MediaTypeOut

log = logging.getLogger(__name__)

DEFAULT_MEDIA_TYPES = [
    MediaTypeCreate(id="image", label="Image", source=SourceKind.image,
                    description="Use local images for reusable media."),
    MediaTypeCreate(id="document", label="Document", source=SourceKind.document,
                    description="An uploaded file or document, such as a PDF."),
    MediaTypeCreate(id="remote_video", label="Remote video", source=SourceKind.remote_video,
                    description="A remotely hosted video from YouTube or Vimeo."),
    MediaTypeCreate(id="audio", label="Audio", source=SourceKind.audio_file,
                    description="A locally hosted audio file."),
    MediaTypeCreate(id="video", label="Video", source=SourceKind.video_file,
                    description="A locally hosted video file."),
]

class MediaTypeService:
    """
    Administration of media types.

    Creating a type also creates its source field; deleting a type removes its
    field configs. Every write goes through the registry so lookups see it.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        types_repo: AbstractRepository,     # MediaTypeRepository
        fields_repo: AbstractRepository,    # FieldConfigRepository
        items_repo: AbstractRepository,     # MediaItemRepository
    ):
        self.registry = registry
        self.types = types_repo
        self.fields = fields_repo
        self.items = items_repo

    async def create(self, payload: MediaTypeCreate) -> MediaTypeOut:
        if await self.types.get(payload.id):
            raise MediaTypeExists(payload.id)

        source = payload.source.definition
        field_name = payload.source_field or payload.source.source_field_name()
        # the type insert commits both rows
        await self.fields.insert(
            FieldConfigCreate(
                target_entity_type=MEDIA_ENTITY_TYPE,
                target_bundle=payload.id,
                field_name=field_name,
                field_type=source.field_type,
                label=source.label,
                required=True,
            ),
            commit=False,
        )
        obj = await self.types.insert(payload.model_copy(update={"source_field": field_name}))

        dto = MediaTypeOut.model_validate(obj)
        await self.registry.remember(dto)
        log.info("media type %s created with source %s (%s)", dto.id, dto.source.value, dto.source_field_id)
        return dto

    async def update(self, media_type_id: str, payload: MediaTypeUpdate) -> MediaTypeOut:
        obj = await self.types.update(media_type_id, payload)
        if not obj:
            raise MediaTypeNotFound(media_type_id)
        dto = MediaTypeOut.model_validate(obj)
        await self.registry.remember(dto)
        return dto

    async def delete(self, media_type_id: str) -> None:
        if not await self.types.get(media_type_id):
            raise MediaTypeNotFound(media_type_id)

        in_use = await self.items.count_by_bundle(media_type_id)
        if in_use:
            raise MediaTypeInUse(media_type_id, in_use)

        # the type delete commits both; a failure leaves type and fields in place
        removed = await self.fields.delete_by_bundle(MEDIA_ENTITY_TYPE, media_type_id, commit=False)
        await self.types.delete(media_type_id)
        await self.registry.forget(media_type_id)
        log.info("media type %s deleted along with %d field config(s)", media_type_id, removed)

    async def get(self, media_type_id: str) -> MediaTypeOut:
        return await self.registry.lookup(media_type_id)

    async def list(self) -> List[MediaTypeOut]:
        return await self.registry.list()

    async def ensure_defaults(self) -> List[MediaTypeOut]:
        created = []
        for payload in DEFAULT_MEDIA_TYPES:
            if not await self.types.get(payload.id):
                created.append(await self.create(payload))
        return created
