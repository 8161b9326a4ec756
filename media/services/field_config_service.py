import logging
from typing import List, Optional

from media.domain.entities.field_config import FieldConfigCreate
from media.domain.errors import AccessDenied, FieldConfigExists, FieldConfigNotFound
from media.domain.repositories.field_config_repository import field_config_id
from media.services.access_policy import MEDIA_ENTITY_TYPE, FieldConfigAccessHandler
from media.services.help import reference_help
from media.services.type_registry import TypeRegistry
from shared.abstracts.abstract_repository import AbstractRepository
from shared.entities.actor import Actor
from shared.entities.field_config import FieldConfigOut
from shared.entities.help import ReferenceHelpOut

log = logging.getLogger(__name__)

class FieldConfigService:
    def __init__(
        self,
        repo: AbstractRepository,                # FieldConfigRepository
        registry: TypeRegistry,
        access_handler: FieldConfigAccessHandler,
    ):
        self.repo = repo
        self.registry = registry
        self.access_handler = access_handler

    async def create(self, payload: FieldConfigCreate) -> FieldConfigOut:
        config_id = field_config_id(payload.target_entity_type, payload.target_bundle, payload.field_name)
        if await self.repo.get(config_id):
            raise FieldConfigExists(config_id)
        if payload.target_entity_type == MEDIA_ENTITY_TYPE:
            # fields can only be attached to media types that exist
            await self.registry.lookup(payload.target_bundle)

        obj = await self.repo.insert(payload)
        return FieldConfigOut.model_validate(obj)

    async def get(self, config_id: str) -> FieldConfigOut:
        obj = await self.repo.get(config_id)
        if not obj:
            raise FieldConfigNotFound(config_id)
        return FieldConfigOut.model_validate(obj)

    async def list(self, entity_type: str | None = None, bundle: str | None = None) -> List[FieldConfigOut]:
        rows = await self.repo.list(entity_type=entity_type, bundle=bundle)
        return [FieldConfigOut.model_validate(r) for r in rows]

    async def delete(self, config_id: str, actor: Actor) -> None:
        field_config = await self.get(config_id)
        if not await self.access_handler.is_granted(field_config, "delete", actor):
            raise AccessDenied("delete", config_id)
        await self.repo.delete(config_id)
        log.info("field config %s deleted by %s", config_id, actor.subject)

    async def reference_help(self, config_id: str) -> Optional[ReferenceHelpOut]:
        return await reference_help(await self.get(config_id), self.registry)
