"""
Access evaluation for field configurations.

Each evaluator answers ALLOW, DENY or NEUTRAL for one (field config, operation,
actor) triple. ``FieldConfigAccessHandler`` asks all of them and combines the
answers with ``media.domain.access.combine``.
"""
import logging
from typing import Protocol, Sequence

from media.domain.access import AccessResult, combine
from media.domain.errors import ConfigurationIntegrityFault, MediaTypeNotFound
from media.services.type_registry import TypeRegistry
from shared.entities.actor import Actor, RoleName

log = logging.getLogger(__name__)

MEDIA_ENTITY_TYPE = "media"


class FieldConfigRef(Protocol):
    id: str
    target_entity_type: str
    target_bundle: str


class FieldConfigAccessPolicy(Protocol):
    async def check(self, field_config: FieldConfigRef, operation: str, actor: Actor) -> AccessResult: ...


class MediaSourceFieldPolicy:
    """Forbids deleting the source field of a media type. Never grants access."""

    def __init__(self, registry: TypeRegistry):
        self.registry = registry

    async def check(self, field_config: FieldConfigRef, operation: str, actor: Actor) -> AccessResult:
        if operation != "delete" or field_config.target_entity_type != MEDIA_ENTITY_TYPE:
            return AccessResult.neutral

        try:
            media_type = await self.registry.lookup(field_config.target_bundle)
        except MediaTypeNotFound as e:
            log.error(
                "access: field config %s targets missing media type %s",
                field_config.id,
                field_config.target_bundle,
            )
            raise ConfigurationIntegrityFault(field_config.id, field_config.target_bundle) from e

        if field_config.id == media_type.source_field_id:
            log.info("access: refusing delete of source field %s for %s", field_config.id, actor.subject)
            return AccessResult.deny
        return AccessResult.neutral

    async def can_delete(self, field_config: FieldConfigRef, actor: Actor) -> AccessResult:
        return await self.check(field_config, "delete", actor)


class AdministerFieldsPolicy:
    """Admins may administer any field configuration."""

    async def check(self, field_config: FieldConfigRef, operation: str, actor: Actor) -> AccessResult:
        return AccessResult.allow if actor.has_role(RoleName.admin) else AccessResult.neutral


class FieldConfigAccessHandler:
    def __init__(self, policies: Sequence[FieldConfigAccessPolicy]):
        self.policies = list(policies)

    async def access(self, field_config: FieldConfigRef, operation: str, actor: Actor) -> AccessResult:
        results = []
        for policy in self.policies:
            result = await policy.check(field_config, operation, actor)
            if result.is_forbidden:
                # deny wins; later evaluators cannot change the verdict
                return result
            results.append(result)
        return combine(results)

    async def is_granted(self, field_config: FieldConfigRef, operation: str, actor: Actor) -> bool:
        return (await self.access(field_config, operation, actor)).is_allowed
