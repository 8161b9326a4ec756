from types import SimpleNamespace

import pytest

from media.domain.access import AccessResult, combine, is_granted
from media.domain.errors import ConfigurationIntegrityFault, MediaTypeNotFound
from media.domain.sources import SourceKind
from media.services.access_policy import (
    AdministerFieldsPolicy,
    FieldConfigAccessHandler,
    MediaSourceFieldPolicy,
)
from shared.entities.actor import Actor, RoleName
from shared.entities.media_type import MediaTypeOut


# ---------------------------
# Helpers
# ---------------------------

class _StaticRegistry:
    def __init__(self, *media_types: MediaTypeOut):
        self._types = {t.id: t for t in media_types}
        self.lookups: list[str] = []

    async def lookup(self, media_type_id: str) -> MediaTypeOut:
        self.lookups.append(media_type_id)
        if media_type_id not in self._types:
            raise MediaTypeNotFound(media_type_id)
        return self._types[media_type_id]


def _media_type(media_type_id: str, source: SourceKind, source_field: str | None = None) -> MediaTypeOut:
    return MediaTypeOut(
        id=media_type_id,
        label=media_type_id,
        source=source,
        source_field=source_field or source.source_field_name(),
    )


def _field(config_id: str, entity_type: str = "media", bundle: str = "image"):
    return SimpleNamespace(id=config_id, target_entity_type=entity_type, target_bundle=bundle)


ADMIN = Actor(subject="root", roles=[RoleName.admin])
EDITOR = Actor(subject="ed", roles=[RoleName.editor])
IMAGE = _media_type("image", SourceKind.image)


# ==============================================================================
# Source field policy
# ==============================================================================

@pytest.mark.asyncio
async def test_should_deny_deleting_the_source_field_of_a_media_type():
    policy = MediaSourceFieldPolicy(_StaticRegistry(IMAGE))

    result = await policy.can_delete(_field("media.image.field_media_image"), ADMIN)

    assert result is AccessResult.deny


@pytest.mark.asyncio
async def test_should_be_neutral_for_other_fields_of_a_media_type():
    policy = MediaSourceFieldPolicy(_StaticRegistry(IMAGE))

    result = await policy.can_delete(_field("media.image.field_caption"), ADMIN)

    assert result is AccessResult.neutral


@pytest.mark.asyncio
@pytest.mark.parametrize("source", list(SourceKind))
async def test_should_protect_the_source_field_of_every_source_kind(source: SourceKind):
    mt = _media_type("thing", source)
    policy = MediaSourceFieldPolicy(_StaticRegistry(mt))

    protected = _field(f"media.thing.{source.source_field_name()}", bundle="thing")
    other = _field("media.thing.field_tags", bundle="thing")

    assert await policy.can_delete(protected, EDITOR) is AccessResult.deny
    assert await policy.can_delete(other, EDITOR) is AccessResult.neutral


@pytest.mark.asyncio
async def test_should_use_a_custom_source_field_name():
    mt = _media_type("photo", SourceKind.image, source_field="field_photo_file")
    policy = MediaSourceFieldPolicy(_StaticRegistry(mt))

    assert await policy.can_delete(_field("media.photo.field_photo_file", bundle="photo"), ADMIN) is AccessResult.deny
    assert await policy.can_delete(_field("media.photo.field_media_image", bundle="photo"), ADMIN) is AccessResult.neutral


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["view", "update", "create"])
async def test_should_be_neutral_without_lookup_for_operations_other_than_delete(operation: str):
    registry = _StaticRegistry(IMAGE)
    policy = MediaSourceFieldPolicy(registry)

    result = await policy.check(_field("media.image.field_media_image"), operation, ADMIN)

    assert result is AccessResult.neutral
    assert registry.lookups == []


@pytest.mark.asyncio
async def test_should_be_neutral_without_lookup_for_non_media_fields():
    registry = _StaticRegistry()
    policy = MediaSourceFieldPolicy(registry)

    # bundle does not exist as a media type; it must not matter
    result = await policy.can_delete(_field("node.image.field_media_image", entity_type="node"), ADMIN)

    assert result is AccessResult.neutral
    assert registry.lookups == []


@pytest.mark.asyncio
async def test_should_raise_integrity_fault_when_media_type_is_missing():
    policy = MediaSourceFieldPolicy(_StaticRegistry())

    with pytest.raises(ConfigurationIntegrityFault) as excinfo:
        await policy.can_delete(_field("media.ghost.field_media_image", bundle="ghost"), ADMIN)

    assert excinfo.value.bundle == "ghost"
    assert isinstance(excinfo.value.__cause__, MediaTypeNotFound)


# ==============================================================================
# Role policy + combination
# ==============================================================================

@pytest.mark.asyncio
async def test_should_allow_admins_and_stay_neutral_for_others():
    policy = AdministerFieldsPolicy()
    field = _field("media.image.field_caption")

    assert await policy.check(field, "delete", ADMIN) is AccessResult.allow
    assert await policy.check(field, "delete", EDITOR) is AccessResult.neutral


def test_should_combine_with_deny_winning_then_allow_then_default_deny():
    allow, deny, neutral = AccessResult.allow, AccessResult.deny, AccessResult.neutral

    assert combine([allow, deny]) is deny
    assert combine([deny, allow]) is deny
    assert combine([neutral, allow]) is allow
    assert combine([neutral, neutral]) is neutral
    assert combine([]) is neutral

    assert is_granted([neutral, allow]) is True
    assert is_granted([neutral]) is False
    assert is_granted([allow, deny]) is False


@pytest.mark.asyncio
async def test_should_refuse_admin_deleting_source_field_through_handler():
    handler = FieldConfigAccessHandler([MediaSourceFieldPolicy(_StaticRegistry(IMAGE)), AdministerFieldsPolicy()])

    assert await handler.access(_field("media.image.field_media_image"), "delete", ADMIN) is AccessResult.deny
    assert await handler.is_granted(_field("media.image.field_caption"), "delete", ADMIN) is True
    assert await handler.is_granted(_field("media.image.field_caption"), "delete", EDITOR) is False
