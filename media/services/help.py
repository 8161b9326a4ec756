from typing import Optional

from media.services.type_registry import TypeRegistry
from shared.entities.field_config import FieldConfigOut
from shared.entities.help import AllowedMediaType, HelpTopicOut, ReferenceHelpOut

HELP_TOPICS = {
    "media": HelpTopicOut(
        topic="media",
        title="About media",
        text=(
            "Media items are reusable assets such as images, documents, audio and video. "
            "Each media item belongs to a media type, and each media type uses one source "
            "which derives the item's metadata and stores its asset in the type's source field."
        ),
    ),
    "media_types": HelpTopicOut(
        topic="media_types",
        title="Media types",
        text=(
            "A media type binds a source (image, remote video, document, audio file or video file) "
            "to a source field. The source of a media type cannot be changed after it is created, "
            "and its source field cannot be deleted. A media type that still has media items "
            "cannot be removed."
        ),
    ),
    "media_items": HelpTopicOut(
        topic="media_items",
        title="Media items",
        text=(
            "Media items are created for a media type. Remote video items must point at a URL "
            "of a supported provider; the provider's title is used when no label is given."
        ),
    ),
}


def help_topic(topic: str) -> Optional[HelpTopicOut]:
    return HELP_TOPICS.get(topic)


def is_media_reference(field_config: FieldConfigOut) -> bool:
    return field_config.field_type == "entity_reference" and field_config.settings.target_type == "media"


async def reference_help(field_config: FieldConfigOut, registry: TypeRegistry) -> Optional[ReferenceHelpOut]:
    """Describes which media types a media reference field accepts; None for other fields."""
    if not is_media_reference(field_config):
        return None

    media_types = await registry.list()
    bundles = field_config.settings.target_bundles
    if bundles is not None:
        media_types = [t for t in media_types if t.id in bundles]

    allowed = [AllowedMediaType(id=t.id, label=t.label) for t in media_types]
    if allowed:
        text = "Allowed media types: " + ", ".join(t.label for t in allowed) + "."
    else:
        text = "No media types can be referenced by this field yet. Create a media type first."
    return ReferenceHelpOut(field_config_id=field_config.id, allowed_media_types=allowed, text=text)
