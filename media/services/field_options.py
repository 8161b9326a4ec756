from typing import AbstractSet, Dict, Optional

from media.domain.entities.field_options import (
    DisplayOptions,
    FieldStorageOptions,
    FieldTypeCapability,
    FieldTypeDefinition,
    PreconfiguredFieldOption,
    PreconfiguredOptions,
)


RENDERED_ENTITY_FORMATTER = "entity_reference_entity_view"
LABEL_FORMATTER = "entity_reference_label"
AUTOCOMPLETE_WIDGET = "entity_reference_autocomplete"

_REF = FieldTypeCapability.entity_reference
_FILE = FieldTypeCapability.file

FIELD_TYPES: Dict[str, FieldTypeDefinition] = {
    ft.id: ft
    for ft in (
        FieldTypeDefinition(id="entity_reference", label="Entity reference", capabilities=frozenset({_REF}), preconfigured=True),
        FieldTypeDefinition(id="file", label="File", capabilities=frozenset({_REF, _FILE})),
        FieldTypeDefinition(id="image", label="Image", capabilities=frozenset({_REF, _FILE})),
        FieldTypeDefinition(id="string", label="Text (plain)"),
        FieldTypeDefinition(id="string_long", label="Text (plain, long)"),
        FieldTypeDefinition(id="text_long", label="Text (formatted, long)"),
        FieldTypeDefinition(id="boolean", label="Boolean"),
        FieldTypeDefinition(id="integer", label="Number (integer)"),
    )
}

# entity types an entity reference field can be preconfigured to point at
REFERENCEABLE_ENTITY_TYPES: Dict[str, str] = {
    "media": "Media",
    "file": "File",
    "user": "User",
}


def get_field_type(field_type: str) -> Optional[FieldTypeDefinition]:
    return FIELD_TYPES.get(field_type)


def adjust_default_formatter(
    options: PreconfiguredOptions,
    field_type_capabilities: AbstractSet[FieldTypeCapability],
) -> None:
    """Media references render the referenced entity by default instead of its label."""
    if FieldTypeCapability.entity_reference not in field_type_capabilities:
        return
    media = options.get("media")
    if media is not None:
        media.entity_view_display.type = RENDERED_ENTITY_FORMATTER


def preconfigured_options(field_type: FieldTypeDefinition) -> PreconfiguredOptions:
    options: PreconfiguredOptions = {}
    if field_type.preconfigured:
        for entity_type, label in REFERENCEABLE_ENTITY_TYPES.items():
            options[entity_type] = PreconfiguredFieldOption(
                label=label,
                field_storage_config=FieldStorageOptions(target_type=entity_type),
                entity_form_display=DisplayOptions(type=AUTOCOMPLETE_WIDGET),
                entity_view_display=DisplayOptions(type=LABEL_FORMATTER),
            )
    adjust_default_formatter(options, field_type.capabilities)
    return options
