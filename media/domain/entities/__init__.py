from .media_type import MediaTypeCreate, MediaTypeUpdate
from .field_config import FieldConfigCreate, FieldSettings
from .media_item import MediaItemCreate, RemoteMediaMetadata
from .field_options import (
    DisplayOptions,
    FieldStorageOptions,
    FieldTypeCapability,
    FieldTypeDefinition,
    PreconfiguredFieldOption,
    PreconfiguredOptions,
)

__all__ = [
    "MediaTypeCreate",
    "MediaTypeUpdate",
    "FieldConfigCreate",
    "FieldSettings",
    "MediaItemCreate",
    "RemoteMediaMetadata",
    "DisplayOptions",
    "FieldStorageOptions",
    "FieldTypeCapability",
    "FieldTypeDefinition",
    "PreconfiguredFieldOption",
    "PreconfiguredOptions",
]
