from enum import Enum
from typing import Dict, FrozenSet

from pydantic import BaseModel


class FieldTypeCapability(str, Enum):
    entity_reference = "entity_reference"
    file = "file"


class DisplayOptions(BaseModel):
    # widget id (form display) or formatter id (view display)
    type: str | None = None


class FieldStorageOptions(BaseModel):
    target_type: str | None = None


class PreconfiguredFieldOption(BaseModel):
    label: str
    field_storage_config: FieldStorageOptions = FieldStorageOptions()
    entity_form_display: DisplayOptions = DisplayOptions()
    entity_view_display: DisplayOptions = DisplayOptions()


PreconfiguredOptions = Dict[str, PreconfiguredFieldOption]


class FieldTypeDefinition(BaseModel):
    id: str
    label: str
    capabilities: FrozenSet[FieldTypeCapability] = frozenset()
    # offers one preconfigured option per referenceable entity type
    preconfigured: bool = False
