from typing import List

from pydantic import BaseModel, constr


class FieldSettings(BaseModel):
    """Settings used by entity-reference fields; empty for plain fields."""

    target_type: str | None = None
    # None means every bundle of target_type may be referenced; [] means none may
    target_bundles: List[str] | None = None


class FieldConfigBase(BaseModel):
    target_entity_type: constr(pattern=r"^[a-z0-9_]+$", min_length=1, max_length=64)
    target_bundle: constr(pattern=r"^[a-z0-9_]+$", min_length=1, max_length=64)
    field_name: constr(pattern=r"^[a-z0-9_]+$", min_length=1, max_length=64)
    field_type: str
    label: constr(min_length=1, max_length=255)
    required: bool = False
    settings: FieldSettings = FieldSettings()

class FieldConfigCreate(FieldConfigBase):
    model_config = {
        "json_schema_extra": {
            "example": {
                "target_entity_type": "node",
                "target_bundle": "article",
                "field_name": "field_hero",
                "field_type": "entity_reference",
                "label": "Hero media",
                "settings": {"target_type": "media", "target_bundles": ["image", "remote_video"]},
            }
        }
    }
