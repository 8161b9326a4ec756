from pydantic import BaseModel, constr

from media.domain.sources import SourceKind

MachineName = constr(pattern=r"^[a-z0-9_]+$", min_length=1, max_length=32)

class MediaTypeBase(BaseModel):
    label: constr(min_length=1, max_length=255)
    description: str | None = None

class MediaTypeCreate(MediaTypeBase):
    id: MachineName
    source: SourceKind
    # defaults to the source's own field name
    source_field: constr(pattern=r"^[a-z0-9_]+$", min_length=1, max_length=64) | None = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "image",
                "label": "Image",
                "description": "Use local images for reusable media.",
                "source": "image",
            }
        }
    }

class MediaTypeUpdate(BaseModel):
    label: constr(min_length=1, max_length=255) | None = None
    description: str | None = None

    # the source is fixed at creation; unknown keys such as "source" are rejected
    model_config = {"extra": "forbid"}
