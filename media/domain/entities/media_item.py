from pydantic import BaseModel, constr


class MediaItemBase(BaseModel):
    label: constr(min_length=1, max_length=255) | None = None
    status: bool = True
    source_value: str | None = None

class MediaItemCreate(MediaItemBase):
    bundle: constr(pattern=r"^[a-z0-9_]+$", min_length=1, max_length=32)

    model_config = {
        "json_schema_extra": {
            "example": {
                "bundle": "remote_video",
                "source_value": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            }
        }
    }

class RemoteMediaMetadata(BaseModel):
    provider: str                        # e.g. "YouTube"
    url: str
    title: str | None = None
    author_name: str | None = None
    thumbnail_url: str | None = None
    width: int | None = None
    height: int | None = None
    html: str | None = None
