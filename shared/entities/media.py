from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from media.domain.entities.media_item import MediaItemBase


class MediaItemOut(MediaItemBase):
    id: UUID
    bundle: str
    label: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TemplateSuggestionsOut(BaseModel):
    media_id: UUID
    view_mode: str
    suggestions: List[str]
