from datetime import datetime
from typing import Optional

from pydantic import computed_field

from media.domain.entities.media_type import MediaTypeBase
from media.domain.sources import SourceKind


class MediaTypeOut(MediaTypeBase):
    id: str
    source: SourceKind
    source_field: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def source_field_id(self) -> str:
        """Id of the field config the source owns; it cannot be deleted."""
        return f"media.{self.id}.{self.source_field}"

    class Config:
        from_attributes = True
