from datetime import datetime
from typing import Optional

from media.domain.entities.field_config import FieldConfigBase


class FieldConfigOut(FieldConfigBase):
    id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
