from typing import List

from pydantic import BaseModel


class HelpTopicOut(BaseModel):
    topic: str
    title: str
    text: str


class AllowedMediaType(BaseModel):
    id: str
    label: str


class ReferenceHelpOut(BaseModel):
    field_config_id: str
    allowed_media_types: List[AllowedMediaType]
    text: str
