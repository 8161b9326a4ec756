from .media_type import MediaType
from .field_config import FieldConfig
from .media_item import MediaItem

__all__ = ["MediaType", "FieldConfig", "MediaItem"]
