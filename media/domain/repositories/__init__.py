from .media_type_repository import MediaTypeRepository
from .field_config_repository import FieldConfigRepository, field_config_id
from .media_item_repository import MediaItemRepository

__all__ = ["MediaTypeRepository", "FieldConfigRepository", "MediaItemRepository", "field_config_id"]
