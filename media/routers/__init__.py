from .media_types import router as media_types_router
from .field_configs import router as field_configs_router
from .media_items import router as media_items_router
from .field_types import router as field_types_router
from .help import router as help_router

__all__ = [
    "media_types_router",
    "field_configs_router",
    "media_items_router",
    "field_types_router",
    "help_router",
]
