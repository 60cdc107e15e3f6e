"""Services layer - business logic over the server and event config repositories."""

from .category_service import CategoryService, fill_categories
from .event_config_service import EventConfigService

__all__ = [
    "CategoryService",
    "EventConfigService",
    "fill_categories",
]
