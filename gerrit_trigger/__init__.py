"""Gerrit comment-added trigger event: matching and verdict category lookup."""

from .errors import (
    EventConfigNotFoundError,
    EventConfigStoreError,
    GerritTriggerError,
    PatternCompileError,
    ServerConfigError,
    ServerNotFoundError,
)
from .events import PluginCommentAddedEvent
from .models import ANY_SERVER, CategoryOption, GerritServer, VerdictCategory
from .services import fill_categories

__version__ = "0.1.0"

__all__ = [
    "ANY_SERVER",
    "CategoryOption",
    "EventConfigNotFoundError",
    "EventConfigStoreError",
    "GerritServer",
    "GerritTriggerError",
    "PatternCompileError",
    "PluginCommentAddedEvent",
    "ServerConfigError",
    "ServerNotFoundError",
    "VerdictCategory",
    "fill_categories",
]
