"""Trigger event types and the registry that maps type tags to descriptors."""

from .base import PluginGerritEvent, PluginGerritEventDescriptor
from .comment_added import COMMENT_ADDED, PluginCommentAddedEvent
from .descriptors import PluginCommentAddedEventDescriptor
from .registry import all_descriptors, get_descriptor, register

register(PluginCommentAddedEventDescriptor())

__all__ = [
    "COMMENT_ADDED",
    "PluginCommentAddedEvent",
    "PluginCommentAddedEventDescriptor",
    "PluginGerritEvent",
    "PluginGerritEventDescriptor",
    "all_descriptors",
    "get_descriptor",
    "register",
]
