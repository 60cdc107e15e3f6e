"""Descriptors exposing event types to the configuration UI."""

from __future__ import annotations

from collections.abc import Iterable

from ..models.server import ANY_SERVER, CategoryOption, GerritServer
from ..services.category_service import fill_categories
from .base import PluginGerritEventDescriptor
from .comment_added import PluginCommentAddedEvent


class PluginCommentAddedEventDescriptor(PluginGerritEventDescriptor):
    event_class = PluginCommentAddedEvent
    display_name = "Comment Added"

    def fill_verdict_category_items(
        self, servers: Iterable[GerritServer], server_name: str | None = ANY_SERVER
    ) -> list[CategoryOption]:
        """Fill the verdict category drop-down for the chosen server."""
        return fill_categories(servers, server_name)
