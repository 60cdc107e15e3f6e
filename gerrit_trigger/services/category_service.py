"""Verdict category drop-down population across one or all servers."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import ServerNotFoundError
from ..models.server import ANY_SERVER, CategoryOption, GerritServer, VerdictCategory
from ..repositories.server import ServerRepository

logger = logging.getLogger(__name__)


def fill_categories(
    servers: Iterable[GerritServer], server_selector: str | None
) -> list[CategoryOption]:
    """Build the verdict category items for *server_selector*.

    With ``ANY_SERVER`` (or no selector) the categories of every server are
    merged and deduplicated by value; the first server to declare a value
    wins. With a server name, that server's categories are returned as-is.

    Raises ServerNotFoundError when a named server is not configured.
    """
    servers = tuple(servers)

    categories: Iterable[VerdictCategory]
    if server_selector is None or server_selector == ANY_SERVER:
        merged: dict[str, VerdictCategory] = {}
        for server in servers:
            for category in server.categories:
                merged.setdefault(category.value, category)
        categories = merged.values()
    else:
        for server in servers:
            if server.name == server_selector:
                categories = server.categories
                break
        else:
            raise ServerNotFoundError(server_selector)

    options = [CategoryOption(c.value, c.description) for c in categories]
    logger.debug(f"Filled {len(options)} verdict categories for {server_selector or ANY_SERVER}")
    return options


class CategoryService:
    """API-facing verdict category lookups."""

    def __init__(self, repo: ServerRepository) -> None:
        self.repo = repo

    def list_categories(self, server_name: str | None = ANY_SERVER) -> list[CategoryOption]:
        return fill_categories(self.repo.snapshot(), server_name)

    def list_server_names(self) -> list[str]:
        return [server.name for server in self.repo.snapshot()]
