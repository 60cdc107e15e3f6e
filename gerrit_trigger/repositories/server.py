"""Repository for the Gerrit server configuration file."""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Iterable
from pathlib import Path

from ..errors import ServerConfigError, ServerNotFoundError
from ..models.server import GerritServer, VerdictCategory

logger = logging.getLogger(__name__)


def _require_str(entry: dict, key: str, default: str | None = None) -> str:
    value = entry.get(key, default)
    if not isinstance(value, str):
        raise ServerConfigError(f"Malformed entry {entry!r}: {key!r} must be a string")
    return value


def _parse_server(raw: dict) -> GerritServer:
    """Convert one JSON server entry to a GerritServer."""
    if not isinstance(raw, dict):
        raise ServerConfigError(f"Malformed server entry {raw!r}")
    raw_categories = raw.get("categories") or []
    if not isinstance(raw_categories, list) or not all(isinstance(c, dict) for c in raw_categories):
        raise ServerConfigError(f"Malformed categories in server entry {raw!r}")
    categories = tuple(
        VerdictCategory(
            value=_require_str(c, "value"),
            description=_require_str(c, "description", ""),
        )
        for c in raw_categories
    )
    return GerritServer(name=_require_str(raw, "name"), categories=categories)


def load_servers(path: Path) -> tuple[GerritServer, ...]:
    """Read ``{"servers": [...]}`` from *path*, keeping declaration order."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ServerConfigError(f"Server config not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ServerConfigError(f"Server config {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("servers", []), list):
        raise ServerConfigError(f"Server config {path} must contain a 'servers' list")

    servers = tuple(_parse_server(raw) for raw in data.get("servers", []))
    names = [s.name for s in servers]
    if len(names) != len(set(names)):
        raise ServerConfigError(f"Duplicate server names in {path}")
    return servers


class ServerRepository:
    """Holds the configured servers as an immutable snapshot.

    A reload swaps the whole tuple, so readers holding a snapshot never see a
    partially applied configuration.
    """

    def __init__(self, servers: Iterable[GerritServer] = (), path: Path | None = None) -> None:
        self.path = path
        self._servers: tuple[GerritServer, ...] = tuple(servers)
        self._lock = threading.Lock()

    @classmethod
    def from_file(cls, path: Path) -> ServerRepository:
        repo = cls(path=path)
        repo.reload()
        return repo

    def snapshot(self) -> tuple[GerritServer, ...]:
        return self._servers

    def get_server(self, name: str) -> GerritServer:
        for server in self._servers:
            if server.name == name:
                return server
        raise ServerNotFoundError(name)

    def replace(self, servers: Iterable[GerritServer]) -> None:
        new = tuple(servers)
        with self._lock:
            self._servers = new
        logger.info(f"Server configuration replaced ({len(new)} servers)")

    def reload(self) -> None:
        """Re-read the backing file. The old snapshot stays on failure."""
        if self.path is None:
            raise ServerConfigError("No server config file to reload from")
        self.replace(load_servers(self.path))
