"""Repository for stored comment-added event configurations."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from ..errors import EventConfigNotFoundError, EventConfigStoreError
from ..events.comment_added import PluginCommentAddedEvent

logger = logging.getLogger(__name__)


class EventConfigRepository:
    """Named event configurations persisted in a single JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._lock = threading.Lock()

    def _read(self) -> dict[str, dict]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise EventConfigStoreError(
                f"Event config store {self.path} is not valid JSON: {e}"
            ) from e

        configs = data.get("configs", {}) if isinstance(data, dict) else None
        if not isinstance(configs, dict) or not all(isinstance(v, dict) for v in configs.values()):
            raise EventConfigStoreError(
                f"Event config store {self.path} must contain a 'configs' mapping"
            )
        return configs

    def _load(self, name: str, data: dict) -> PluginCommentAddedEvent:
        try:
            return PluginCommentAddedEvent.from_dict(data)
        except TypeError as e:
            raise EventConfigStoreError(f"Stored config {name!r} is malformed: {e}") from e

    def _write(self, configs: dict[str, dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"configs": configs}, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise

    def list_all(self) -> dict[str, PluginCommentAddedEvent]:
        with self._lock:
            raw = self._read()
        return {name: self._load(name, d) for name, d in raw.items()}

    def get(self, name: str) -> PluginCommentAddedEvent:
        with self._lock:
            raw = self._read()
        if name not in raw:
            raise EventConfigNotFoundError(name)
        return self._load(name, raw[name])

    def upsert(self, name: str, config: PluginCommentAddedEvent) -> PluginCommentAddedEvent:
        """Insert or replace the config stored under *name*."""
        with self._lock:
            raw = self._read()
            raw[name] = config.to_dict()
            self._write(raw)
        logger.info(f"Stored event config: {name}")
        return config

    def delete(self, name: str) -> bool:
        """Delete a config. Returns True if deleted."""
        with self._lock:
            raw = self._read()
            if raw.pop(name, None) is None:
                return False
            self._write(raw)
        logger.info(f"Deleted event config: {name}")
        return True
