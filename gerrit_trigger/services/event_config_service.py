"""Event config service — business-logic layer for stored trigger configurations."""

from __future__ import annotations

import logging

from ..events.comment_added import PluginCommentAddedEvent
from ..repositories.event_config import EventConfigRepository

logger = logging.getLogger(__name__)


class EventConfigService:
    """API-facing comment-added config operations."""

    def __init__(self, repo: EventConfigRepository) -> None:
        self.repo = repo

    def list_configs(self) -> list[dict]:
        return [{"name": name, **cfg.to_dict()} for name, cfg in self.repo.list_all().items()]

    def get_config(self, name: str) -> dict:
        return {"name": name, **self.repo.get(name).to_dict()}

    def save_config(
        self,
        name: str,
        *,
        verdict_category: str | None = None,
        comment_added_trigger_approval_value: str | None = None,
        comment_pattern: str | None = None,
    ) -> dict:
        """Store a config. The pattern is kept as given and checked at match time."""
        if not name:
            raise ValueError("Config name must not be empty")
        cfg = PluginCommentAddedEvent(
            verdict_category=verdict_category,
            comment_added_trigger_approval_value=comment_added_trigger_approval_value,
            comment_pattern=comment_pattern,
        )
        self.repo.upsert(name, cfg)
        return {"name": name, **cfg.to_dict()}

    def delete_config(self, name: str) -> bool:
        return self.repo.delete(name)

    def match_stored(self, name: str, comment: str) -> bool:
        """Run a stored config against *comment*."""
        return self.repo.get(name).matches(comment)
