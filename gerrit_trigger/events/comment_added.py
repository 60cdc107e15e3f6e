"""Event configuration that triggers a build when a comment is added."""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass, fields
from typing import Any, ClassVar

from ..errors import PatternCompileError
from ..models.comment_added import CommentAdded
from .base import PluginGerritEvent

logger = logging.getLogger(__name__)

COMMENT_ADDED = "comment-added"


@dataclass(frozen=True)
class PluginCommentAddedEvent(PluginGerritEvent):
    """Comment-added trigger configuration.

    The comment pattern is stored as text and compiled on every call to
    :meth:`matches`, so an invalid pattern is only reported at match time.
    All fields default to ``None`` for deserialization.
    """

    event_type: ClassVar[str] = COMMENT_ADDED
    corresponding_event_class: ClassVar[type] = CommentAdded

    verdict_category: str | None = None
    comment_added_trigger_approval_value: str | None = None
    comment_pattern: str | None = None

    def __post_init__(self) -> None:
        logger.debug(f"Category: {self.verdict_category}")
        logger.debug(f"Approval value: {self.comment_added_trigger_approval_value}")
        logger.debug(f"Pattern: {self.comment_pattern}")

    def matches(self, comment: str) -> bool:
        """Return True if the comment pattern occurs anywhere in *comment*.

        Raises PatternCompileError if the pattern is unset or invalid.
        """
        logger.debug(f"Comment: {comment}")
        if self.comment_pattern is None:
            raise PatternCompileError(None, "no comment pattern configured")
        try:
            pattern = re.compile(self.comment_pattern)
        except (re.error, TypeError) as e:
            raise PatternCompileError(self.comment_pattern, str(e)) from e

        if pattern.search(comment):
            logger.debug("Pattern found!")
            return True
        logger.debug("Pattern not found")
        return False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PluginCommentAddedEvent:
        """Restore a config; unknown keys are ignored, missing ones stay None.

        Raises TypeError if a field holds anything but a string or None.
        """
        names = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in names}
        for key, value in values.items():
            if value is not None and not isinstance(value, str):
                raise TypeError(f"{key} must be a string, got {type(value).__name__}")
        return cls(**values)
