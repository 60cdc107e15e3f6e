"""Data model for the Gerrit comment-added stream event."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Approval:
    """An approval value carried by a comment, e.g. Code-Review +2."""

    category: str
    value: str


@dataclass
class CommentAdded:
    """A reviewer posted a comment on a change."""

    comment: str
    approvals: list[Approval] = field(default_factory=list)
    change_id: str | None = None
    provider: str | None = None
