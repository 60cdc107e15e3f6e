"""Data models for Gerrit servers and their verdict categories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

# Server selector meaning "every configured server"
ANY_SERVER = "__ANY__"


@dataclass(frozen=True)
class VerdictCategory:
    """An approval axis such as Code-Review or Verified."""

    value: str
    description: str


@dataclass(frozen=True)
class GerritServer:
    """A configured Gerrit server. Categories keep their declared order."""

    name: str
    categories: tuple[VerdictCategory, ...] = field(default_factory=tuple)


class CategoryOption(NamedTuple):
    """One entry of the verdict category drop-down list."""

    value: str
    description: str
