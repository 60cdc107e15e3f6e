"""Exceptions raised by the trigger configuration layer."""

from __future__ import annotations


class GerritTriggerError(Exception):
    """Base class for trigger configuration errors."""


class PatternCompileError(GerritTriggerError):
    """The configured comment pattern is not a valid regular expression."""

    def __init__(self, pattern: str | None, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid comment pattern {pattern!r}: {reason}")


class ServerNotFoundError(GerritTriggerError, LookupError):
    """No server with the requested name is configured."""

    def __init__(self, server_name: str) -> None:
        self.server_name = server_name
        super().__init__(f"Server not found: {server_name}")


class ServerConfigError(GerritTriggerError):
    """The server configuration file is missing or malformed."""


class EventConfigNotFoundError(GerritTriggerError, LookupError):
    """No stored event configuration with the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Event config not found: {name}")


class EventConfigStoreError(GerritTriggerError):
    """The stored event config file is unreadable or malformed."""
