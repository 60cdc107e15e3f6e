"""Explicit table of the event types this service knows about."""

from __future__ import annotations

import logging

from .base import PluginGerritEventDescriptor

logger = logging.getLogger(__name__)

_descriptors: dict[str, PluginGerritEventDescriptor] = {}


def register(descriptor: PluginGerritEventDescriptor) -> PluginGerritEventDescriptor:
    """Add *descriptor* to the table. Each event type may register once."""
    event_type = descriptor.event_type
    if event_type in _descriptors:
        raise ValueError(f"Event type already registered: {event_type}")
    _descriptors[event_type] = descriptor
    logger.debug(f"Registered event type {event_type} ({descriptor.display_name})")
    return descriptor


def get_descriptor(event_type: str) -> PluginGerritEventDescriptor:
    try:
        return _descriptors[event_type]
    except KeyError:
        raise LookupError(f"Unknown event type: {event_type}") from None


def all_descriptors() -> list[PluginGerritEventDescriptor]:
    return list(_descriptors.values())
