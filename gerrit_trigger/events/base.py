"""Base classes for configurable trigger event types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar


class PluginGerritEvent(ABC):
    """A trigger event configuration.

    Subclasses set ``event_type`` to the tag they are registered under and
    ``corresponding_event_class`` to the stream event they react to.
    """

    event_type: ClassVar[str]
    corresponding_event_class: ClassVar[type]

    @property
    def descriptor(self) -> PluginGerritEventDescriptor:
        from .registry import get_descriptor

        return get_descriptor(self.event_type)

    @abstractmethod
    def to_dict(self) -> dict[str, Any]: ...

    @classmethod
    @abstractmethod
    def from_dict(cls, data: dict[str, Any]) -> PluginGerritEvent: ...


class PluginGerritEventDescriptor:
    """Describes an event type to the configuration UI."""

    event_class: ClassVar[type[PluginGerritEvent]]
    display_name: ClassVar[str]

    @property
    def event_type(self) -> str:
        return self.event_class.event_type

    def new_instance(self, data: dict[str, Any]) -> PluginGerritEvent:
        return self.event_class.from_dict(data)
