"""Repository layer for server and event configuration files."""

from .event_config import EventConfigRepository
from .server import ServerRepository, load_servers

__all__ = [
    "EventConfigRepository",
    "ServerRepository",
    "load_servers",
]
