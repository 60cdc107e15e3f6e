"""API Routers package"""

from . import events_router

__all__ = ["events_router"]
