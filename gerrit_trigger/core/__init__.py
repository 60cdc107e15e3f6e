"""Core modules: settings, logging and FastAPI dependencies."""

from .config import DATA_DIR, Settings, get_settings

__all__ = ["DATA_DIR", "Settings", "get_settings"]
