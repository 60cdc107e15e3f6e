"""Dependency injection utilities for FastAPI"""

import logging

from fastapi import Depends, HTTPException

from ..errors import ServerConfigError
from ..repositories import EventConfigRepository, ServerRepository
from ..services import CategoryService, EventConfigService
from .config import get_settings

logger = logging.getLogger(__name__)

_server_repo: ServerRepository | None = None
_event_config_repo: EventConfigRepository | None = None


def init_repositories(
    server_repo: ServerRepository, event_config_repo: EventConfigRepository
) -> None:
    """Install the shared repositories. Called from the app lifespan."""
    global _server_repo, _event_config_repo
    _server_repo = server_repo
    _event_config_repo = event_config_repo


def load_repositories() -> None:
    """Build repositories from settings; a missing server file leaves it empty."""
    settings = get_settings()
    try:
        server_repo = ServerRepository.from_file(settings.servers_file)
    except ServerConfigError as e:
        logger.warning(f"{e}, starting with no servers")
        server_repo = ServerRepository(path=settings.servers_file)
    init_repositories(server_repo, EventConfigRepository(settings.event_configs_file))


def get_server_repository() -> ServerRepository:
    if _server_repo is None:
        raise HTTPException(status_code=503, detail="Server configuration not loaded")
    return _server_repo


def get_event_config_repository() -> EventConfigRepository:
    if _event_config_repo is None:
        raise HTTPException(status_code=503, detail="Event config store not ready")
    return _event_config_repo


def get_category_service(
    repo: ServerRepository = Depends(get_server_repository),
) -> CategoryService:
    return CategoryService(repo)


def get_event_config_service(
    repo: EventConfigRepository = Depends(get_event_config_repository),
) -> EventConfigService:
    return EventConfigService(repo)
