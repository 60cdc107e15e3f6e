"""Trigger event type and comment-added configuration API routes

Routes that read or write configuration files are plain ``def`` and run in
FastAPI's threadpool; in-memory routes are ``async def``.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from ..core.dependencies import (
    get_category_service,
    get_event_config_service,
    get_server_repository,
)
from ..errors import (
    EventConfigNotFoundError,
    EventConfigStoreError,
    PatternCompileError,
    ServerConfigError,
    ServerNotFoundError,
)
from ..events import PluginCommentAddedEvent, all_descriptors
from ..models.server import ANY_SERVER
from ..repositories import ServerRepository
from ..services import CategoryService, EventConfigService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/events", tags=["events"])


# ============================================
# Response / Request Models
# ============================================


class EventTypeResponse(BaseModel):
    event_type: str
    display_name: str


class CategoryOptionResponse(BaseModel):
    value: str
    description: str


class CommentAddedConfig(BaseModel):
    verdict_category: str | None = None
    comment_added_trigger_approval_value: str | None = None
    comment_pattern: str | None = None


class CommentAddedConfigResponse(CommentAddedConfig):
    name: str


class MatchRequest(BaseModel):
    config: CommentAddedConfig
    comment: str


class StoredMatchRequest(BaseModel):
    comment: str


class MatchResponse(BaseModel):
    matched: bool


# ============================================
# Event Types & Servers
# ============================================


@router.get("/types", response_model=list[EventTypeResponse])
async def get_event_types() -> list[EventTypeResponse]:
    """List the registered trigger event types."""
    return [
        EventTypeResponse(event_type=d.event_type, display_name=d.display_name)
        for d in all_descriptors()
    ]


@router.get("/servers", response_model=list[str])
async def get_servers(service: CategoryService = Depends(get_category_service)) -> list[str]:
    """List configured server names in declaration order."""
    return service.list_server_names()


@router.post("/servers/reload", response_model=list[str])
def reload_servers(repo: ServerRepository = Depends(get_server_repository)) -> list[str]:
    """Re-read the server configuration file."""
    try:
        repo.reload()
    except ServerConfigError as e:
        logger.error(f"Server config reload failed: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from None
    return [server.name for server in repo.snapshot()]


@router.get(
    "/comment-added/verdict-categories", response_model=list[CategoryOptionResponse]
)
async def get_verdict_categories(
    server_name: str = Query(default=ANY_SERVER, alias="serverName"),
    service: CategoryService = Depends(get_category_service),
) -> list[CategoryOptionResponse]:
    """Fill the verdict category drop-down for one server or all of them."""
    try:
        options = service.list_categories(server_name)
    except ServerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from None
    return [CategoryOptionResponse(value=o.value, description=o.description) for o in options]


# ============================================
# Comment Matching
# ============================================


@router.post("/comment-added/match", response_model=MatchResponse)
async def match_comment(body: MatchRequest) -> MatchResponse:
    """Test a comment against an unsaved config."""
    cfg = PluginCommentAddedEvent.from_dict(body.config.model_dump())
    try:
        return MatchResponse(matched=cfg.matches(body.comment))
    except PatternCompileError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None


# ============================================
# Stored Config Endpoints
# ============================================


def _store_failure(action: str, e: EventConfigStoreError) -> HTTPException:
    logger.error(f"Failed to {action}: {e}")
    return HTTPException(status_code=500, detail=str(e))


@router.get("/comment-added/configs", response_model=list[CommentAddedConfigResponse])
def get_configs(
    service: EventConfigService = Depends(get_event_config_service),
) -> list[CommentAddedConfigResponse]:
    """Get all stored comment-added configs."""
    try:
        configs = service.list_configs()
    except EventConfigStoreError as e:
        raise _store_failure("list event configs", e) from None
    return [CommentAddedConfigResponse(**cfg) for cfg in configs]


@router.get("/comment-added/configs/{name}", response_model=CommentAddedConfigResponse)
def get_config(
    name: str,
    service: EventConfigService = Depends(get_event_config_service),
) -> CommentAddedConfigResponse:
    try:
        return CommentAddedConfigResponse(**service.get_config(name))
    except EventConfigNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from None
    except EventConfigStoreError as e:
        raise _store_failure(f"read event config {name}", e) from None


@router.put("/comment-added/configs/{name}", response_model=CommentAddedConfigResponse)
def save_config(
    name: str,
    body: CommentAddedConfig,
    service: EventConfigService = Depends(get_event_config_service),
) -> CommentAddedConfigResponse:
    """Create or replace a stored comment-added config."""
    try:
        cfg = service.save_config(name, **body.model_dump())
    except EventConfigStoreError as e:
        raise _store_failure(f"save event config {name}", e) from None
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    logger.info(f"Saved comment-added config: {name}")
    return CommentAddedConfigResponse(**cfg)


@router.delete("/comment-added/configs/{name}", status_code=204)
def delete_config(
    name: str,
    service: EventConfigService = Depends(get_event_config_service),
) -> None:
    """Delete a stored comment-added config."""
    try:
        deleted = service.delete_config(name)
    except EventConfigStoreError as e:
        raise _store_failure(f"delete event config {name}", e) from None
    if not deleted:
        raise HTTPException(status_code=404, detail="Config not found")


@router.post("/comment-added/configs/{name}/match", response_model=MatchResponse)
def match_stored_config(
    name: str,
    body: StoredMatchRequest,
    service: EventConfigService = Depends(get_event_config_service),
) -> MatchResponse:
    """Test a comment against a stored config."""
    try:
        return MatchResponse(matched=service.match_stored(name, body.comment))
    except EventConfigNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from None
    except EventConfigStoreError as e:
        raise _store_failure(f"read event config {name}", e) from None
    except PatternCompileError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
