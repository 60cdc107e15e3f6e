"""Shared fixtures for gerrit-trigger tests."""

import json

import pytest
from fastapi.testclient import TestClient

from gerrit_trigger.app import create_app
from gerrit_trigger.core.dependencies import get_event_config_repository, get_server_repository
from gerrit_trigger.models import GerritServer, VerdictCategory
from gerrit_trigger.repositories import EventConfigRepository, ServerRepository


@pytest.fixture
def servers():
    """Two servers sharing the CRVW category; server-A declared first."""
    return (
        GerritServer(
            name="server-A",
            categories=(VerdictCategory("CRVW", "Code Review"),),
        ),
        GerritServer(
            name="server-B",
            categories=(
                VerdictCategory("CRVW", "Code Review (dup)"),
                VerdictCategory("VRIF", "Verified"),
            ),
        ),
    )


@pytest.fixture
def servers_file(tmp_path, servers):
    path = tmp_path / "servers.json"
    path.write_text(
        json.dumps(
            {
                "servers": [
                    {
                        "name": s.name,
                        "categories": [
                            {"value": c.value, "description": c.description}
                            for c in s.categories
                        ],
                    }
                    for s in servers
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def server_repo(servers_file):
    return ServerRepository.from_file(servers_file)


@pytest.fixture
def event_config_repo(tmp_path):
    return EventConfigRepository(tmp_path / "event_configs.json")


@pytest.fixture
def client(server_repo, event_config_repo):
    app = create_app()
    app.dependency_overrides[get_server_repository] = lambda: server_repo
    app.dependency_overrides[get_event_config_repository] = lambda: event_config_repo
    return TestClient(app)
