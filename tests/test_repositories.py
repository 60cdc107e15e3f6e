"""
Test the server config file loader and the event config store.
"""

import pytest

from gerrit_trigger.errors import (
    EventConfigNotFoundError,
    EventConfigStoreError,
    ServerConfigError,
    ServerNotFoundError,
)
from gerrit_trigger.events import PluginCommentAddedEvent
from gerrit_trigger.repositories import ServerRepository, load_servers


def test_load_servers_keeps_order(servers_file, servers):
    assert load_servers(servers_file) == servers


def test_load_missing_file(tmp_path):
    with pytest.raises(ServerConfigError):
        load_servers(tmp_path / "missing.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "servers.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ServerConfigError):
        load_servers(path)


def test_load_entry_without_name(tmp_path):
    path = tmp_path / "servers.json"
    path.write_text('{"servers": [{"categories": []}]}', encoding="utf-8")
    with pytest.raises(ServerConfigError):
        load_servers(path)


def test_load_duplicate_server_names(tmp_path):
    path = tmp_path / "servers.json"
    path.write_text('{"servers": [{"name": "a"}, {"name": "a"}]}', encoding="utf-8")
    with pytest.raises(ServerConfigError):
        load_servers(path)


def test_get_server(server_repo):
    assert server_repo.get_server("server-B").categories[1].value == "VRIF"
    with pytest.raises(ServerNotFoundError):
        server_repo.get_server("nope")


def test_failed_reload_keeps_previous_snapshot(servers_file, server_repo):
    before = server_repo.snapshot()
    servers_file.write_text("broken", encoding="utf-8")
    with pytest.raises(ServerConfigError):
        server_repo.reload()
    assert server_repo.snapshot() is before


def test_reload_without_file():
    with pytest.raises(ServerConfigError):
        ServerRepository().reload()


def test_event_config_store(event_config_repo):
    cfg = PluginCommentAddedEvent("CRVW", "2", r"Code-Review\+2")
    assert event_config_repo.list_all() == {}

    event_config_repo.upsert("review-plus-two", cfg)
    assert event_config_repo.get("review-plus-two") == cfg
    assert event_config_repo.list_all() == {"review-plus-two": cfg}

    assert event_config_repo.delete("review-plus-two") is True
    assert event_config_repo.delete("review-plus-two") is False
    with pytest.raises(EventConfigNotFoundError):
        event_config_repo.get("review-plus-two")


def test_event_config_store_persists(tmp_path, event_config_repo):
    from gerrit_trigger.repositories import EventConfigRepository

    event_config_repo.upsert("x", PluginCommentAddedEvent(comment_pattern="x"))
    reopened = EventConfigRepository(event_config_repo.path)
    assert reopened.get("x").comment_pattern == "x"


def test_load_null_category_value(tmp_path):
    """JSON null is rejected instead of becoming the string 'None'."""
    path = tmp_path / "servers.json"
    path.write_text(
        '{"servers": [{"name": "a", "categories": [{"value": null, "description": "x"}]}]}',
        encoding="utf-8",
    )
    with pytest.raises(ServerConfigError):
        load_servers(path)


def test_load_non_string_description(tmp_path):
    path = tmp_path / "servers.json"
    path.write_text(
        '{"servers": [{"name": "a", "categories": [{"value": "CRVW", "description": null}]}]}',
        encoding="utf-8",
    )
    with pytest.raises(ServerConfigError):
        load_servers(path)


def test_load_missing_description_defaults_to_empty(tmp_path):
    path = tmp_path / "servers.json"
    path.write_text(
        '{"servers": [{"name": "a", "categories": [{"value": "CRVW"}]}]}', encoding="utf-8"
    )
    assert load_servers(path)[0].categories[0].description == ""


def test_corrupt_event_config_store(event_config_repo):
    event_config_repo.path.write_text("{broken", encoding="utf-8")
    with pytest.raises(EventConfigStoreError):
        event_config_repo.list_all()
    with pytest.raises(EventConfigStoreError):
        event_config_repo.upsert("x", PluginCommentAddedEvent(comment_pattern="x"))
    assert event_config_repo.path.read_text(encoding="utf-8") == "{broken"


def test_event_config_store_with_wrong_shape(event_config_repo):
    event_config_repo.path.write_text("[]", encoding="utf-8")
    with pytest.raises(EventConfigStoreError):
        event_config_repo.list_all()

    event_config_repo.path.write_text('{"configs": {"x": "pattern"}}', encoding="utf-8")
    with pytest.raises(EventConfigStoreError):
        event_config_repo.get("x")


def test_event_config_store_with_non_string_field(event_config_repo):
    event_config_repo.path.write_text(
        '{"configs": {"x": {"comment_pattern": 5}}}', encoding="utf-8"
    )
    with pytest.raises(EventConfigStoreError):
        event_config_repo.get("x")
