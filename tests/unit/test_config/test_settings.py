"""Tests for settings configuration."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError


@pytest.fixture
def settings_file(temp_config_path: Path) -> Path:
    config_data = {
        'pagination': {
            'page_size': 50,
            'look_ahead': 8,
            'stop_on_empty_page': False,
        },
        'source': {
            'transport': 'ipc',
            'socket_path': '/run/user/1000/feed.sock',
            'resource': 'users',
        },
    }
    temp_config_path.write_text(yaml.dump(config_data))
    return temp_config_path


def test_pagination_settings_defaults():
    from pagedlist.config.settings import PaginationSettings

    settings = PaginationSettings()

    assert settings.page_size == 20
    assert settings.look_ahead == 5
    assert settings.stop_on_empty_page is True


@pytest.mark.parametrize("page_size", [0, 101])
def test_pagination_settings_page_size_bounds(page_size):
    from pagedlist.config.settings import PaginationSettings

    with pytest.raises(ValidationError):
        PaginationSettings(page_size=page_size)


def test_pagination_settings_rejects_negative_look_ahead():
    from pagedlist.config.settings import PaginationSettings

    with pytest.raises(ValidationError):
        PaginationSettings(look_ahead=-1)


def test_source_settings_defaults():
    from pagedlist.config.settings import SourceSettings

    settings = SourceSettings()

    assert settings.transport == "websocket"
    assert settings.uri == "ws://localhost:8765"
    assert settings.resource is None


def test_source_settings_rejects_http_uri():
    from pagedlist.config.settings import SourceSettings

    with pytest.raises(ValidationError):
        SourceSettings(uri="http://localhost:8765")


@pytest.mark.parametrize("transport", ["memory", "ipc"])
def test_source_settings_ignores_uri_for_other_transports(transport):
    from pagedlist.config.settings import SourceSettings

    settings = SourceSettings(transport=transport, uri="http://localhost:8765")

    assert settings.transport == transport


def test_source_settings_rejects_unknown_transport():
    from pagedlist.config.settings import SourceSettings

    with pytest.raises(ValidationError):
        SourceSettings(transport="carrier-pigeon")


def test_source_settings_socket_path_from_runtime_dir(monkeypatch):
    from pagedlist.config.settings import SourceSettings

    monkeypatch.setenv("XDG_RUNTIME_DIR", "/run/user/42")

    assert SourceSettings().resolved_socket_path == "/run/user/42/pagedlist-ipc.sock"
    assert SourceSettings(socket_path="/tmp/x.sock").resolved_socket_path == "/tmp/x.sock"


class TestSettingsManager:
    """Test SettingsManager functionality."""

    def test_load_from_file(self, settings_file: Path):
        from pagedlist.config.settings import SettingsManager

        manager = SettingsManager(config_path=settings_file)

        assert manager.page_size == 50
        assert manager.look_ahead == 8
        assert manager.stop_on_empty_page is False
        assert manager.source.transport == "ipc"
        assert manager.source.resource == "users"

    def test_load_missing_file_uses_defaults(self, tmp_path: Path):
        from pagedlist.config.settings import SettingsManager

        manager = SettingsManager(config_path=tmp_path / "nonexistent.yml")

        assert manager.page_size == 20
        assert manager.look_ahead == 5

    def test_load_empty_file_uses_defaults(self, temp_config_path: Path):
        from pagedlist.config.settings import SettingsManager

        temp_config_path.write_text("")

        manager = SettingsManager(config_path=temp_config_path)

        assert manager.page_size == 20

    def test_load_invalid_yaml_uses_defaults(self, temp_config_path: Path):
        from pagedlist.config.settings import SettingsManager

        temp_config_path.write_text("pagination: [unclosed")

        manager = SettingsManager(config_path=temp_config_path)

        assert manager.page_size == 20

    def test_load_out_of_range_values_uses_defaults(self, temp_config_path: Path):
        from pagedlist.config.settings import SettingsManager

        temp_config_path.write_text(yaml.dump({'pagination': {'page_size': 500}}))

        manager = SettingsManager(config_path=temp_config_path)

        assert manager.page_size == 20

    def test_save_settings_to_file(self, settings_file: Path):
        from pagedlist.config.settings import SettingsManager

        manager = SettingsManager(config_path=settings_file)
        manager.update_settings(**{"pagination.page_size": 30})

        data = yaml.safe_load(settings_file.read_text())

        assert data["pagination"]["page_size"] == 30
        assert data["source"]["resource"] == "users"
        assert manager.page_size == 30

    def test_update_validates_before_saving(self, settings_file: Path):
        from pagedlist.config.settings import SettingsManager

        manager = SettingsManager(config_path=settings_file)

        with pytest.raises(ValidationError):
            manager.update_settings(**{"pagination.look_ahead": -3})

        data = yaml.safe_load(settings_file.read_text())
        assert data["pagination"]["look_ahead"] == 8
        assert manager.look_ahead == 8

    def test_update_unknown_key_raises(self, settings_file: Path):
        from pagedlist.config.settings import SettingsManager

        manager = SettingsManager(config_path=settings_file)

        with pytest.raises(KeyError):
            manager.update_settings(**{"pagination.prefetch_pages": 3})

    def test_reload_picks_up_changes(self, settings_file: Path):
        from pagedlist.config.settings import SettingsManager

        manager = SettingsManager(config_path=settings_file)
        settings_file.write_text(yaml.dump({'pagination': {'page_size': 10}}))

        manager.reload()

        assert manager.page_size == 10
        assert manager.source.transport == "websocket"


def test_get_settings_returns_shared_manager(tmp_path: Path, monkeypatch):
    import pagedlist.config.settings as settings_module

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings_module, "_settings_manager", None)
    (tmp_path / "settings.yml").write_text(yaml.dump({'pagination': {'page_size': 30}}))

    manager = settings_module.get_settings()

    assert manager.page_size == 30
    assert manager.config_path == Path("settings.yml")
    assert settings_module.get_settings() is manager
