"""Tests for YAML configuration and named store resolution."""
from pathlib import Path

from stash_core.persistence import FileStore, get_stash_home, open_store
from stash_core.services.config_service import (
    clear_config_cache,
    get_store_settings,
    load_config,
    store_directory,
)


class TestStashHome:
    def test_env_override(self, stash_home):
        assert get_stash_home() == stash_home

    def test_default(self, monkeypatch):
        monkeypatch.delenv("STASH_HOME", raising=False)
        assert get_stash_home() == Path.home() / ".stash"


class TestLoadConfig:
    def test_missing_file_is_empty(self, tmp_path):
        assert load_config(tmp_path / "nope.yaml") == {}

    def test_missing_file_result_cached_until_cleared(self, tmp_path):
        cfg = tmp_path / "late.yaml"
        assert load_config(cfg) == {}
        cfg.write_text("stores:\n  cache: {}\n")
        assert load_config(cfg) == {}
        clear_config_cache()
        assert load_config(cfg) == {"stores": {"cache": {}}}

    def test_non_mapping_top_level(self, tmp_path):
        cfg = tmp_path / "config.yaml"
        cfg.write_text("- just\n- a list\n")
        assert load_config(cfg) == {}

    def test_loads_yaml(self, tmp_path):
        cfg = tmp_path / "config.yaml"
        cfg.write_text("stores:\n  tokens:\n    directory: /var/tmp/tokens\n")
        assert load_config(cfg) == {"stores": {"tokens": {"directory": "/var/tmp/tokens"}}}

    def test_cached_until_cleared(self, tmp_path):
        cfg = tmp_path / "config.yaml"
        cfg.write_text("logging:\n  level: INFO\n")
        assert load_config(cfg)["logging"]["level"] == "INFO"
        cfg.write_text("logging:\n  level: DEBUG\n")
        assert load_config(cfg)["logging"]["level"] == "INFO"
        clear_config_cache()
        assert load_config(cfg)["logging"]["level"] == "DEBUG"

    def test_default_path_under_home(self, stash_home):
        stash_home.mkdir()
        (stash_home / "config.yaml").write_text("stores:\n  cache: {}\n")
        assert "stores" in load_config()

    def test_config_path_env(self, tmp_path, monkeypatch):
        cfg = tmp_path / "elsewhere.yaml"
        cfg.write_text("stores:\n  session:\n    directory: /tmp/session\n")
        monkeypatch.setenv("STASH_CONFIG_PATH", str(cfg))
        assert get_store_settings("session") == {"directory": "/tmp/session"}


class TestStoreDirectory:
    def test_default_directory(self, stash_home):
        assert store_directory("tokens") == stash_home / "cache" / "tokens"

    def test_configured_directory(self, tmp_path, monkeypatch):
        cfg = tmp_path / "config.yaml"
        cfg.write_text(f"stores:\n  tokens:\n    directory: {tmp_path / 'tok'}\n")
        monkeypatch.setenv("STASH_CONFIG_PATH", str(cfg))
        assert store_directory("tokens") == tmp_path / "tok"

    def test_unknown_section_type(self, tmp_path, monkeypatch):
        cfg = tmp_path / "config.yaml"
        cfg.write_text("stores: not-a-mapping\n")
        monkeypatch.setenv("STASH_CONFIG_PATH", str(cfg))
        assert get_store_settings("tokens") == {}

    def test_open_store(self, stash_home):
        store = open_store("session")
        assert isinstance(store, FileStore)
        assert store.directory == str(stash_home / "cache" / "session")
        store.set("id", {"user": "u1"})
        assert open_store("session").get("id") == {"user": "u1"}
