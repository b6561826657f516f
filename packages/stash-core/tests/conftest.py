import pytest

from stash_core.services.config_service import clear_config_cache


@pytest.fixture(autouse=True)
def stash_home(tmp_path, monkeypatch):
    """Point STASH_HOME at a scratch directory and reset config caching."""
    home = tmp_path / "stash-home"
    monkeypatch.setenv("STASH_HOME", str(home))
    monkeypatch.delenv("STASH_CONFIG_PATH", raising=False)
    monkeypatch.delenv("STASH_LOG_LEVEL", raising=False)
    clear_config_cache()
    yield home
    clear_config_cache()
