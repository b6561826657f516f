"""Shared configuration service for stores and the CLI."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import yaml

from ..persistence.fs_store import get_stash_home

_CONFIG_CACHE: Dict[str, Dict[str, Any]] = {}


def _default_config_path() -> Path:
    """Resolve the default config path (supports STASH_CONFIG_PATH override)."""
    env_path = os.getenv("STASH_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return get_stash_home() / "config.yaml"


def clear_config_cache() -> None:
    """Clear cached config (primarily for tests)."""
    _CONFIG_CACHE.clear()


def load_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Parse the stash config file once per process.

    ``path`` defaults to STASH_CONFIG_PATH, then $STASH_HOME/config.yaml.
    A missing file, or one whose top level is not a mapping, reads as ``{}``.
    """
    resolved = Path(path).expanduser() if path else _default_config_path()
    cache_key = str(resolved.resolve())
    if cache_key in _CONFIG_CACHE:
        return _CONFIG_CACHE[cache_key]

    data: Any = None
    if resolved.is_file():
        with open(resolved, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    config = data if isinstance(data, dict) else {}
    _CONFIG_CACHE[cache_key] = config
    return config


def _mapping(parent: Dict[str, Any], name: str) -> Dict[str, Any]:
    child = parent.get(name)
    return child if isinstance(child, dict) else {}


def get_store_settings(name: str) -> Dict[str, Any]:
    """Return ``stores.<name>`` (``directory``...), or ``{}``."""
    return _mapping(_mapping(load_config(), "stores"), name)


def get_logging_settings() -> Dict[str, Any]:
    """Return the ``logging`` section (``level``), or ``{}``."""
    return _mapping(load_config(), "logging")


def store_directory(name: str) -> Path:
    """Directory backing a named store: configured, or $STASH_HOME/cache/<name>."""
    configured = get_store_settings(name).get("directory")
    if configured:
        return Path(str(configured)).expanduser()
    return get_stash_home() / "cache" / name
