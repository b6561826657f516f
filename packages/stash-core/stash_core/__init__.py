"""
Stash Core Library.

Local, filesystem-backed key-value storage for command-line state:
- FileStore: one owner-only JSON file per key
- InMemoryStore: drop-in double for tests
- YAML configuration for named stores
- ``stash`` CLI for inspecting and clearing stores
"""

__version__ = "0.1.0"

from .persistence import (
    DataStore,
    FileStore,
    InMemoryStore,
    MissingKey,
    StoreError,
    StoreUnavailable,
    clean_key,
    open_store,
)

__all__ = [
    "__version__",
    "DataStore",
    "FileStore",
    "InMemoryStore",
    "StoreError",
    "MissingKey",
    "StoreUnavailable",
    "clean_key",
    "open_store",
]
