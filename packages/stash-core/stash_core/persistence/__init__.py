"""
Stash Persistence - Data store interface and implementations.
"""
from .interfaces import DataStore
from .errors import StoreError, MissingKey, StoreUnavailable
from .fs_store import FileStore, clean_key, get_stash_home
from .memory_store import InMemoryStore

__all__ = [
    # Interfaces
    "DataStore",
    # Errors
    "StoreError",
    "MissingKey",
    "StoreUnavailable",
    # Implementations
    "FileStore",
    "InMemoryStore",
    # Utils
    "clean_key",
    "get_stash_home",
    "open_store",
]


def open_store(name: str = "cache") -> FileStore:
    """Open the named FileStore using configured or default directories."""
    from ..services.config_service import store_directory
    return FileStore(store_directory(name))
