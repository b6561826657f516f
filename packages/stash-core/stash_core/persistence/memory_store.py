"""
InMemoryStore — dict-backed DataStore with FileStore key semantics.

No persistence. Useful for tests and for callers that need a throwaway
cache.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional, Set

from .errors import MissingKey
from .fs_store import _is_entry_name, clean_key
from .interfaces import DataStore


class InMemoryStore(DataStore):
    """Trivial in-process store. Values are copied through JSON on write."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Optional[Any]:
        raw = self._data.get(clean_key(key))
        if raw is None:
            return None
        return json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        safe_key = clean_key(key)
        if not _is_entry_name(safe_key):
            raise MissingKey(key)
        self._data[safe_key] = json.dumps(value)

    def has(self, key: str) -> bool:
        return clean_key(key) in self._data

    def remove(self, key: str) -> None:
        self._data.pop(clean_key(key), None)

    def keys(self) -> Set[str]:
        return set(self._data)
