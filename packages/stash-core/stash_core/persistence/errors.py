"""Errors raised by stash data stores."""
from __future__ import annotations

from typing import Optional


class StoreError(Exception):
    """Base class for data store failures."""


class MissingKey(StoreError):
    """The key is empty (or reserved) once sanitized, so nothing can be written."""

    def __init__(self, key: str):
        self.key = key
        super().__init__("Could not save data to a file because it is missing an ID")


class StoreUnavailable(StoreError):
    """The backing directory cannot be created or written to."""

    def __init__(self, path: Optional[str], message: Optional[str] = None):
        self.path = path
        if message is None:
            message = f"Could not save data to a file because the path {path} cannot be written to."
        super().__init__(message)
