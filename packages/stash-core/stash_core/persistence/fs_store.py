"""
Stash Filesystem Storage Implementation.

Each value is stored as JSON in its own file, {directory}/{clean_key(key)}.
Files and directories created by the store are readable only by the owning
user, since entries usually hold cached credentials.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Iterator, Optional, Set, Union

from .errors import MissingKey, StoreUnavailable
from .interfaces import DataStore

logger = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^a-zA-Z0-9\-_@.]")

# Sanitized names that can never be entries (they resolve to directories).
_RESERVED_NAMES = frozenset({"", ".", ".."})

# In-flight writes are staged beside the entries under this prefix.
_TMP_PREFIX = ".stash-tmp-"

_OWNER_ONLY_UMASK = 0o077
_DIR_MODE = 0o700


def get_stash_home() -> Path:
    """
    Get stash home directory.

    Uses STASH_HOME env var or defaults to ~/.stash
    """
    home = os.environ.get("STASH_HOME")
    if home:
        return Path(home).expanduser()
    return Path.home() / ".stash"


def clean_key(key: str) -> str:
    """
    Make a key safe to use as a file name.

    Every character outside [a-zA-Z0-9-_@.] becomes "-". The mapping is
    lossy: keys differing only in such characters share one file.
    """
    return _UNSAFE_KEY_CHARS.sub("-", key)


def _is_entry_name(name: str) -> bool:
    """Whether a sanitized key / file name can be a stored entry."""
    return name not in _RESERVED_NAMES and not name.startswith(_TMP_PREFIX)


@contextlib.contextmanager
def _owner_only_umask() -> Iterator[None]:
    """Deny group and other access to anything created inside the block."""
    previous = os.umask(_OWNER_ONLY_UMASK)
    try:
        yield
    finally:
        os.umask(previous)


class FileStore(DataStore):
    """
    Filesystem-based key-value storage.

    The directory listing is the index: every regular file in the directory
    is an entry, named by its sanitized key. The directory is created on the
    first write and never removed by the store.
    """

    def __init__(self, directory: Union[str, "os.PathLike[str]"]):
        """
        Initialize the store.

        Args:
            directory: Directory holding one file per key (created lazily)
        """
        self.directory = os.fspath(directory)

    def __repr__(self) -> str:
        return f"FileStore({self.directory!r})"

    def path_for(self, key: str) -> Path:
        """Get the on-disk path for a key."""
        return Path(self.directory) / clean_key(key)

    def _existing_path(self, key: str) -> Optional[Path]:
        safe_key = clean_key(key)
        if not _is_entry_name(safe_key) or not self.directory:
            return None
        path = Path(self.directory) / safe_key
        return path if path.is_file() else None

    def get(self, key: str) -> Optional[Any]:
        """Get a value. Unreadable or corrupted entries read as None."""
        path = self._existing_path(key)
        if path is None:
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read stored value for '{key}' from {path}: {e}")
            return None

    def set(self, key: str, value: Any) -> None:
        """
        Save a value.

        Raises:
            MissingKey: the key is empty (or a staging name) once sanitized
            StoreUnavailable: the directory cannot be created or written to
            TypeError: the value is not JSON serializable
        """
        safe_key = clean_key(key)
        if not _is_entry_name(safe_key):
            raise MissingKey(key)
        payload = json.dumps(value)

        with _owner_only_umask():
            self._ensure_directory_writable()
            path = Path(self.directory) / safe_key
            fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=_TMP_PREFIX, suffix=".json")
            try:
                with open(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_path, path)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise

        logger.debug(f"Stored '{safe_key}' in {self.directory}")

    def has(self, key: str) -> bool:
        """Check if a key is stored. The contents are not read."""
        return self._existing_path(key) is not None

    def remove(self, key: str) -> None:
        """Remove a value if present."""
        path = self._existing_path(key)
        if path is None:
            return
        try:
            path.unlink()
        except FileNotFoundError:
            return
        logger.debug(f"Removed '{path.name}' from {self.directory}")

    def keys(self) -> Set[str]:
        """List all stored (sanitized) keys. Order is not meaningful."""
        if not self.directory:
            return set()
        try:
            with os.scandir(self.directory) as entries:
                return {
                    entry.name for entry in entries
                    if entry.is_file() and _is_entry_name(entry.name)
                }
        except OSError:
            return set()

    def _ensure_directory_writable(self) -> None:
        """Create the directory if needed and check that it can be written to."""
        # An empty setting would otherwise write into the current directory.
        if not self.directory:
            raise StoreUnavailable(
                self.directory,
                "Could not save data to a file because the path setting is mis-configured.",
            )

        if not os.path.isdir(self.directory):
            if os.path.lexists(self.directory):
                raise StoreUnavailable(self.directory)
            try:
                os.makedirs(self.directory, _DIR_MODE)
            except FileExistsError:
                pass
            except OSError as e:
                raise StoreUnavailable(self.directory) from e
            logger.debug(f"Created store directory {self.directory}")

        if not (os.path.isdir(self.directory) and os.access(self.directory, os.W_OK | os.X_OK)):
            raise StoreUnavailable(self.directory)
