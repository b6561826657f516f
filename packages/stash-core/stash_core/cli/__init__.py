"""
Stash CLI - Command-line interface for local key-value stores.

Store Commands:
- stash store keys - List stored keys
- stash store get <key> - Print a stored value
- stash store set <key> <value> - Store a JSON value
- stash store has <key> - Check whether a key is stored
- stash store rm <key> - Remove a key
- stash store clear - Remove every key
- stash store path <key> - Show the file backing a key
"""

from .main import cli

__all__ = ["cli"]
