"""
Stash Persistence Interfaces.

Abstract base class for key-value data stores.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional, Set


class DataStore(ABC):
    """Interface for key-value storage of JSON-serializable values."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Get a value, or None if the key is not stored."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store a value under the given key."""
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check if a key is stored."""
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove a key. Removing an absent key is not an error."""
        pass

    @abstractmethod
    def keys(self) -> Set[str]:
        """List all stored keys."""
        pass

    def remove_all(self) -> None:
        """Remove every key currently in the store."""
        for key in self.keys():
            self.remove(key)
