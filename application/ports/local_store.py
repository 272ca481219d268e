"""
Local Key-Value Store Interface (Port).

The local store is a flat map from fixed string keys to JSON strings, the
same contract a browser's localStorage offers. Implementations may keep it
in a file, in memory or elsewhere.
"""
from typing import List, Optional, Protocol


class KeyValueStore(Protocol):
    """
    Abstract interface for the local persistent store.

    Values are opaque strings; callers serialize and parse JSON themselves.
    """

    def get(self, key: str) -> Optional[str]:
        """
        Get the value stored under ``key``.

        Returns:
            The stored string, or None if the key is absent
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Remove ``key``. Removing an absent key is a no-op."""
        ...

    def keys(self) -> List[str]:
        """List all stored keys."""
        ...
