"""
Fake KeyValueStore for testing.

In-memory replacement for the JSON file store.
"""
from typing import Dict, List, Optional


class FakeKeyValueStore:
    """
    In-memory fake implementation of KeyValueStore.

    Usage:
        store = FakeKeyValueStore()
        store.seed({"dreamshape_templates": "[]"})
    """

    def __init__(self):
        self._data: Dict[str, str] = {}

    def reset(self) -> None:
        self._data.clear()

    def seed(self, data: Dict[str, str]) -> None:
        self._data.update(data)

    def get_all(self) -> Dict[str, str]:
        """Get a copy of the stored map (test helper)."""
        return dict(self._data)

    # =========================================================================
    # KeyValueStore Protocol Methods
    # =========================================================================

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._data)
