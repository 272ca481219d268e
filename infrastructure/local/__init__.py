"""
Local storage adapters.

Usage:
    from infrastructure.local import JsonFileStore

    store = JsonFileStore("~/.dreamshape/store.json")
    persistence = LocalPersistence(store)
"""

from infrastructure.local.json_file_store import JsonFileStore

__all__ = ["JsonFileStore"]
