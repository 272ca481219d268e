"""
File-backed implementation of the KeyValueStore port.

The whole key -> string map lives in one JSON object on disk. Every write
rewrites the file with tempfile + os.replace() so a crash never leaves a
partially written store behind.
"""
import json
import logging
import os
import pathlib
import tempfile
import threading
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)


class JsonFileStore:
    """
    KeyValueStore kept in a single JSON file.

    An unreadable or malformed file is treated as an empty store and left
    in place until the next write replaces it.
    """

    def __init__(self, path: Union[str, pathlib.Path]):
        """
        Args:
            path: Location of the store file; ``~`` is expanded
        """
        self._path = pathlib.Path(path).expanduser()
        self._lock = threading.Lock()
        self._data: Dict[str, str] = self._read()

    @property
    def path(self) -> pathlib.Path:
        return self._path

    def _read(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read local store {self._path}, starting empty: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Local store {self._path} is not a JSON object, starting empty")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileNotFoundError(f"Cannot create store directory {self._path.parent}: {e}") from e

        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=str(self._path.parent),
                suffix=".json",
                delete=False,
                encoding="utf-8",
            ) as tmp_file:
                tmp_path = tmp_file.name
                json.dump(self._data, tmp_file)

            os.replace(tmp_path, str(self._path))
        except OSError as e:
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass
            raise OSError(f"Failed to write local store: {e}") from e

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value
            self._write()

    def remove(self, key: str) -> None:
        with self._lock:
            if self._data.pop(key, None) is not None:
                self._write()

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._data)
