"""File-backed key-value storage."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from ...domain.ports.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(KeyValueStorage):
    """Stores all keys as one JSON object in a single file.

    Writes go to a temporary file in the same directory that then replaces the
    original, so a crash never leaves a half-written file behind. A file that
    cannot be decoded is treated as empty and overwritten on the next write.
    """

    def __init__(self, path: Union[str, Path]):
        """Initialize the storage.

        Args:
            path: JSON file to use; parent directories are created on write
        """
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if key in items:
            del items[key]
            self._write(items)

    def _read(self) -> Dict[str, str]:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning(f"⚠️ Could not read storage file {self._path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"⚠️ Storage file {self._path} does not hold a JSON object")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, items: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f)
            os.replace(tmp_path, self._path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
