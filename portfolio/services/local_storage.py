"""File-backed key/value storage with browser localStorage semantics"""

import json
import logging
import os
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class LocalStorageError(Exception):
    """Local storage file could not be read or written"""
    pass


class LocalStorage:
    """
    String key/value storage persisted to a single JSON file.

    Values are strings, as in browser localStorage; callers encode and
    decode their own data. Every call does blocking file I/O, so async
    callers run it in an executor.
    """

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise LocalStorageError(f"Failed to read {self.path}: {e}")

        if not isinstance(data, dict):
            raise LocalStorageError(f"Unexpected content in {self.path}")
        return data

    def _save(self, data: Dict[str, str]):
        directory = os.path.dirname(self.path)
        tmp = self.path + ".tmp"
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp, self.path)
        except OSError as e:
            raise LocalStorageError(f"Failed to write {self.path}: {e}")

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str):
        data = self._load()
        data[key] = value
        self._save(data)

    def remove_item(self, key: str):
        data = self._load()
        if data.pop(key, None) is not None:
            self._save(data)

    def clear(self):
        """Remove every stored key"""
        self._save({})
        logger.info(f"Cleared local storage at {self.path}")
