"""
JSON-file backed storage, the on-disk equivalent of browser local storage.

All keys live in a single JSON object file. Every write rewrites the whole
file through a temporary sibling and an atomic rename.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from autoparts.storefront.errors import PersistenceError

from .storage import KeyValueStorage

logger = logging.getLogger(__name__)


class FileStorage(KeyValueStorage):
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise PersistenceError(f"Cannot read storage file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceError(f"Storage file {self.path} does not contain a JSON object")
        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise PersistenceError(f"Cannot write storage file {self.path}: {e}") from e
        logger.debug("Wrote %d key(s) to %s", len(data), self.path)

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def delete(self, key: str) -> None:
        data = self._read_all()
        if key not in data:
            return
        del data[key]
        self._write_all(data)

    def ping(self) -> bool:
        try:
            self._read_all()
        except PersistenceError:
            return False
        return True
