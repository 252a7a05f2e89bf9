"""
Key-value storage interface shared by every backend.

Values are strings; records are JSON encoded on the way in and decoded on
the way out by `get_json` / `set_json`. Writes are whole-value overwrites.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Optional

from autoparts.storefront.errors import PersistenceError


class KeyValueStorage(ABC):
    """Every storage backend must implement this interface."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored string for ``key`` or None when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``; removing an absent key is not an error."""

    def ping(self) -> bool:
        return True

    # --- JSON helpers -------------------------------------------------------

    def get_json(self, key: str) -> Optional[Any]:
        raw = self.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Stored value for {key!r} is not valid JSON", key=key) from e

    def set_json(self, key: str, value: Any) -> None:
        self.set(key, json.dumps(value, ensure_ascii=False))
