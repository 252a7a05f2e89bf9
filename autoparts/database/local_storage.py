"""
Lightweight in-memory storage for tests and local development.

Implements the same interface as the file and Redis backends; nothing
survives the process.
"""

from __future__ import annotations

from typing import Dict, Optional

from .storage import KeyValueStorage


class LocalStorage(KeyValueStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        # Simple in-memory store: key -> serialized value
        self._items: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def delete(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)
