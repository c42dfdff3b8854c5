"""InMemoryAdapter — zero-config, dict-backed storage for development and testing."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from hydrastore.adapters.base import StorageAdapter

if TYPE_CHECKING:
    from hydrastore.store import StoreOptions


class InMemoryAdapter(StorageAdapter):
    """In-memory adapter using a plain dict.  Data is lost on process exit.

    Values are deep-copied on the way in and out so that callers mutating
    a value they handed over cannot change what is "persisted".
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    async def get(self, key: str, options: StoreOptions) -> Any | None:
        return copy.deepcopy(self._data.get(key))

    async def set(self, key: str, value: Any, options: StoreOptions) -> None:
        self._data[key] = copy.deepcopy(value)

    async def remove(self, key: str, options: StoreOptions) -> None:
        self._data.pop(key, None)

    async def keys(self) -> list[str]:
        return list(self._data.keys())
