"""StorageAdapter protocol — pluggable async persistence for store values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hydrastore.store import StoreOptions


class StorageAdapter(ABC):
    """Abstract base for all storage backends.

    Each store persists exactly one value under its *namespace*.  The
    adapter is agnostic to what is being stored; whatever it hands back
    from ``get`` must be equivalent to what it was given in ``set``.

    ``options`` carries the per-store configuration captured when the
    store was created (e.g. ``encrypted``).  The core never interprets
    it; adapters may.  Any exception raised by an adapter is treated as
    a failure of that operation.
    """

    @abstractmethod
    async def get(self, key: str, options: StoreOptions) -> Any | None:
        """Return the stored value, or ``None`` if not found."""
        ...

    @abstractmethod
    async def set(self, key: str, value: Any, options: StoreOptions) -> None:
        """Create or overwrite a value."""
        ...

    @abstractmethod
    async def remove(self, key: str, options: StoreOptions) -> None:
        """Delete a value.  No-op if the key does not exist."""
        ...
