"""Storage adapters for store value persistence."""

from hydrastore.adapters.base import StorageAdapter
from hydrastore.adapters.memory import InMemoryAdapter
from hydrastore.adapters.sqlite import SQLiteAdapter

__all__ = ["InMemoryAdapter", "SQLiteAdapter", "StorageAdapter"]
