# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Adapter factory for creating storage adapters from configuration.

Uses the Registry pattern to map type strings to adapter classes,
allowing extensibility without modifying factory code.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from hydrastore.adapters import InMemoryAdapter, SQLiteAdapter, StorageAdapter

from .schema import StorageConfigSchema


class AdapterFactoryError(Exception):
    """Raised when adapter creation fails."""

    pass


def _memory(config: StorageConfigSchema) -> StorageAdapter:
    return InMemoryAdapter()


def _sqlite(config: StorageConfigSchema) -> StorageAdapter:
    if not config.path:
        raise AdapterFactoryError("sqlite storage requires 'path' configuration")
    return SQLiteAdapter(config.path)


class AdapterFactory:
    """Creates storage adapters from configuration.

    Adapter types are registered at class level and can be extended via
    the `register` class method.

    Example:
        adapter = AdapterFactory.create(StorageConfigSchema(type="sqlite", path="app.db"))
    """

    # Class-level registry mapping type strings to adapter builders
    _registry: ClassVar[dict[str, Callable[[StorageConfigSchema], StorageAdapter]]] = {
        "memory": _memory,
        "sqlite": _sqlite,
    }

    @classmethod
    def register(
        cls,
        type_name: str,
        builder: Callable[[StorageConfigSchema], StorageAdapter],
    ) -> None:
        """Register a custom adapter type.

        Args:
            type_name: Type string to use in configuration
            builder: Callable building the adapter from its configuration

        Example:
            AdapterFactory.register("redis", lambda cfg: RedisAdapter(cfg.path))
        """
        cls._registry[type_name] = builder

    @classmethod
    def registered_types(cls) -> list[str]:
        """Return list of registered adapter type names."""
        return list(cls._registry.keys())

    @classmethod
    def create(cls, config: StorageConfigSchema) -> StorageAdapter:
        """Create an adapter from configuration.

        Raises:
            AdapterFactoryError: If the type is unknown or creation fails
        """
        builder = cls._registry.get(config.type)
        if not builder:
            available = ", ".join(sorted(cls.registered_types()))
            raise AdapterFactoryError(
                f"Unknown storage type: '{config.type}'. Available types: {available}"
            )
        try:
            return builder(config)
        except AdapterFactoryError:
            raise
        except Exception as e:
            raise AdapterFactoryError(
                f"Failed to create storage of type '{config.type}': {e}"
            ) from e
