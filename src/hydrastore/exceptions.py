"""Custom exceptions for the hydrastore package."""

from __future__ import annotations


class HydraStoreError(Exception):
    """Base exception for all hydrastore errors."""


class InvalidNamespaceError(HydraStoreError):
    """Raised when a store is requested with an empty or non-string namespace."""

    def __init__(self, namespace: object) -> None:
        self.namespace = namespace
        super().__init__(f"Invalid namespace {namespace!r}: expected a non-empty string")


class StorageError(HydraStoreError):
    """Raised when a storage adapter call fails."""

    def __init__(self, operation: str, namespace: str, detail: str = "") -> None:
        self.operation = operation
        self.namespace = namespace
        msg = f"Storage error during '{operation}' for '{namespace}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class NotConfiguredError(HydraStoreError):
    """Describes an operation that needed a storage adapter when none is configured.

    Store operations never raise this; they log it and skip the backend call.
    """

    def __init__(self, operation: str, namespace: str) -> None:
        self.operation = operation
        self.namespace = namespace
        super().__init__(f"No storage configured, skipping '{operation}' for '{namespace}'")
