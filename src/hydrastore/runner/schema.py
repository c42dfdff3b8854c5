# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON contract of
``python -m hydrastore.runner``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class StorageConfigSchema(BaseModel):
    """Storage adapter configuration.

    Attributes:
        type: Adapter type ("memory" or "sqlite")
        path: Path to SQLite database file (for sqlite type)
    """

    type: str = "memory"
    path: str = ""


class RunnerInput(BaseModel):
    """Complete input read from stdin.

    Attributes:
        storage: Adapter to operate on
        namespaces: Namespaces to act on
        action: "hydrate" loads and reports values, "clear" removes them
        encrypted: Store option passed through to the adapter
        log: Enable console logging
    """

    storage: StorageConfigSchema = Field(default_factory=StorageConfigSchema)
    namespaces: list[str] = Field(default_factory=list)
    action: Literal["hydrate", "clear"] = "hydrate"
    encrypted: bool = False
    log: bool = False


class OutcomeSchema(BaseModel):
    """Result for a single namespace.

    Attributes:
        namespace: Namespace acted upon
        ok: Whether the action succeeded for this namespace
        value: Hydrated value (hydrate action only)
        error: Error message when ``ok`` is false
    """

    namespace: str
    ok: bool
    value: Any = None
    error: str = ""


class RunnerOutput(BaseModel):
    """Complete output written to stdout.

    The runner always outputs valid JSON matching this schema,
    even on errors.

    Attributes:
        success: Whether every namespace succeeded
        outcomes: Per-namespace results
        error: Error message (on failure)
        error_type: Error class name (on failure)
    """

    success: bool
    outcomes: list[OutcomeSchema] = Field(default_factory=list)
    error: str = ""
    error_type: str = ""
