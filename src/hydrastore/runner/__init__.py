# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for inspecting and clearing persisted stores.

Usage:
    python -m hydrastore.runner < input.json > output.json

Exports:
    Executor: Runs an action against a configured adapter
    AdapterFactory: Creates storage adapters from configuration
    RunnerInput: Input schema
    RunnerOutput: Output schema
"""

from .executor import ExecutionError, Executor
from .factory import AdapterFactory, AdapterFactoryError
from .schema import OutcomeSchema, RunnerInput, RunnerOutput, StorageConfigSchema

__all__ = [
    "AdapterFactory",
    "AdapterFactoryError",
    "ExecutionError",
    "Executor",
    "OutcomeSchema",
    "RunnerInput",
    "RunnerOutput",
    "StorageConfigSchema",
]
