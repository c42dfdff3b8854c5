# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for running a store action against a configured adapter.

Orchestrates the full flow:
1. Create adapter from configuration
2. Build a private Registry with its own configuration
3. Hydrate or clear the requested namespaces
4. Return structured result
"""

from __future__ import annotations

from hydrastore.adapters import StorageAdapter
from hydrastore.config import GlobalConfig
from hydrastore.registry import Registry
from hydrastore.store import StoreOptions

from .factory import AdapterFactory, AdapterFactoryError
from .schema import OutcomeSchema, RunnerInput, RunnerOutput


class ExecutionError(Exception):
    """Raised when execution fails."""

    pass


class Executor:
    """Runs a store action described by :class:`RunnerInput`.

    The executor is designed for dependency injection to support testing.
    Pass a custom adapter to the constructor to override adapter creation.

    Example:
        executor = Executor()
        output = await executor.execute(input_data)

        # For testing with a prepared adapter:
        executor = Executor(adapter=InMemoryAdapter({"theme": {"mode": "dark"}}))
    """

    def __init__(self, adapter: StorageAdapter | None = None) -> None:
        self._injected_adapter = adapter

    async def execute(self, input_data: RunnerInput) -> RunnerOutput:
        """Execute the requested action.

        Note:
            This method catches all exceptions and returns them as
            RunnerOutput errors, ensuring valid JSON is always returned.
        """
        try:
            return await self._execute_internal(input_data)
        except AdapterFactoryError as e:
            return RunnerOutput(success=False, error=str(e), error_type="AdapterFactoryError")
        except ExecutionError as e:
            return RunnerOutput(success=False, error=str(e), error_type="ExecutionError")
        except Exception as e:
            return RunnerOutput(success=False, error=str(e), error_type=type(e).__name__)

    async def _execute_internal(self, input_data: RunnerInput) -> RunnerOutput:
        """Internal execution logic.

        Separated from execute() to allow exception propagation
        for testing while execute() catches all errors.
        """
        if not input_data.namespaces:
            raise ExecutionError("No namespaces given")

        adapter = self._injected_adapter or AdapterFactory.create(input_data.storage)
        owns_adapter = self._injected_adapter is None

        try:
            config = GlobalConfig().configure(storage=adapter, log=input_data.log)
            registry = Registry(config)
            options = StoreOptions(encrypted=input_data.encrypted)
            for namespace in input_data.namespaces:
                registry.use(namespace, options)

            if input_data.action == "clear":
                outcomes = await self._clear(registry)
            else:
                outcomes = [
                    OutcomeSchema(
                        namespace=o.namespace,
                        ok=o.ok,
                        value=o.value,
                        error="" if o.error is None else str(o.error),
                    )
                    for o in await registry.hydrate_all()
                ]

            return RunnerOutput(success=all(o.ok for o in outcomes), outcomes=outcomes)
        finally:
            # Always close the adapter if we created it
            if owns_adapter and hasattr(adapter, "close"):
                await adapter.close()

    async def _clear(self, registry: Registry) -> list[OutcomeSchema]:
        outcomes: list[OutcomeSchema] = []
        for namespace in registry.namespaces():
            store = registry.use(namespace)
            try:
                await store.clear_storage()
            except Exception as e:
                outcomes.append(OutcomeSchema(namespace=namespace, ok=False, error=str(e)))
            else:
                outcomes.append(OutcomeSchema(namespace=namespace, ok=True))
        return outcomes
