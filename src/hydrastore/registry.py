"""Registry — one SingleStore per namespace, plus bulk operations."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

from hydrastore.config import GlobalConfig, get_config, reset_config
from hydrastore.exceptions import InvalidNamespaceError, NotConfiguredError
from hydrastore.result import HydrationOutcome
from hydrastore.store import SingleStore, StoreOptions


class Registry:
    """Maps namespace strings to :class:`SingleStore` instances.

    Stores are created on first :meth:`use` and returned as-is afterwards;
    options passed on later calls are ignored.  Stores are kept for the
    lifetime of the registry.

    Parameters:
        config: Configuration context shared by every store of this
                registry.  Defaults to the process-wide config that
                :func:`hydrastore.configure` modifies.
    """

    def __init__(self, config: GlobalConfig | None = None) -> None:
        self._config: GlobalConfig = config if config is not None else get_config()
        self._stores: dict[str, SingleStore] = {}

    # ── lookup ───────────────────────────────────────────────

    def use(
        self,
        namespace: str,
        options: StoreOptions | Mapping[str, Any] | None = None,
    ) -> SingleStore:
        """Return the store for *namespace*, creating it on first access."""
        if not isinstance(namespace, str) or not namespace:
            raise InvalidNamespaceError(namespace)

        store = self._stores.get(namespace)
        if store is None:
            store = SingleStore(namespace, _coerce_options(options), self._config)
            self._stores[namespace] = store
        return store

    def get(self, namespace: str) -> SingleStore | None:
        """Look up an existing store without creating one."""
        return self._stores.get(namespace)

    def namespaces(self) -> list[str]:
        """Return registered namespaces in creation order."""
        return list(self._stores)

    def __contains__(self, namespace: object) -> bool:
        return namespace in self._stores

    def __len__(self) -> int:
        return len(self._stores)

    @property
    def config(self) -> GlobalConfig:
        return self._config

    # ── bulk operations ──────────────────────────────────────

    async def hydrate_all(self) -> list[HydrationOutcome]:
        """Hydrate every registered store concurrently.

        One store failing does not stop the others.  Returns one outcome
        per store, in registration order; a store skipped because no
        adapter is configured gets a failure outcome holding
        :class:`NotConfiguredError`.
        """
        stores = list(self._stores.values())
        results = await asyncio.gather(
            *(store.hydrate() for store in stores),
            return_exceptions=True,
        )

        outcomes: list[HydrationOutcome] = []
        for store, result in zip(stores, results, strict=True):
            if isinstance(result, BaseException):
                self._config.log("[%s] hydrate_all: %s", store.namespace, result)
                outcomes.append(HydrationOutcome.failure(store.namespace, result))
            elif not store.initialized:
                # No adapter configured: hydration was skipped, not completed.
                skipped = NotConfiguredError("hydrate", store.namespace)
                outcomes.append(HydrationOutcome.failure(store.namespace, skipped))
            else:
                outcomes.append(HydrationOutcome.success(store.namespace, result))
        return outcomes

    def clear_all(self) -> None:
        """Clear the in-memory value of every store.  Storage is untouched."""
        for store in list(self._stores.values()):
            store.clear()

    async def flush_all(self) -> None:
        """Write every pending value now (e.g. before shutdown)."""
        await asyncio.gather(*(store.flush() for store in self._stores.values()))

    def reset(self) -> None:
        """Forget every store, dropping their pending writes."""
        for store in self._stores.values():
            store.discard()
        self._stores.clear()


def _coerce_options(options: StoreOptions | Mapping[str, Any] | None) -> StoreOptions:
    if options is None:
        return StoreOptions()
    if isinstance(options, StoreOptions):
        return options
    return StoreOptions.model_validate(dict(options))


_DEFAULT_REGISTRY = Registry()


def default_registry() -> Registry:
    return _DEFAULT_REGISTRY


def use(
    namespace: str,
    options: StoreOptions | Mapping[str, Any] | None = None,
) -> SingleStore:
    return _DEFAULT_REGISTRY.use(namespace, options)


async def hydrate_all() -> list[HydrationOutcome]:
    return await _DEFAULT_REGISTRY.hydrate_all()


def clear_all() -> None:
    _DEFAULT_REGISTRY.clear_all()


async def flush_all() -> None:
    await _DEFAULT_REGISTRY.flush_all()


def reset() -> None:
    """Drop every store of the default registry and unconfigure the process."""
    _DEFAULT_REGISTRY.reset()
    reset_config()
