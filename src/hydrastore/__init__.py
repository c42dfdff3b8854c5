"""hydrastore — namespace-keyed in-memory values with debounced write-back.

Each namespace gets one store.  Hydrate it from the configured adapter,
``set()`` it synchronously, subscribe to changes; writes reach the
adapter after a short quiet period, coalesced.
"""

from hydrastore.config import GlobalConfig, configure, get_config
from hydrastore.exceptions import (
    HydraStoreError,
    InvalidNamespaceError,
    NotConfiguredError,
    StorageError,
)
from hydrastore.registry import (
    Registry,
    clear_all,
    default_registry,
    flush_all,
    hydrate_all,
    reset,
    use,
)
from hydrastore.result import HydrationOutcome
from hydrastore.store import HydrationState, SingleStore, StoreOptions

__all__ = [
    "GlobalConfig",
    "HydraStoreError",
    "HydrationOutcome",
    "HydrationState",
    "InvalidNamespaceError",
    "NotConfiguredError",
    "Registry",
    "SingleStore",
    "StorageError",
    "StoreOptions",
    "clear_all",
    "configure",
    "default_registry",
    "flush_all",
    "get_config",
    "hydrate_all",
    "reset",
    "use",
]
