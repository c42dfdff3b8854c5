"""SingleStore — one namespace's value, hydration state, subscribers and pending write."""

from __future__ import annotations

import asyncio
import enum
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from hydrastore.exceptions import NotConfiguredError, StorageError

if TYPE_CHECKING:
    from hydrastore.config import GlobalConfig

Subscriber = Callable[[Any, Any], None]
"""Change callback: ``(new_value, old_value) -> None``."""


class HydrationState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    HYDRATING = "hydrating"
    HYDRATED = "hydrated"


class StoreOptions(BaseModel):
    """Per-store options captured at creation and handed to every adapter call.

    Unknown keys are kept so adapters can define their own options.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    encrypted: bool = False


class SingleStore:
    """In-memory value for one namespace with debounced write-back.

    The value is visible synchronously after ``set()``; the adapter write
    happens ``write_delay`` seconds after the *last* ``set()`` and always
    persists the value current at that moment.

    Parameters:
        namespace: Key under which the value is persisted.
        options:   Opaque per-store options passed to the adapter.
        config:    Configuration context, read at every operation.
    """

    def __init__(self, namespace: str, options: StoreOptions, config: GlobalConfig) -> None:
        self._namespace = namespace
        self._options = options
        self._config = config
        self._value: Any = None
        self._state = HydrationState.UNINITIALIZED
        self._subscribers: dict[object, Subscriber] = {}
        self._hydrated_callbacks: list[Callable[[], None]] = []
        self._hydration: asyncio.Task[Any] | None = None
        self._pending_write: asyncio.TimerHandle | None = None
        self._writes: set[asyncio.Task[None]] = set()

    def __repr__(self) -> str:
        return f"SingleStore(namespace={self._namespace!r}, state={self._state.value})"

    # ── read-only views ──────────────────────────────────────

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def options(self) -> StoreOptions:
        return self._options

    @property
    def value(self) -> Any:
        return self._value

    @property
    def state(self) -> HydrationState:
        return self._state

    @property
    def initialized(self) -> bool:
        """``True`` once a value has been established by hydration or ``set()``."""
        return self._state is HydrationState.HYDRATED

    @property
    def has_pending_write(self) -> bool:
        return self._pending_write is not None

    def _log(self, message: str, *args: Any) -> None:
        self._config.log(f"[{self._namespace}] {message}", *args)

    # ── hydration ────────────────────────────────────────────

    async def hydrate(self) -> Any:
        """Load the persisted value into memory and return it.

        * Already hydrated: returns the current value without a backend read.
        * Hydration in flight: joins it, so concurrent callers share one read.
        * Adapter failure: the store goes back to ``UNINITIALIZED`` (a later
          call retries) and :class:`StorageError` is raised to every caller.
        """
        if self._state is HydrationState.HYDRATED:
            return self._value
        if self._hydration is None:
            self._state = HydrationState.HYDRATING
            self._hydration = asyncio.ensure_future(self._load())
        return await asyncio.shield(self._hydration)

    async def _load(self) -> Any:
        try:
            adapter = self._config.adapter
            if adapter is None:
                self._log("%s", NotConfiguredError("hydrate", self._namespace))
                if self._state is HydrationState.HYDRATING:
                    self._state = HydrationState.UNINITIALIZED
                return self._value

            try:
                data = await adapter.get(self._namespace, self._options)
            except Exception as e:
                if self._state is HydrationState.HYDRATING:
                    self._state = HydrationState.UNINITIALIZED
                self._log("hydration failed: %s", e)
                raise StorageError("get", self._namespace, str(e)) from e

            if self._state is HydrationState.HYDRATED:
                # A set() landed while the read was in flight; memory wins.
                self._log("hydration superseded by local value")
                return self._value

            old = self._value
            self._value = data
            self._mark_hydrated()
            self._log("hydrated")
            if data is not old:
                self._notify(data, old)
            return self._value
        finally:
            self._hydration = None

    def on_hydrated(self, callback: Callable[[], None]) -> None:
        """Call *callback* once, the first time this store becomes hydrated.

        If it already is, the callback is scheduled on the running loop
        rather than invoked inline.
        """
        if self._state is HydrationState.HYDRATED:
            asyncio.get_running_loop().call_soon(callback)
            return
        self._hydrated_callbacks.append(callback)

    def _mark_hydrated(self) -> None:
        if self._state is HydrationState.HYDRATED:
            return
        self._state = HydrationState.HYDRATED
        callbacks, self._hydrated_callbacks = self._hydrated_callbacks, []
        for callback in callbacks:
            self._invoke("on_hydrated", callback)

    # ── mutation ─────────────────────────────────────────────

    def set(self, data: Any) -> None:
        """Replace the value, notify subscribers and schedule a debounced write.

        Every call notifies and schedules, even when *data* equals the
        current value.  A callback that raises is logged and does not stop
        the write or the remaining callbacks.
        """
        old = self._value
        self._value = data
        self._schedule_write()
        self._mark_hydrated()
        self._notify(data, old)

    def clear(self) -> None:
        """Drop the in-memory value and any pending write.  Storage is untouched."""
        old = self._value
        self._value = None
        self._cancel_pending_write()
        self._notify(None, old)

    async def clear_storage(self) -> None:
        """``clear()`` and then remove the persisted value.

        The in-memory clear is not rolled back if the adapter fails.
        """
        self.clear()
        adapter = self._config.adapter
        if adapter is None:
            self._log("%s", NotConfiguredError("remove", self._namespace))
            return
        try:
            await adapter.remove(self._namespace, self._options)
        except Exception as e:
            self._log("remove failed: %s", e)
            raise StorageError("remove", self._namespace, str(e)) from e
        self._log("storage cleared")

    # ── subscriptions ────────────────────────────────────────

    def subscribe(
        self,
        callback: Subscriber,
        *,
        fire_immediately: bool = False,
    ) -> Callable[[], None]:
        """Register *callback* for ``(new_value, old_value)`` notifications.

        Returns a function removing exactly this registration; calling it
        again is a no-op.  With ``fire_immediately`` and a value present,
        the callback is invoked once right away with ``(value, value)``.
        """
        token = object()
        self._subscribers[token] = callback

        def unsubscribe() -> None:
            self._subscribers.pop(token, None)

        if fire_immediately and self._value is not None:
            callback(self._value, self._value)
        return unsubscribe

    def _notify(self, new: Any, old: Any) -> None:
        for callback in list(self._subscribers.values()):
            self._invoke("subscriber", callback, new, old)

    def _invoke(self, kind: str, callback: Callable[..., None], *args: Any) -> None:
        try:
            callback(*args)
        except Exception as e:
            self._log("%s callback failed: %r", kind, e)

    # ── debounced persistence ────────────────────────────────

    def _schedule_write(self) -> None:
        self._cancel_pending_write()
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._log("no running event loop, write not scheduled")
            return
        self._pending_write = loop.call_later(self._config.write_delay, self._fire_write)

    def _cancel_pending_write(self) -> None:
        if self._pending_write is not None:
            self._pending_write.cancel()
            self._pending_write = None

    def _fire_write(self) -> None:
        self._pending_write = None
        self._start_write()

    def _start_write(self) -> asyncio.Task[None]:
        task = asyncio.ensure_future(self._write())
        self._writes.add(task)
        task.add_done_callback(self._writes.discard)
        return task

    async def _write(self) -> None:
        adapter = self._config.adapter
        if adapter is None:
            self._log("%s", NotConfiguredError("set", self._namespace))
            return
        value = self._value
        try:
            await adapter.set(self._namespace, value, self._options)
        except Exception as e:
            self._log("write failed: %s", e)
            return
        self._log("persisted")

    async def flush(self) -> None:
        """Write a pending value now instead of waiting for the timer.

        Also waits for writes that are already in flight.
        """
        if self._pending_write is not None:
            self._cancel_pending_write()
            self._start_write()
        if self._writes:
            await asyncio.gather(*self._writes)

    def discard(self) -> None:
        """Cancel the pending write without touching the value."""
        self._cancel_pending_write()
