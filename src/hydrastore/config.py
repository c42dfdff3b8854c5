"""GlobalConfig — the process-wide storage adapter and logger.

Every store reads this object at call time rather than caching what it
held at creation, so ``configure()`` takes effect for the next operation
on every store, past and future.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hydrastore.adapters.base import StorageAdapter

Logger = Callable[..., None]
"""Logging sink: ``(message, *args) -> None`` with ``%``-style placeholders."""

DEFAULT_WRITE_DELAY = 0.1

_console = logging.getLogger("hydrastore")


def _noop_log(message: str, *args: Any) -> None:
    pass


def _console_log(message: str, *args: Any) -> None:
    _console.info(message, *args)


def _enable_console() -> None:
    if not _console.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(message)s"))
        _console.addHandler(handler)
    if _console.level == logging.NOTSET or _console.level > logging.INFO:
        _console.setLevel(logging.INFO)


def resolve_logger(log: Logger | bool | None) -> Logger:
    """Turn the ``log`` option into a concrete callable.

    * a callable is used as-is;
    * ``True`` selects the console logger (stdlib ``logging``);
    * ``False`` / ``None`` selects a no-op.
    """
    if callable(log):
        return log
    if log is True:
        _enable_console()
        return _console_log
    return _noop_log


class GlobalConfig(BaseModel):
    """Configuration shared by a registry and all of its stores.

    Attributes:
        adapter:     Active storage backend, ``None`` until configured.
        log:         Resolved logging sink (no-op by default).
        write_delay: Quiet period, in seconds, before a debounced write fires.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    adapter: StorageAdapter | None = None
    log: Logger = _noop_log
    write_delay: float = Field(default=DEFAULT_WRITE_DELAY, ge=0)

    def configure(
        self,
        *,
        storage: StorageAdapter | None = None,
        log: Logger | bool | None = None,
        write_delay: float | None = None,
    ) -> GlobalConfig:
        """Replace the provided fields; omitted (``None``) fields stay unchanged."""
        adapter = storage if storage is not None else self.adapter
        sink = resolve_logger(log) if log is not None else self.log
        delay = self.write_delay
        if write_delay is not None:
            if write_delay < 0:
                raise ValueError(f"write_delay must be >= 0, got {write_delay}")
            delay = float(write_delay)

        self.adapter = adapter
        self.log = sink
        self.write_delay = delay
        return self

    def reset(self) -> None:
        """Restore the unconfigured defaults."""
        self.adapter = None
        self.log = _noop_log
        self.write_delay = DEFAULT_WRITE_DELAY


_GLOBAL_CONFIG = GlobalConfig()


def get_config() -> GlobalConfig:
    return _GLOBAL_CONFIG


def configure(
    *,
    storage: StorageAdapter | None = None,
    log: Logger | bool | None = None,
    write_delay: float | None = None,
) -> GlobalConfig:
    """Configure the process-wide adapter, logger and write delay.

    Missing ``storage`` is not an error: stores keep working in memory and
    skip (with a logged warning) every backend call until it is set.
    """
    return _GLOBAL_CONFIG.configure(storage=storage, log=log, write_delay=write_delay)


def reset_config() -> None:
    _GLOBAL_CONFIG.reset()
