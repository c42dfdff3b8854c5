"""Shared test fixtures."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from hydrastore import configure, reset
from hydrastore.adapters import InMemoryAdapter


class RecordingAdapter(InMemoryAdapter):
    """InMemoryAdapter that records calls and can be gated or made to fail."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        super().__init__(initial)
        self.calls: list[tuple[str, str]] = []
        self.options_seen: list[Any] = []
        self.gate: asyncio.Event | None = None
        self.fail_ops: set[str] = set()
        self.fail_keys: set[str] = set()

    async def _enter(self, op: str, key: str, options: Any) -> None:
        self.calls.append((op, key))
        self.options_seen.append(options)
        if self.gate is not None:
            await self.gate.wait()
        if op in self.fail_ops or key in self.fail_keys:
            raise RuntimeError("backend down")

    async def get(self, key, options):
        await self._enter("get", key, options)
        return await super().get(key, options)

    async def set(self, key, value, options):
        await self._enter("set", key, options)
        await super().set(key, value, options)

    async def remove(self, key, options):
        await self._enter("remove", key, options)
        await super().remove(key, options)

    def count(self, op: str) -> int:
        return sum(1 for name, _ in self.calls if name == op)

    def stored(self, key: str) -> Any:
        return self._data.get(key)


@pytest.fixture(autouse=True)
def _fresh_registry():
    reset()
    yield
    reset()


@pytest.fixture
def adapter():
    adapter = RecordingAdapter({"theme": {"mode": "dark"}})
    configure(storage=adapter, write_delay=0.01)
    return adapter


@pytest.fixture
def logs():
    messages: list[str] = []

    def sink(message: str, *args: Any) -> None:
        messages.append(message % args if args else message)

    configure(log=sink)
    return messages


@pytest.fixture
def make_adapter():
    return RecordingAdapter
