"""Tests for Registry — store reuse and bulk operations."""

import asyncio

import pytest

from hydrastore import (
    GlobalConfig,
    HydrationState,
    InvalidNamespaceError,
    NotConfiguredError,
    Registry,
    StorageError,
    StoreOptions,
    clear_all,
    configure,
    default_registry,
    flush_all,
    hydrate_all,
    reset,
    use,
)

# ── use ──────────────────────────────────────────────────────


def test_use_returns_same_instance():
    assert use("theme") is use("theme")


def test_use_distinct_namespaces():
    assert use("a") is not use("b")


@pytest.mark.parametrize("namespace", ["", None, 42])
def test_use_rejects_invalid_namespace(namespace):
    with pytest.raises(InvalidNamespaceError):
        use(namespace)


def test_first_options_win():
    store = use("x", {"encrypted": True})
    again = use("x", {"encrypted": False})

    assert again is store
    assert again.options.encrypted is True
    assert use("x").options.encrypted is True


def test_extra_options_are_kept():
    store = use("x", {"encrypted": True, "ttl": 30})
    assert store.options.model_extra == {"ttl": 30}


def test_options_model_accepted():
    options = StoreOptions(encrypted=True)
    assert use("x", options).options is options


def test_default_options():
    assert use("x").options.encrypted is False


def test_introspection():
    registry = default_registry()
    use("a")
    use("b")

    assert registry.namespaces() == ["a", "b"]
    assert len(registry) == 2
    assert "a" in registry
    assert "c" not in registry
    assert registry.get("c") is None
    assert registry.get("a") is use("a")


# ── hydrate_all ──────────────────────────────────────────────


async def test_hydrate_all(make_adapter):
    configure(storage=make_adapter({"theme": {"mode": "dark"}, "user": {"id": 7}}))
    use("theme")
    use("user")
    use("empty")

    outcomes = await hydrate_all()

    assert [o.namespace for o in outcomes] == ["theme", "user", "empty"]
    assert all(o.ok for o in outcomes)
    assert outcomes[0].value == {"mode": "dark"}
    assert outcomes[1].value == {"id": 7}
    assert outcomes[2].value is None
    assert all(use(ns).initialized for ns in ("theme", "user", "empty"))


async def test_hydrate_all_collects_failures(make_adapter, logs):
    adapter = make_adapter({"good": 1, "bad": 2})
    adapter.fail_keys.add("bad")
    configure(storage=adapter)
    use("good")
    use("bad")

    outcomes = await hydrate_all()

    good, bad = outcomes
    assert good.ok and good.value == 1
    assert not bad.ok
    assert isinstance(bad.error, StorageError)
    assert use("good").initialized
    assert use("bad").state is HydrationState.UNINITIALIZED
    assert any(m.startswith("[bad] hydrate_all:") for m in logs)


async def test_hydrate_all_runs_concurrently(make_adapter):
    adapter = make_adapter({"a": 1, "b": 2})
    adapter.gate = asyncio.Event()
    configure(storage=adapter)
    use("a")
    use("b")

    task = asyncio.create_task(hydrate_all())
    await asyncio.sleep(0.01)
    assert adapter.count("get") == 2

    adapter.gate.set()
    outcomes = await task
    assert [o.value for o in outcomes] == [1, 2]


async def test_hydrate_all_empty_registry():
    assert await hydrate_all() == []


# ── clear_all / flush_all / reset ────────────────────────────


async def test_clear_all_clears_memory_only(adapter):
    theme = use("theme")
    other = use("other")
    await theme.hydrate()
    other.set(1)
    seen = []
    theme.subscribe(lambda new, old: seen.append((new, old)))

    clear_all()

    assert theme.value is None
    assert other.value is None
    assert seen == [(None, {"mode": "dark"})]
    assert not other.has_pending_write
    assert adapter.stored("theme") == {"mode": "dark"}


async def test_flush_all_writes_pending_values(adapter):
    configure(write_delay=60)
    use("a").set(1)
    use("b").set(2)

    await flush_all()

    assert adapter.stored("a") == 1
    assert adapter.stored("b") == 2


async def test_reset_forgets_stores_and_config(adapter):
    store = use("theme")
    store.set(1)

    reset()

    assert use("theme") is not store
    assert not store.has_pending_write
    assert default_registry().config.adapter is None


# ── configuration context ────────────────────────────────────


async def test_reconfigure_applies_to_existing_stores(make_adapter):
    first = make_adapter()
    configure(storage=first, write_delay=0.01)
    store = use("theme")

    second = make_adapter()
    configure(storage=second)
    store.set(1)
    await asyncio.sleep(0.05)

    assert first.count("set") == 0
    assert second.stored("theme") == 1


async def test_injected_config_is_isolated(make_adapter):
    private = make_adapter({"theme": "private"})
    registry = Registry(GlobalConfig().configure(storage=private))
    configure(storage=make_adapter({"theme": "global"}))

    assert await registry.use("theme").hydrate() == "private"
    assert await use("theme").hydrate() == "global"
    assert registry.use("theme") is not use("theme")


async def test_hydrate_all_reports_skipped_without_storage():
    use("theme")

    (outcome,) = await hydrate_all()

    assert not outcome.ok
    assert isinstance(outcome.error, NotConfiguredError)
    assert not use("theme").initialized


async def test_hydrate_all_with_raising_subscriber(adapter):
    store = use("theme")
    store.subscribe(lambda new, old: 1 / 0)

    (outcome,) = await hydrate_all()

    assert outcome.ok
    assert outcome.value == {"mode": "dark"}
    assert store.initialized
