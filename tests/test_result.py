"""Tests for HydrationOutcome."""

import pytest

from hydrastore import HydrationOutcome, StorageError


def test_success():
    o = HydrationOutcome.success("theme", {"mode": "dark"})
    assert o.ok
    assert o.namespace == "theme"
    assert o.value == {"mode": "dark"}
    assert o.error is None


def test_failure():
    err = StorageError("get", "theme", "timeout")
    o = HydrationOutcome.failure("theme", err)
    assert not o.ok
    assert o.value is None
    assert o.error is err
    assert str(err) == "Storage error during 'get' for 'theme': timeout"


def test_frozen():
    o = HydrationOutcome.success("theme")
    with pytest.raises(AttributeError):
        o.ok = False  # type: ignore[misc]
