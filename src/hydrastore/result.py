"""HydrationOutcome — the result of hydrating one namespace in a bulk operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HydrationOutcome:
    """Immutable per-namespace result returned by ``hydrate_all``.

    Attributes:
        namespace: Namespace of the store that was hydrated.
        ok:        ``True`` if hydration completed (value present or absent).
        value:     The store's value after hydration (``None`` on failure).
        error:     The exception raised by ``hydrate()`` when ``ok`` is ``False``.
    """

    namespace: str
    ok: bool
    value: Any = None
    error: BaseException | None = None

    # ── Factory helpers ──────────────────────────────────────

    @staticmethod
    def success(namespace: str, value: Any = None) -> HydrationOutcome:
        return HydrationOutcome(namespace=namespace, ok=True, value=value)

    @staticmethod
    def failure(namespace: str, error: BaseException) -> HydrationOutcome:
        return HydrationOutcome(namespace=namespace, ok=False, error=error)
