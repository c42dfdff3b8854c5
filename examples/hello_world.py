"""
hydrastore — Hello World

One store per namespace. Hydrate it from storage, set it synchronously,
and let the debounced write-back persist the last value.
"""

import asyncio

import hydrastore
from hydrastore.adapters import SQLiteAdapter


def on_theme_change(new, old) -> None:
    print(f"  theme: {old} -> {new}")


async def main():
    # ──────────────────────────────────────
    #  1. Configure storage and logging once
    # ──────────────────────────────────────
    storage = SQLiteAdapter("hello_world.db")
    hydrastore.configure(storage=storage, log=True, write_delay=0.2)

    # ──────────────────────────────────────
    #  2. Get stores by namespace (created on first use)
    # ──────────────────────────────────────
    theme = hydrastore.use("theme")
    session = hydrastore.use("session", {"encrypted": True})

    theme.on_hydrated(lambda: print("  theme is ready"))
    unsubscribe = theme.subscribe(on_theme_change, fire_immediately=True)

    # ──────────────────────────────────────
    #  3. Load everything that was persisted
    # ──────────────────────────────────────
    for outcome in await hydrastore.hydrate_all():
        status = "ok" if outcome.ok else f"failed: {outcome.error}"
        print(f"  {outcome.namespace}: {status} value={outcome.value!r}")

    # ──────────────────────────────────────
    #  4. Rapid updates coalesce into one write
    # ──────────────────────────────────────
    for mode in ("dark", "light", "dark"):
        theme.set({"mode": mode})
    session.set({"token": "abc"})

    await asyncio.sleep(0.5)
    print("  persisted theme:", await storage.get("theme", theme.options))

    # ──────────────────────────────────────
    #  5. Clean up
    # ──────────────────────────────────────
    unsubscribe()
    await session.clear_storage()
    await hydrastore.flush_all()
    await storage.close()


if __name__ == "__main__":
    asyncio.run(main())
