from __future__ import annotations

from _infra import FakeBackend, banner, run

from loadable import lift as L
from loadable.writer import Traced


async def main() -> None:
    banner("02_traced: transition log + fold rendering")

    api = FakeBackend(name="api", fail_on=frozenset({2}))
    traced = Traced.start()

    for _ in range(3):
        traced = traced.expect_update()
        traced = traced.update(await api.fetch_user(7))

    for entry in traced.log:
        print(entry)

    print(
        L.fold(
            traced.map_error(str).state,
            idle=lambda: "idle",
            loading=lambda: "loading...",
            success=lambda user: f"ok: {user.name}",
            failure=lambda e: f"failed: {e}",
            reloading=lambda user: f"refreshing {user.name}",
            reload_failure=lambda e, user: f"{user.name} (last refresh failed: {e})",
        )
    )


if __name__ == "__main__":
    run(main)
