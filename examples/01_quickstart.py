from __future__ import annotations

from _infra import FakeBackend, HttpError, User, banner, run

from kungfu import Nothing, Some
from loadable import Idle, Loadable, expect_update, is_loading, is_stale, to_error, to_value, update


def render(state: Loadable[HttpError, User]) -> str:
    # Rendering only reads queries, never matches the six variants.
    parts: list[str] = []
    match to_value(state):
        case Some(user):
            parts.append(f"{user.name} v{user.version}")
        case Nothing():
            parts.append("<no data>")
    if is_loading(state):
        parts.append("[spinner]")
    if is_stale(state):
        parts.append("(stale)")
    match to_error(state):
        case Some(err):
            parts.append(f"! {err}")
        case Nothing():
            pass
    return " ".join(parts)


async def main() -> None:
    banner("01_quickstart: load, reload, failed reload, recover")

    api = FakeBackend(name="api", delay_seconds=0.01, fail_on=frozenset({3}))
    state: Loadable[HttpError, User] = Idle()
    print(render(state))

    for _ in range(4):
        state = expect_update(state)
        print(render(state))
        # Only the outcome of the latest request is folded in.
        outcome = await api.fetch_user(42)
        state = update(outcome, state)
        print(render(state))


if __name__ == "__main__":
    run(main)
