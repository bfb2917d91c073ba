"""
Опускание Loadable в Result или значение.

to_result - settled outcome as Option[Result]
fold      - exhaustive case analysis, one handler per variant
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Nothing, Ok, Option, Result, Some

from ..state import Failure, Idle, Loadable, Loading, ReloadFailure, Reloading, Success


def to_result[E, V](state: Loadable[E, V]) -> Option[Result[V, E]]:
    """
    Last settled outcome, if the state reflects one.

    Success(v) -> Some(Ok(v)); Failure(e) and ReloadFailure(e, _) ->
    Some(Error(e)); Idle, Loading and Reloading -> Nothing().

    NOTE: Reloading(v) is not Some(Ok(v)) - the value is known to be stale.
    """
    match state:
        case Success(value):
            return Some(Ok(value))
        case Failure(error) | ReloadFailure(error, _):
            return Some(Error(error))
        case Idle() | Loading() | Reloading():
            return Nothing()
        case _ as unreachable:
            assert_never(unreachable)


def fold[E, V, R](
    state: Loadable[E, V],
    *,
    idle: Callable[[], R],
    loading: Callable[[], R],
    success: Callable[[V], R],
    failure: Callable[[E], R],
    reloading: Callable[[V], R],
    reload_failure: Callable[[E, V], R],
) -> R:
    """
    Run the handler matching the variant.

    Example:
        from loadable import lift as L

        text = L.down.fold(
            state,
            idle=lambda: "",
            loading=lambda: "Loading...",
            success=lambda user: user.name,
            failure=lambda e: f"error: {e}",
            reloading=lambda user: f"{user.name} (refreshing)",
            reload_failure=lambda e, user: f"{user.name} ({e})",
        )
    """
    match state:
        case Idle():
            return idle()
        case Loading():
            return loading()
        case Success(value):
            return success(value)
        case Failure(error):
            return failure(error)
        case Reloading(stale):
            return reloading(stale)
        case ReloadFailure(error, stale):
            return reload_failure(error, stale)
        case _ as unreachable:
            assert_never(unreachable)


__all__ = ("fold", "to_result")
