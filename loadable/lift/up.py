"""
Подъем значений в Loadable.

Typed constructors plus conversion of kungfu Result / Option into a
settled state.
"""

from __future__ import annotations

from typing import Never

from kungfu import Option, Some

from .._types import Outcome
from ..state import Failure, Idle, Loadable, Loading, ReloadFailure, Reloading, Success
from ..transition import update


def idle() -> Loadable[Never, Never]:
    """Initial state: nothing requested yet."""
    return Idle()


def loading() -> Loadable[Never, Never]:
    return Loading()


def success[V](value: V) -> Loadable[Never, V]:
    """
    Lift a value into a fresh Success.

    **When to use:** seeding a state from data you already have
    (e.g. server-rendered props) so the first fetch becomes a reload.
    """
    return Success(value)


def failure[E](error: E) -> Loadable[E, Never]:
    return Failure(error)


def reloading[V](stale: V) -> Loadable[Never, V]:
    return Reloading(stale)


def reload_failure[E, V](error: E, stale: V) -> Loadable[E, V]:
    return ReloadFailure(error, stale)


def from_result[V, E](result: Outcome[V, E]) -> Loadable[E, V]:
    """
    Convert Result into a settled state: Ok -> Success, Error -> Failure.

    Same as folding the outcome into Idle().

    Example:
        from loadable import lift as L

        L.up.from_result(Ok(42))      # Success(42)
        L.up.from_result(Error("e"))  # Failure("e")
    """
    return update(result, Idle())


def from_option[V, E](option: Option[V], *, error: E) -> Loadable[E, V]:
    """
    Convert Option into a settled state. Nothing becomes Failure(error).

    **When to use:** a lookup that returns Option and "missing" should render
    as an error.
    """
    match option:
        case Some(value):
            return Success(value)
        case _:
            return Failure(error)


__all__ = (
    "failure",
    "from_option",
    "from_result",
    "idle",
    "loading",
    "reload_failure",
    "reloading",
    "success",
)
