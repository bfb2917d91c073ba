"""
Transitions
===========

expect_update - a load (or reload) was started.
update        - fold a completed outcome into the state.

Fold policy (context-preserving):

    Ok(v)     -> Success(v)                from any state
    Error(e)  -> ReloadFailure(e, v)       if a value v is on hand
    Error(e)  -> Failure(e)                otherwise

NOTE: Ошибка никогда не выбрасывает уже полученное значение - stale value
      остается видимым рядом с новой ошибкой. Callers that want to drop it
      can fold into Idle() instead of the current state.
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Error, Ok

from ._types import Outcome
from .state import Failure, Idle, Loadable, Loading, ReloadFailure, Reloading, Success


def expect_update[E, V](state: Loadable[E, V], /) -> Loadable[E, V]:
    """
    Mark an update as in flight.

    States holding a value move to Reloading and keep it; valueless states
    move to Loading. In-flight states are returned as is.

    Example:
        expect_update(Success(1))            # Reloading(1)
        expect_update(ReloadFailure("e", 1)) # Reloading(1)
        expect_update(Failure("e"))          # Loading()
    """
    match state:
        case Idle() | Failure():
            return Loading()
        case Loading() | Reloading():
            return state
        case Success(value):
            return Reloading(value)
        case ReloadFailure(_, stale):
            return Reloading(stale)
        case _ as unreachable:
            assert_never(unreachable)


def update[E, V](outcome: Outcome[V, E], state: Loadable[E, V], /) -> Loadable[E, V]:
    """
    Fold a completed outcome into the current state.

    Ok always wins and yields a fresh Success. Error keeps the most recent
    value if there is one (ReloadFailure), otherwise yields Failure.

    Example:
        s = update(Ok(42), Idle())        # Success(42)
        s = update(Error("e1"), s)        # ReloadFailure("e1", 42)
    """
    match outcome:
        case Ok(value):
            return Success(value)
        case Error(error):
            return _fail(error, state)
        case _ as unreachable:
            assert_never(unreachable)


def _fail[E, V](error: E, state: Loadable[E, V]) -> Loadable[E, V]:
    match state:
        case Idle() | Loading() | Failure():
            return Failure(error)
        case Success(value):
            return ReloadFailure(error, value)
        case Reloading(stale) | ReloadFailure(_, stale):
            return ReloadFailure(error, stale)
        case _ as unreachable:
            assert_never(unreachable)


__all__ = ("expect_update", "update")
