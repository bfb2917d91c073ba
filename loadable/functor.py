"""
Functor operations
==================

map_value - over the value channel (Success, Reloading, ReloadFailure)
map_error - over the error channel (Failure, ReloadFailure)
bimap     - both channels at once

The variant tag never changes. Laws (checked in tests for all six variants):

    map_value(identity, s)       == s
    map_value(compose(g, f), s)  == map_value(g, map_value(f, s))

and the same for map_error.
"""

from __future__ import annotations

from typing import assert_never

from ._types import Mapper
from .state import Failure, Idle, Loadable, Loading, ReloadFailure, Reloading, Success


def map_value[E, V, U](f: Mapper[V, U], state: Loadable[E, V], /) -> Loadable[E, U]:
    """
    Apply f to the value wherever one is present.

    Example:
        map_value(lambda x: x + 1, Reloading(7))  # Reloading(8)
        map_value(lambda x: x + 1, Failure("e"))  # Failure("e")
    """
    match state:
        case Success(value):
            return Success(f(value))
        case Reloading(stale):
            return Reloading(f(stale))
        case ReloadFailure(error, stale):
            return ReloadFailure(error, f(stale))
        case Idle() | Loading() | Failure():
            return state
        case _ as unreachable:
            assert_never(unreachable)


def map_error[E, V, F](f: Mapper[E, F], state: Loadable[E, V], /) -> Loadable[F, V]:
    """
    Apply f to the error wherever one is present.

    Example:
        map_error(len, Failure("err"))  # Failure(3)
    """
    match state:
        case Failure(error):
            return Failure(f(error))
        case ReloadFailure(error, stale):
            return ReloadFailure(f(error), stale)
        case Idle() | Loading() | Success() | Reloading():
            return state
        case _ as unreachable:
            assert_never(unreachable)


def bimap[E, V, F, U](
    on_value: Mapper[V, U],
    on_error: Mapper[E, F],
    state: Loadable[E, V],
    /,
) -> Loadable[F, U]:
    """map_value and map_error in one pass."""
    return map_error(on_error, map_value(on_value, state))


# Alias: classic FP name
fmap = map_value


__all__ = ("bimap", "fmap", "map_error", "map_value")
