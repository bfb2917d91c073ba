"""
Extraction
==========

Опускание состояния в Option / значение.

to_value / to_error never fabricate a payload: a state without a value
gives Nothing(), never a default.
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Nothing, Option, Some

from ._errors import NoErrorError, NoValueError
from ._helpers import variant_name
from .state import Failure, Idle, Loadable, Loading, ReloadFailure, Reloading, Success


def to_value[E, V](state: Loadable[E, V], /) -> Option[V]:
    """
    Some(value) for Success, Reloading and ReloadFailure, else Nothing().

    Example:
        to_value(Reloading(7))  # Some(7)
        to_value(Failure("e"))  # Nothing()
    """
    match state:
        case Success(value) | Reloading(value) | ReloadFailure(_, value):
            return Some(value)
        case Idle() | Loading() | Failure():
            return Nothing()
        case _ as unreachable:
            assert_never(unreachable)


def to_error[E, V](state: Loadable[E, V], /) -> Option[E]:
    """Some(error) for Failure and ReloadFailure, else Nothing()."""
    match state:
        case Failure(error) | ReloadFailure(error, _):
            return Some(error)
        case Idle() | Loading() | Success() | Reloading():
            return Nothing()
        case _ as unreachable:
            assert_never(unreachable)


def value_or[E, V](state: Loadable[E, V], default: V, /) -> V:
    """Value if present, otherwise `default`."""
    return to_value(state).unwrap_or(default)


def error_or[E, V](state: Loadable[E, V], default: E, /) -> E:
    """Error if present, otherwise `default`."""
    return to_error(state).unwrap_or(default)


def unwrap_value[E, V](state: Loadable[E, V], /) -> V:
    """
    Value or raise NoValueError.

    **When to use:** only after has_value(state) was checked.
    """
    match to_value(state):
        case Some(value):
            return value
        case _:
            raise NoValueError(variant_name(state))


def unwrap_error[E, V](state: Loadable[E, V], /) -> E:
    """Error or raise NoErrorError."""
    match to_error(state):
        case Some(error):
            return error
        case _:
            raise NoErrorError(variant_name(state))


__all__ = (
    "error_or",
    "to_error",
    "to_value",
    "unwrap_error",
    "unwrap_value",
    "value_or",
)
