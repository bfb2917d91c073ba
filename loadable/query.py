"""Queries

Boolean views over a state for rendering code that does not want to match
all six variants."""

from __future__ import annotations

from .state import Failure, Loadable, Loading, ReloadFailure, Reloading, Success


def is_loading(state: Loadable[object, object], /) -> bool:
    """An update is in flight (Loading, Reloading)."""
    return isinstance(state, (Loading, Reloading))


def is_stale(state: Loadable[object, object], /) -> bool:
    """A retained value sits next to an in-flight or failed reload."""
    return isinstance(state, (Reloading, ReloadFailure))


def has_value(state: Loadable[object, object], /) -> bool:
    """to_value(state) is Some."""
    return isinstance(state, (Success, Reloading, ReloadFailure))


def has_error(state: Loadable[object, object], /) -> bool:
    """to_error(state) is Some."""
    return isinstance(state, (Failure, ReloadFailure))


__all__ = ("has_error", "has_value", "is_loading", "is_stale")
