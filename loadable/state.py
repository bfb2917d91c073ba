"""
Loadable state
==============

Six variants of an asynchronously loaded value:

    Idle           - ничего не запрашивали
    Loading        - first load in flight, no value on hand
    Success        - fresh value
    Failure        - load failed, no value ever obtained
    Reloading      - reload in flight, previous value kept as `stale`
    ReloadFailure  - reload failed, previous value kept next to the error

Every variant is a frozen slotted dataclass, so states are plain immutable
values: compare them with ==, share them freely, never mutate them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Idle:
    """No load ever requested."""


@dataclass(frozen=True, slots=True)
class Loading:
    """First load in flight."""


@dataclass(frozen=True, slots=True)
class Success[V]:
    value: V


@dataclass(frozen=True, slots=True)
class Failure[E]:
    error: E


@dataclass(frozen=True, slots=True)
class Reloading[V]:
    """Reload in flight; `stale` is the most recent successful value."""

    stale: V


@dataclass(frozen=True, slots=True)
class ReloadFailure[E, V]:
    """Reload failed; `stale` is the most recent successful value."""

    error: E
    stale: V


# NOTE: Порядок параметров - сначала ошибка, потом значение (E, V),
#       в отличие от kungfu.Result[T, E].
type Loadable[E, V] = Idle | Loading | Success[V] | Failure[E] | Reloading[V] | ReloadFailure[E, V]

VARIANTS: tuple[type, ...] = (Idle, Loading, Success, Failure, Reloading, ReloadFailure)


__all__ = (
    "Failure",
    "Idle",
    "Loadable",
    "Loading",
    "ReloadFailure",
    "Reloading",
    "Success",
    "VARIANTS",
)
