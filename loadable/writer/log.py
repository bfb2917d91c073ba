"""
Log - неизменяемый журнал переходов
===================================
"""

from __future__ import annotations


class Log[A](tuple[A, ...]):
    """
    Immutable append-only journal carried next to a state.

    Tuple-backed, so a Log can be shared between Traced values and hashed.
    Monoid over concatenation with Log() as the empty journal:
    - Log().combine(x) == x
    - x.combine(Log()) == x
    - (x.combine(y)).combine(z) == x.combine(y.combine(z))
    """

    __slots__ = ()

    @staticmethod
    def of[T](*entries: T) -> Log[T]:
        return Log(entries)

    def combine(self, other: Log[A], /) -> Log[A]:
        return Log((*self, *other))

    def tell(self, entry: A, /) -> Log[A]:
        """Journal with `entry` appended."""
        return Log((*self, entry))

    def __repr__(self) -> str:
        return f"Log({', '.join(map(repr, self))})"


__all__ = ("Log",)
