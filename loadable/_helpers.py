"""Internal helpers for loadable.

Common functions used across several modules.
These are not part of the public API but are handy in tests and custom folds."""

from __future__ import annotations

from collections.abc import Callable

from .state import Loadable

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def compose[A, B, C](g: Callable[[B], C], f: Callable[[A], B]) -> Callable[[A], C]:
    """
    Right-to-left composition: compose(g, f)(x) == g(f(x)).

    Used to state the functor composition law:
        map_value(compose(g, f), s) == map_value(g, map_value(f, s))
    """

    def composed(x: A) -> C:
        return g(f(x))

    return composed

def variant_name(state: Loadable[object, object]) -> str:
    """Tag of a state, e.g. "ReloadFailure"."""
    return type(state).__name__

__all__ = (
    "compose",
    "identity",
    "variant_name",
)
