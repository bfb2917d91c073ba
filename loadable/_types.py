"""
Core type definitions for loadable.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Result

# ============================================================================
# Type aliases
# ============================================================================

# Mapper = payload transformation used by map_value / map_error
type Mapper[A, B] = Callable[[A], B]

# Outcome = what an external load produces and update() folds in
# NOTE: kungfu order (value, error), not Loadable order (error, value).
type Outcome[V, E] = Result[V, E]

__all__ = (
    "Mapper",
    "Outcome",
)
