"""
Loadable: state of an asynchronously loaded value.

One closed sum type with six variants plus pure functions over it:
- transitions: expect_update, update
- queries: is_loading, is_stale, has_value, has_error
- extraction: to_value, to_error (kungfu Option)
- functor: map_value / fmap, map_error, bimap

Outcomes are kungfu Results; nothing here does I/O or keeps hidden state.
"""

# Core types
from ._types import Mapper, Outcome
from .state import (
    VARIANTS,
    Failure,
    Idle,
    Loadable,
    Loading,
    ReloadFailure,
    Reloading,
    Success,
)

# Internal helpers (for tests and custom folds)
from . import _helpers

# Transitions
from .transition import expect_update, update

# Queries
from .query import has_error, has_value, is_loading, is_stale

# Extraction
from .extract import error_or, to_error, to_value, unwrap_error, unwrap_value, value_or

# Functor
from .functor import bimap, fmap, map_error, map_value

# Lift helpers
from . import lift
from .lift import fold, from_option, from_result, to_result

# Writer
from . import writer
from .writer import Log, Traced, Transition

# Errors
from ._errors import NoErrorError, NoValueError

__all__ = (
    # Types
    "Mapper",
    "Outcome",
    "Loadable",
    "VARIANTS",
    # Variants
    "Idle",
    "Loading",
    "Success",
    "Failure",
    "Reloading",
    "ReloadFailure",
    # Internal helpers
    "_helpers",
    # Transitions
    "expect_update",
    "update",
    # Queries
    "is_loading",
    "is_stale",
    "has_value",
    "has_error",
    # Extraction
    "to_value",
    "to_error",
    "value_or",
    "error_or",
    "unwrap_value",
    "unwrap_error",
    # Functor
    "map_value",
    "fmap",
    "map_error",
    "bimap",
    # Lift
    "lift",
    "from_result",
    "from_option",
    "to_result",
    "fold",
    # Writer
    "writer",
    "Log",
    "Traced",
    "Transition",
    # Errors
    "NoErrorError",
    "NoValueError",
)
