"""
Lift helpers with semantic namespaces.

Supports the same import styles as the rest of the library:
    from loadable import lift as L   # Recommended
    from loadable import lift        # Explicit

Architecture:
- L.up.*    - подъем значений в Loadable
- L.down.*  - опускание Loadable в Result / значение

Examples:
    from loadable import lift as L

    state = L.up.idle()
    state = L.up.from_result(await fetch_user(42))
    outcome = L.down.to_result(state)   # Some(Ok(user))
"""

from __future__ import annotations

from . import down, up

from .down import fold, to_result
from .up import (
    failure,
    from_option,
    from_result,
    idle,
    loading,
    reload_failure,
    reloading,
    success,
)

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "idle",
    "loading",
    "success",
    "failure",
    "reloading",
    "reload_failure",
    "from_result",
    "from_option",
    # Down
    "to_result",
    "fold",
)
