"""
Writer
======

Traced - Loadable + Writer[Log[Transition]]:
- state  (текущее состояние)
- log    (аккумуляция переходов)
"""

from .log import Log
from .traced import Event, Traced, Transition

__all__ = (
    "Event",
    "Log",
    "Traced",
    "Transition",
)
