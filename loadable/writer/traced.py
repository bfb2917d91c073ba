"""
Traced - Loadable with a transition log
=======================================

Writer-style pairing of a state with the Log of transitions that produced
it. Useful for debugging UI state machines and for asserting the exact
sequence of states in tests, without any I/O in the core.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, assert_never

from kungfu import Error, Ok

from .._helpers import variant_name
from .._types import Mapper, Outcome
from ..functor import map_error, map_value
from ..state import Idle, Loadable
from ..transition import expect_update, update
from .log import Log

type Event = Literal["expect_update", "update_ok", "update_error"]


@dataclass(frozen=True, slots=True)
class Transition:
    """One logged step: event name plus variant tags before and after."""

    event: Event
    before: str
    after: str

    def __str__(self) -> str:
        return f"{self.event}: {self.before} -> {self.after}"


@dataclass(frozen=True, slots=True)
class Traced[E, V]:
    """
    State plus accumulated Log[Transition].

    Every transition appends exactly one entry; mapping appends nothing.
    `state` always equals what the plain functions give for the same events.

    Example:
        t = Traced.start().expect_update().update(Ok(42)).update(Error("e1"))
        t.state   # ReloadFailure("e1", 42)
        [str(x) for x in t.log]
        # ["expect_update: Idle -> Loading",
        #  "update_ok: Loading -> Success",
        #  "update_error: Success -> ReloadFailure"]
    """

    state: Loadable[E, V]
    log: Log[Transition] = Log()

    @staticmethod
    def start[Err, Val](state: Loadable[Err, Val] | None = None) -> Traced[Err, Val]:
        """Begin tracing from `state` (Idle() by default) with an empty log."""
        return Traced(Idle() if state is None else state)

    def _step(self, event: Event, after: Loadable[E, V]) -> Traced[E, V]:
        entry = Transition(event, variant_name(self.state), variant_name(after))
        return Traced(after, self.log.tell(entry))

    def expect_update(self) -> Traced[E, V]:
        return self._step("expect_update", expect_update(self.state))

    def update(self, outcome: Outcome[V, E], /) -> Traced[E, V]:
        match outcome:
            case Ok(_):
                event: Event = "update_ok"
            case Error(_):
                event = "update_error"
            case _ as unreachable:
                assert_never(unreachable)
        return self._step(event, update(outcome, self.state))

    def map_value[U](self, f: Mapper[V, U], /) -> Traced[E, U]:
        return Traced(map_value(f, self.state), self.log)

    def map_error[F](self, f: Mapper[E, F], /) -> Traced[F, V]:
        return Traced(map_error(f, self.state), self.log)


__all__ = ("Event", "Traced", "Transition")
