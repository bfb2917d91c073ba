from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class HttpError:
    status: int
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return f"HTTP {self.status}: {self.message}"


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    version: int = 1


@dataclass(slots=True)
class FakeBackend:
    """Scripted HTTP-ish backend: fails on the calls listed in `fail_on`."""

    name: str
    delay_seconds: float = 0.0
    fail_on: frozenset[int] = frozenset()
    calls: int = 0

    async def fetch_user(self, user_id: int) -> Result[User, HttpError]:
        await asyncio.sleep(self.delay_seconds)
        self.calls += 1
        if self.calls in self.fail_on:
            return Error(HttpError(503, f"{self.name}: unavailable"))
        return Ok(User(id=user_id, name=f"user:{user_id}@{self.name}", version=self.calls))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
