"""Ok/Err result type.

Each step of a publish run (build, clear, publish, marker removal) returns
a Result instead of raising. The orchestrator stops at the first Err and
goes on to logging, so no step depends on an exception unwinding past it.

    match verifier.verify():
        case Ok():
            ...
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeGuard


@dataclass(frozen=True, slots=True, repr=False)
class Ok[T]:
    value: T

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: object) -> T:
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[object], object]) -> Ok[T]:
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Err[E]:
    error: E

    def unwrap(self) -> None:
        """Raise ValueError; callers must check for Err first."""
        raise ValueError(f"called unwrap on Err: {self.error}")

    def unwrap_or[D](self, default: D) -> D:
        return default

    def map(self, f: Callable[[object], object]) -> Err[E]:
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    return isinstance(result, Err)
