"""Result type for flat error handling (like Rust's Result<T, E>)."""

from dataclasses import dataclass
from typing import ClassVar, Literal, TypeVar

from typing_extensions import TypeIs

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success result."""

    value: T

    ok: ClassVar[Literal[True]] = True
    error: ClassVar[None] = None


@dataclass(frozen=True, slots=True)
class Err[E: Exception]:
    """Error result.

    The error is always an exception instance, so ``message`` is available
    on every failure regardless of what the wrapped code failed with.
    """

    error: E

    ok: ClassVar[Literal[False]] = False
    value: ClassVar[None] = None

    @property
    def message(self) -> str:
        return str(self.error)


Result = Ok[T] | Err[E]


def ok[T](value: T) -> Ok[T]:
    """Create a successful result."""
    return Ok(value)


def err[E: Exception](error: E) -> Err[E]:
    """Create a failed result."""
    return Err(error)


def is_ok[T, E: Exception](result: Ok[T] | Err[E]) -> TypeIs[Ok[T]]:
    return result.ok


def is_err[T, E: Exception](result: Ok[T] | Err[E]) -> TypeIs[Err[E]]:
    return not result.ok
