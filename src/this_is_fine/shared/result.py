"""Strict result type.

This module implements a Rust-style Result type: a value is either a success
(``Ok``) or a failure (``Err``), never both. It is the status field of an
``Outcome`` and the target of its escalation conversions.

Failure propagation uses structural pattern matching with an early return:

    match outcome.not_fine():
        case Err() as err:
            return err
        case Ok(value):
            ...
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union

from this_is_fine.shared.exceptions import ExpectError, UnwrapError, panic

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Map target type
F = TypeVar("F")  # Error map target type


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result containing a value."""

    value: T

    def is_ok(self) -> bool:
        """Check if this is a success result."""
        return True

    def is_err(self) -> bool:
        """Check if this is an error result."""
        return False

    def ok(self) -> T | None:
        """Get the value."""
        return self.value

    def err(self) -> None:
        """Get the error (always None for Ok)."""
        return None

    def unwrap(self) -> T:
        """Get the value (safe because this is Ok)."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Get the value or default (returns value because this is Ok)."""
        return self.value

    def expect(self, message: str) -> T:
        """Get the value (safe because this is Ok)."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Get the error (raises because this is Ok)."""
        panic(UnwrapError, "called `Result.unwrap_err()` on an `Ok` value", self.value)

    def expect_err(self, message: str) -> NoReturn:
        """Get the error (raises with ``message`` because this is Ok)."""
        panic(ExpectError, message, self.value)

    def map(self, func: Callable[[T], U]) -> "Result[U, Any]":
        """Transform the success value."""
        return Ok(func(self.value))

    def map_err(self, func: Callable[[Any], F]) -> "Result[T, F]":
        """Transform the error value (does nothing for Ok)."""
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Generic[E]):
    """Error result containing an error value.

    The error is any value, not necessarily an exception. When it is an
    exception, the errors raised by ``unwrap`` and ``expect`` chain it.
    """

    error: E

    def is_ok(self) -> bool:
        """Check if this is a success result."""
        return False

    def is_err(self) -> bool:
        """Check if this is an error result."""
        return True

    def ok(self) -> None:
        """Get the value (always None for Err)."""
        return None

    def err(self) -> E | None:
        """Get the error."""
        return self.error

    def unwrap(self) -> NoReturn:
        """Get the value (raises because this is Err)."""
        panic(UnwrapError, "called `Result.unwrap()` on an `Err` value", self.error)

    def unwrap_or(self, default: T) -> T:
        """Get the value or default (returns default because this is Err)."""
        return default

    def expect(self, message: str) -> NoReturn:
        """Get the value (raises with ``message`` because this is Err)."""
        panic(ExpectError, message, self.error)

    def unwrap_err(self) -> E:
        """Get the error (safe because this is Err)."""
        return self.error

    def expect_err(self, message: str) -> E:
        """Get the error (safe because this is Err)."""
        return self.error

    def map(self, func: Callable[[Any], U]) -> "Result[U, E]":
        """Transform the success value (does nothing for Err)."""
        return self

    def map_err(self, func: Callable[[E], F]) -> "Result[Any, F]":
        """Transform the error value."""
        return Err(func(self.error))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for clearer function signatures
Result = Union[Ok[T], Err[E]]

# Shared "no error" status of an Outcome
OK: Ok[None] = Ok(None)
