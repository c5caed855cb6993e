"""Partial-failure outcome.

An ``Outcome`` pairs a value that is always produced with a status that may
additionally carry a non-fatal error. Unlike a strict ``Result`` the value is
never discarded when an error is present: the caller decides whether to take
the value (``fine``), the error (``err``), both (``into_result``), or to
escalate (``not_fine``).

Example:
    >>> parsed = Outcome.from_inverse([1, 2], "line 3 skipped")
    >>> parsed.is_err()
    True
    >>> parsed.fine()
    [1, 2]
    >>> parsed.not_fine()
    Err('line 3 skipped')
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from this_is_fine.domain.protocols import Deref, DerefMut
from this_is_fine.domain.views import Slot
from this_is_fine.shared.exceptions import UnwrapError, panic
from this_is_fine.shared.markers import must_use
from this_is_fine.shared.result import OK, Err, Ok, Result

T = TypeVar("T")  # Value type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Value map target type
F = TypeVar("F")  # Error map target type
E0 = TypeVar("E0")  # Inner error type of a nested outcome
E1 = TypeVar("E1")  # Outer error type of a nested outcome


@dataclass
class Outcome(Generic[T, E]):
    """A value together with a status that may carry an error.

    Attributes:
        value: The produced value; always present
        status: ``OK`` when nothing went wrong, ``Err(error)`` otherwise
    """

    value: T
    status: Result[None, E] = OK

    @classmethod
    def from_inverse(cls, value: T, error: E | None = None) -> "Outcome[T, E]":
        """Build an outcome from a value and an optional error.

        Args:
            value: The produced value
            error: The error met while producing it, or None

        Returns:
            Outcome with status ``OK`` when ``error`` is None, ``Err(error)`` otherwise
        """
        if error is None:
            return cls(value)
        return cls(value, Err(error))

    @classmethod
    def from_result(cls, result: "Result[T, tuple[T, E]]") -> "Outcome[T, E]":
        """Rebuild an outcome from the output of ``into_result``.

        Args:
            result: ``Ok(value)`` or ``Err((value, error))``

        Returns:
            The outcome ``into_result`` was called on

        Raises:
            TypeError: If ``result`` is neither Ok nor Err of a pair
        """
        match result:
            case Ok(value):
                return cls(value)
            case Err((value, error)):
                return cls(value, Err(error))
            case _:
                raise TypeError(f"expected Ok(value) or Err((value, error)), got {result!r}")

    # ------------------------------------------------------------------
    # Status inspection
    # ------------------------------------------------------------------

    def is_ok(self) -> bool:
        """Check if no error was reported."""
        return self.status.is_ok()

    def is_err(self) -> bool:
        """Check if an error was reported."""
        return not self.is_ok()

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    def ok(self) -> T | None:
        """Get the value if no error was reported, otherwise None.

        The error is not carried along; use ``into_result`` to keep both.
        """
        if self.is_ok():
            return self.value
        return None

    def fine(self) -> T:
        """Get the value, accepting any error that came with it."""
        return self.value

    @must_use("use `fine()` if the value was the goal; the value is discarded here")
    def err(self) -> E | None:
        """Get the error if one was reported, otherwise None."""
        return self.status.err()

    def not_fine(self) -> Result[T, E]:
        """Collapse into a strict result, dropping the value on error.

        This is the escalation point: match the result and return early on
        ``Err`` to propagate the failure.

        Returns:
            ``Ok(value)`` if no error was reported, ``Err(error)`` otherwise
        """
        return self.status.map(lambda _: self.value)

    def into_result(self) -> "Result[T, tuple[T, E]]":
        """Convert into a strict result that keeps the value on failure.

        Returns:
            ``Ok(value)`` if no error was reported, ``Err((value, error))`` otherwise
        """
        match self.status:
            case Err(error):
                return Err((self.value, error))
        return Ok(self.value)

    # ------------------------------------------------------------------
    # Reference projection
    # ------------------------------------------------------------------

    def as_ref(self) -> "Outcome[T, E]":
        """Project onto a new outcome that shares this one's value and error.

        The projection can be consumed with any operation while this outcome
        stays intact.
        """
        return Outcome(self.value, self.status)

    def as_mut(self) -> "Outcome[Slot[T], Slot[E]]":
        """Project onto an outcome of write-through slots.

        Setting the value slot replaces ``self.value``; setting the error slot
        replaces the error in ``self.status``. The status kind itself cannot be
        changed through the projection.

        Once the status of this outcome is set back to ``OK``, reading the
        error slot raises UnwrapError.
        """

        def get_value() -> T:
            return self.value

        def set_value(value: T) -> None:
            self.value = value

        def get_error() -> E:
            match self.status:
                case Err(error):
                    return error
            panic(UnwrapError, "error slot read after the outcome's error was cleared", self.status)

        def set_error(error: E) -> None:
            self.status = Err(error)

        value_slot = Slot(get_value, set_value)
        if self.is_ok():
            return Outcome(value_slot)
        return Outcome(value_slot, Err(Slot(get_error, set_error)))

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    def map(self, func: Callable[[T], U]) -> "Outcome[U, E]":
        """Transform the value, whatever the status.

        Unlike ``Result.map`` this never skips ``func``: the value exists even
        when an error was reported. The status passes through untouched.
        """
        return Outcome(func(self.value), self.status)

    def map_err(self, func: Callable[[E], F]) -> "Outcome[T, F]":
        """Transform the error if one was reported; the value passes through."""
        return Outcome(self.value, self.status.map_err(func))

    # ------------------------------------------------------------------
    # Panicking convenience
    # ------------------------------------------------------------------

    def expect(self, message: str) -> T:
        """Get the value, raising if an error was reported.

        Args:
            message: Text to lead the diagnostic with

        Returns:
            The value

        Raises:
            ExpectError: If an error was reported; the diagnostic is
                ``message`` followed by the repr of the error
        """
        self.status.expect(message)
        return self.value

    def unwrap(self) -> T:
        """Get the value, raising if an error was reported.

        Raises:
            UnwrapError: If an error was reported; the diagnostic is built
                from the repr of the error
        """
        match self.status:
            case Err(error):
                panic(UnwrapError, "called `Outcome.unwrap()` on an outcome with an error", error)
        return self.value

    def expect_err(self, message: str) -> E:
        """Get the error, raising if none was reported.

        Raises:
            ExpectError: If no error was reported; the diagnostic is
                ``message`` followed by the repr of the value
        """
        return self.not_fine().expect_err(message)

    def unwrap_err(self) -> E:
        """Get the error, raising if none was reported.

        Raises:
            UnwrapError: If no error was reported; the diagnostic includes
                the repr of the value
        """
        return self.not_fine().unwrap_err()

    # ------------------------------------------------------------------
    # Dereference projection
    # ------------------------------------------------------------------

    def as_deref(self: "Outcome[Deref[U], E]") -> "Outcome[U, E]":
        """Like ``as_ref``, with the value dereferenced to its target."""
        return self.as_ref().map(lambda value: value.deref())

    def as_deref_mut(self: "Outcome[DerefMut[U], E]") -> "Outcome[U, Slot[E]]":
        """Like ``as_mut``, with the value dereferenced to its target for mutation."""
        return self.as_mut().map(lambda slot: slot.get().deref_mut())

    # ------------------------------------------------------------------
    # Nesting
    # ------------------------------------------------------------------

    def transpose(self: "Outcome[Outcome[T, E0], E1]") -> "Outcome[Outcome[T, E1], E0]":
        """Swap the statuses of a nested outcome without inspecting either.

        ``Outcome(Outcome(v, s0), s1)`` becomes ``Outcome(Outcome(v, s1), s0)``.
        Applying it twice gives back an equal outcome.
        """
        inner = self.value
        return Outcome(Outcome(inner.value, self.status), inner.status)

    def __repr__(self) -> str:
        return f"Outcome({self.value!r}, {self.status!r})"
