"""Write-through views onto the fields of an Outcome."""

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Slot(Generic[T]):
    """Mutable handle on one field of an Outcome.

    Returned by ``Outcome.as_mut``. Reading goes to the field as it is now,
    and ``set`` replaces the field in the Outcome the slot was taken from.
    A Slot implements ``DerefMut``, so ``as_deref`` works on a mutable
    projection too.
    """

    __slots__ = ("_getter", "_setter")

    def __init__(self, getter: Callable[[], T], setter: Callable[[T], None]) -> None:
        self._getter = getter
        self._setter = setter

    def get(self) -> T:
        """Read the current field value."""
        return self._getter()

    def set(self, value: T) -> None:
        """Replace the field value in the underlying Outcome."""
        self._setter(value)

    def deref(self) -> T:
        """Return the current field value as the dereference target."""
        return self._getter()

    def deref_mut(self) -> T:
        """Return the current field value for in-place mutation."""
        return self._getter()

    def __repr__(self) -> str:
        return f"Slot({self._getter()!r})"
