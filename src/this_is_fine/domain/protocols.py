"""Capability protocols for payload types.

Some Outcome operations exist only for payloads that can be dereferenced to
an inner target. These protocols state that capability structurally, so a
type checker gates the operations without any runtime type inspection.
"""

from typing import Protocol, TypeVar

Target_co = TypeVar("Target_co", covariant=True)
Target = TypeVar("Target")


class Deref(Protocol[Target_co]):
    """Protocol for values that can be read through to an inner target."""

    def deref(self) -> Target_co:
        """Return the inner target.

        Returns:
            The target this value points at (not a copy)
        """
        ...


class DerefMut(Protocol[Target]):
    """Protocol for values that can also hand out their target for mutation."""

    def deref(self) -> Target:
        """Return the inner target."""
        ...

    def deref_mut(self) -> Target:
        """Return the inner target for in-place mutation.

        Returns:
            The target this value points at; changes to it are visible
            through the value
        """
        ...
