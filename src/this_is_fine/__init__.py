"""
this-is-fine: results that keep their value when something went wrong.

An ``Outcome`` is a value that is always produced, plus a status that may
carry a non-fatal error. See ``this_is_fine.domain.outcome`` for the
operation set and ``this_is_fine.prelude`` for the one-import surface.
"""

from this_is_fine.prelude import (
    OK,
    Deref,
    DerefMut,
    Err,
    ExpectError,
    Ok,
    Outcome,
    OutcomeError,
    Result,
    Slot,
    UnwrapError,
)

__version__ = "0.1.0"

__all__ = [
    "Outcome",
    "Ok",
    "Err",
    "Result",
    "OK",
    "Slot",
    "Deref",
    "DerefMut",
    "OutcomeError",
    "UnwrapError",
    "ExpectError",
]
