"""Everything needed to produce and consume outcomes, in one import.

Usage:
    from this_is_fine.prelude import *
"""

from this_is_fine.domain import Deref, DerefMut, Outcome, Slot
from this_is_fine.shared import OK, Err, ExpectError, Ok, OutcomeError, Result, UnwrapError

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
