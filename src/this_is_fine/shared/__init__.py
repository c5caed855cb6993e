"""
Shared utilities module.

This module contains the pieces used across the package: the strict Result
type, the exception hierarchy raised by unwrapping, settings and logging.
"""

from this_is_fine.shared.exceptions import ExpectError, OutcomeError, UnwrapError
from this_is_fine.shared.result import OK, Err, Ok, Result

__all__ = ["Ok", "Err", "Result", "OK", "OutcomeError", "UnwrapError", "ExpectError"]
