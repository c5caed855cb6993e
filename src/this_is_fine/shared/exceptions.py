"""
Exception hierarchy.

The core never raises: carried errors live in the status of an Outcome as
plain values. The exceptions below are raised only by the panicking
convenience operations (``unwrap``, ``expect``, ``unwrap_err``,
``expect_err``) when the caller asked for the payload that is not there.
"""

from typing import Any, NoReturn

from this_is_fine.shared.diagnostics import format_payload
from this_is_fine.shared.logging import get_logger

logger = get_logger(__name__)


class OutcomeError(Exception):
    """
    Base exception for all errors raised by this package.

    Catching it catches every failed unwrap, whether it came from an
    Outcome or from a strict result.
    """

    pass


class UnwrapError(OutcomeError):
    """
    Exception raised when an unwrapping operation finds the wrong variant.

    The diagnostic combines a fixed description of the failed call with the
    ``repr`` of the payload that was found instead.

    Attributes:
        message: Description of the failed call
        payload: The value or error found instead of the requested one
        rendered_payload: ``repr`` of the payload as shown in the diagnostic
    """

    def __init__(self, message: str, payload: Any) -> None:
        """
        Initialize UnwrapError.

        Args:
            message: Description of the failed call
            payload: The value or error found instead of the requested one
        """
        super().__init__(message)
        self.message = message
        self.payload = payload
        self.rendered_payload = format_payload(payload)

    def __str__(self) -> str:
        """Return the message followed by the formatted payload."""
        return f"{self.message}: {self.rendered_payload}"


class ExpectError(UnwrapError):
    """
    Exception raised by ``expect`` and ``expect_err``.

    Same shape as UnwrapError, but ``message`` is the caller's own text.
    """

    pass


def panic(error_type: type[UnwrapError], message: str, payload: Any) -> NoReturn:
    """
    Raise ``error_type`` for ``payload``.

    When the payload is itself an exception it becomes the ``__cause__`` of
    the raised error, so the original traceback is kept.

    Args:
        error_type: UnwrapError or a subclass
        message: Description of the failed call, or the caller's message
        payload: The value or error found instead of the requested one

    Raises:
        UnwrapError: Always
    """
    error = error_type(message, payload)
    logger.debug("%s raised: %s", error_type.__name__, error)
    if isinstance(payload, BaseException):
        raise error from payload
    raise error
