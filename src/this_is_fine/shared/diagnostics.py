"""Formatting of payloads for panic diagnostics."""

from pydantic import ValidationError

from this_is_fine.shared.config import get_settings
from this_is_fine.shared.logging import get_logger

logger = get_logger(__name__)

TRUNCATION_MARKER = "..."


def _configured_max_length() -> int:
    """Read ``diagnostic_max_length``, falling back to unlimited on bad settings."""
    try:
        return get_settings().diagnostic_max_length
    except ValidationError as e:
        logger.warning("Invalid THIS_IS_FINE_* settings, diagnostics left untruncated: %s", e)
        return 0


def format_payload(payload: object, max_length: int | None = None) -> str:
    """Render a payload for inclusion in a diagnostic message.

    Args:
        payload: Value or error to render
        max_length: Maximum length of the rendered ``repr`` (0 = unlimited).
            Defaults to the ``diagnostic_max_length`` setting; invalid
            settings never stop a diagnostic from being rendered.

    Returns:
        ``repr(payload)``, truncated and suffixed with ``...`` when too long
    """
    if max_length is None:
        max_length = _configured_max_length()

    text = repr(payload)
    if max_length and len(text) > max_length:
        return text[:max_length] + TRUNCATION_MARKER
    return text
