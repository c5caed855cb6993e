"""Test configuration and fixtures.

Provides:
- Settings cache isolation between tests
- Sample outcomes covering both statuses
"""

from collections.abc import Iterator

import pytest

from this_is_fine.domain.outcome import Outcome
from this_is_fine.shared.config import get_settings
from this_is_fine.shared.result import Err


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Re-read settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# Sample Outcomes
# ============================================================================


@pytest.fixture
def fine_outcome() -> Outcome[list[int], str]:
    """Outcome whose status reports no error."""
    return Outcome([1, 2, 3])


@pytest.fixture
def partial_outcome() -> Outcome[list[int], str]:
    """Outcome that carries a value and an error."""
    return Outcome([1, 2], Err("line 3 skipped"))
