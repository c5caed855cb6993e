"""
Domain layer module.

This module contains the partial-failure Outcome and what it builds on.

Key components:
- outcome.py: the Outcome type and its operation set
- protocols.py: capability protocols gating the dereference projections
- views.py: write-through slots returned by mutable projection
"""

from this_is_fine.domain.outcome import Outcome
from this_is_fine.domain.protocols import Deref, DerefMut
from this_is_fine.domain.views import Slot

__all__ = ["Outcome", "Deref", "DerefMut", "Slot"]
