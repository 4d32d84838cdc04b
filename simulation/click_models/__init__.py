"""Click models for user behavior simulation.

This module provides click model implementations:
- PositionBasedModel: P(click) = P(examine|pos) * P(click|rel)
- CascadeModel: Click first relevant posting, then stop
"""

from simulation.click_models.pbm import PositionBasedModel
from simulation.click_models.cascade import CascadeModel

__all__ = [
    "PositionBasedModel",
    "CascadeModel",
]
