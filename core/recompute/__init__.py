"""
Match recomputation.

- RecomputeService: explicit and scoped recompute entry points
- ChangeFeedAdapter / ChangeEvent: push-feed wiring onto RecomputeService
"""

from core.recompute.service import RecomputeService
from core.recompute.change_feed import ChangeEvent, ChangeFeedAdapter, ChangeOutcome, SCORING_FIELDS

__all__ = [
    'RecomputeService',
    'ChangeEvent',
    'ChangeFeedAdapter',
    'ChangeOutcome',
    'SCORING_FIELDS',
]
