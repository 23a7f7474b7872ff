"""
Match store synchronization.

- MatchStoreSynchronizer: per-pair idempotent upsert of match records
- SyncReport / PairResult: batch outcome
"""

from core.sync.models import (
    PairResult,
    SyncReport,
    STATUS_CREATED,
    STATUS_UPDATED,
    STATUS_UNCHANGED,
    STATUS_FAILED,
)
from core.sync.synchronizer import MatchStoreSynchronizer, store_retrying

__all__ = [
    'MatchStoreSynchronizer',
    'store_retrying',
    'PairResult',
    'SyncReport',
    'STATUS_CREATED',
    'STATUS_UPDATED',
    'STATUS_UNCHANGED',
    'STATUS_FAILED',
]
