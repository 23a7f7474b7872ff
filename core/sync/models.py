"""Per-pair outcomes of a synchronizer run."""

from collections import Counter
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from core.errors import PartialBatchFailure

STATUS_CREATED = 'created'
STATUS_UPDATED = 'updated'
STATUS_UNCHANGED = 'unchanged'
STATUS_FAILED = 'failed'


@dataclass
class PairResult:
    talent_id: str
    startup_id: str
    status: str
    score: Optional[int] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SyncReport:
    """Outcome of one upsert batch, one PairResult per input pair in input order."""
    results: List[PairResult] = field(default_factory=list)

    def _with_status(self, status: str) -> List[PairResult]:
        return [r for r in self.results if r.status == status]

    @property
    def created(self) -> List[PairResult]:
        return self._with_status(STATUS_CREATED)

    @property
    def updated(self) -> List[PairResult]:
        return self._with_status(STATUS_UPDATED)

    @property
    def unchanged(self) -> List[PairResult]:
        return self._with_status(STATUS_UNCHANGED)

    @property
    def failed(self) -> List[PairResult]:
        return self._with_status(STATUS_FAILED)

    @property
    def ok(self) -> bool:
        return not self.failed

    def counts(self) -> Dict[str, int]:
        counter = Counter(r.status for r in self.results)
        return {
            status: counter.get(status, 0)
            for status in (STATUS_CREATED, STATUS_UPDATED, STATUS_UNCHANGED, STATUS_FAILED)
        }

    def extend(self, other: 'SyncReport') -> 'SyncReport':
        self.results.extend(other.results)
        return self

    def raise_for_failures(self) -> None:
        """Raise PartialBatchFailure if any pair failed."""
        if self.failed:
            raise PartialBatchFailure(list(self.results))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total': len(self.results),
            'counts': self.counts(),
            'results': [r.to_dict() for r in self.results],
        }
