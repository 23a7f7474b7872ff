#!/usr/bin/env python3
"""
Match Store Synchronizer - the only writer of match records.

For each scored pair:
- no record -> insert
- record with a different score or breakdown -> update in place
  (breakdown, updated_at, calculated_at)
- identical record -> no write

Each pair runs in its own unit of work, so a failure rolls back that pair
only. An insert that loses a race to a concurrent writer hits the unique
constraint; the pair is then retried and takes the update path.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from core.config_loader import SyncConfig
from core.errors import ConflictError, InputError, StoreUnavailable
from core.scorer.models import PairScore
from core.sync.models import (
    PairResult,
    SyncReport,
    STATUS_CREATED,
    STATUS_UPDATED,
    STATUS_UNCHANGED,
    STATUS_FAILED,
)
from core.utils import parse_id
from database.repository import MatchEngineRepository
from database.repositories.match import SCORE_FIELDS
from database.uow import match_uow

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def store_retrying(config: SyncConfig) -> Retrying:
    """Backoff policy for store writes and the loads that feed them."""
    return Retrying(
        retry=retry_if_exception_type(StoreUnavailable),
        stop=stop_after_attempt(config.max_store_attempts),
        wait=wait_exponential(
            multiplier=config.backoff_min_seconds,
            min=config.backoff_min_seconds,
            max=config.backoff_max_seconds,
        ),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


class MatchStoreSynchronizer:
    """Applies PairScores to the match store with per-pair atomicity."""

    def __init__(
        self,
        config: Optional[SyncConfig] = None,
        session_factory: Optional[Callable[[], Session]] = None,
        clock: Callable[[], datetime] = _utcnow
    ):
        self.config = config or SyncConfig()
        self.session_factory = session_factory
        self.clock = clock

    def upsert(self, pair_scores: Iterable[PairScore]) -> SyncReport:
        """Write every pair; never raises for a single pair's failure.

        Returns:
            SyncReport with one result per pair, in input order.
        """
        report = SyncReport()
        for pair in pair_scores:
            report.results.append(self.sync_pair(pair))

        counts = report.counts()
        if counts[STATUS_FAILED]:
            logger.warning(f"Match sync finished with failures: {counts}")
        else:
            logger.info(f"Match sync finished: {counts}")
        return report

    def sync_pair(self, pair: PairScore) -> PairResult:
        try:
            status = store_retrying(self.config)(self._apply_with_conflict_retry, pair)
        except (InputError, ConflictError, StoreUnavailable, SQLAlchemyError) as e:
            logger.error(f"Failed to sync talent {pair.talent_id} / startup {pair.startup_id}: {e}")
            return PairResult(
                talent_id=str(pair.talent_id),
                startup_id=str(pair.startup_id),
                status=STATUS_FAILED,
                score=pair.score,
                error=str(e),
                error_type=type(e).__name__,
            )

        return PairResult(
            talent_id=str(pair.talent_id),
            startup_id=str(pair.startup_id),
            status=status,
            score=pair.score,
        )

    def _apply_with_conflict_retry(self, pair: PairScore) -> str:
        talent_id = parse_id(pair.talent_id, "talent id")
        startup_id = parse_id(pair.startup_id, "startup id")
        values = pair.breakdown.as_dict()

        attempts = 0
        while True:
            attempts += 1
            try:
                with match_uow(self.session_factory) as repo:
                    return self._write(repo, talent_id, startup_id, values)
            except IntegrityError as e:
                if attempts > self.config.max_conflict_retries:
                    raise ConflictError(pair.talent_id, pair.startup_id, attempts) from e
                logger.info(
                    f"Insert race on talent {pair.talent_id} / startup {pair.startup_id} "
                    f"(attempt {attempts}), retrying as update"
                )

    def _write(self, repo: MatchEngineRepository, talent_id, startup_id, values) -> str:
        record = repo.matches.get_by_pair(talent_id, startup_id)
        now = self.clock()

        if record is None:
            repo.matches.insert_match(talent_id, startup_id, values, now)
            return STATUS_CREATED

        if all(getattr(record, f) == values[f] for f in SCORE_FIELDS):
            return STATUS_UNCHANGED

        repo.matches.update_match(record, values, now)
        return STATUS_UPDATED
