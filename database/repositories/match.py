import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from database.models import MatchRecord
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

SCORE_FIELDS = ('score', 'skill_points', 'industry_points', 'stage_bonus')


def _ranking_order():
    """Score desc, most recently computed first, then id for a total order."""
    return (
        MatchRecord.score.desc(),
        MatchRecord.calculated_at.desc(),
        MatchRecord.id.asc(),
    )


class MatchRepository(BaseRepository):
    def get_by_pair(self, talent_id: Any, startup_id: Any) -> Optional[MatchRecord]:
        stmt = select(MatchRecord).where(
            MatchRecord.talent_id == talent_id,
            MatchRecord.startup_id == startup_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def insert_match(
        self,
        talent_id: Any,
        startup_id: Any,
        values: Dict[str, int],
        now: datetime
    ) -> MatchRecord:
        """Insert a new record; flushes so a duplicate pair fails here."""
        record = MatchRecord(
            talent_id=talent_id,
            startup_id=startup_id,
            created_at=now,
            updated_at=now,
            calculated_at=now,
            **{field: values[field] for field in SCORE_FIELDS}
        )
        self.db.add(record)
        self.flush()
        return record

    def update_match(self, record: MatchRecord, values: Dict[str, int], now: datetime) -> MatchRecord:
        for field in SCORE_FIELDS:
            setattr(record, field, values[field])
        record.updated_at = now
        record.calculated_at = now
        self.flush()
        return record

    def list_for_talent(self, talent_id: Any, limit: int) -> List[MatchRecord]:
        stmt = (
            select(MatchRecord)
            .options(joinedload(MatchRecord.startup))
            .where(MatchRecord.talent_id == talent_id)
            .order_by(*_ranking_order())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def list_for_startups(self, startup_ids: Iterable[Any], limit: int) -> List[MatchRecord]:
        ids = list(startup_ids)
        if not ids:
            return []

        stmt = (
            select(MatchRecord)
            .options(joinedload(MatchRecord.talent), joinedload(MatchRecord.startup))
            .where(MatchRecord.startup_id.in_(ids))
            .order_by(*_ranking_order())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def matched_startup_ids(self, talent_id: Any) -> List[Any]:
        stmt = select(MatchRecord.startup_id).where(MatchRecord.talent_id == talent_id)
        return list(self.db.execute(stmt).scalars().all())

    def matched_talent_ids(self, startup_id: Any) -> List[Any]:
        stmt = select(MatchRecord.talent_id).where(MatchRecord.startup_id == startup_id)
        return list(self.db.execute(stmt).scalars().all())
