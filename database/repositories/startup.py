import logging
from typing import Any, Iterable, List, Optional

from sqlalchemy import select, or_

from database.models import StartupPosting, StartupSkill, skill_key
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class StartupRepository(BaseRepository):
    def get_startup_posting(self, startup_id: Any) -> Optional[StartupPosting]:
        stmt = select(StartupPosting).where(StartupPosting.id == startup_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_startup_postings(self, startup_ids: Iterable[Any]) -> List[StartupPosting]:
        ids = list(startup_ids)
        if not ids:
            return []
        stmt = select(StartupPosting).where(StartupPosting.id.in_(ids))
        return list(self.db.execute(stmt).scalars().all())

    def list_startups_for_founder(self, founder_id: Any) -> List[StartupPosting]:
        stmt = (
            select(StartupPosting)
            .where(StartupPosting.founder_id == founder_id)
            .order_by(StartupPosting.created_at.desc(), StartupPosting.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def find_startups_for_talent(
        self,
        skills: Iterable[str],
        industries: Iterable[str] = (),
        stages: Iterable[str] = (),
        limit: int = 500
    ) -> List[StartupPosting]:
        """Startups seeking any of the skills, in any of the industries, or
        (for postings without explicit skills) in any of the stages."""
        keys = {skill_key(s) for s in skills if s and s.strip()}
        industries = list(industries)
        stages = list(stages)

        conditions = []
        if keys:
            seeking = select(StartupSkill.startup_id).where(StartupSkill.skill_key.in_(keys))
            conditions.append(StartupPosting.id.in_(seeking))
        if industries:
            conditions.append(StartupPosting.industry.in_(industries))
        if stages:
            with_any_skill = select(StartupSkill.startup_id)
            conditions.append(
                StartupPosting.stage.in_(stages) & StartupPosting.id.not_in(with_any_skill)
            )
        if not conditions:
            return []

        stmt = (
            select(StartupPosting)
            .where(or_(*conditions))
            .order_by(StartupPosting.id)
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def create_startup_posting(
        self,
        founder_id: Any,
        name: str,
        industry: str,
        stage: str,
        skills: Iterable[str] = (),
        description: Optional[str] = None,
        startup_id: Any = None,
    ) -> StartupPosting:
        startup = StartupPosting(
            founder_id=founder_id,
            name=name,
            description=description,
            industry=industry,
            stage=stage,
        )
        if startup_id is not None:
            startup.id = startup_id
        startup.set_skills(skills)
        self.db.add(startup)
        self.flush()
        logger.debug(f"Created startup posting {startup.id} ({industry}, {stage})")
        return startup
