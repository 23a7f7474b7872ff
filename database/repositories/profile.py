import logging
from typing import Any, Iterable, List, Optional

from sqlalchemy import select, or_

from database.models import TalentProfile, TalentSkill, skill_key
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class TalentRepository(BaseRepository):
    def get_talent_profile(self, talent_id: Any) -> Optional[TalentProfile]:
        stmt = select(TalentProfile).where(TalentProfile.id == talent_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_talent_profiles(self, talent_ids: Iterable[Any]) -> List[TalentProfile]:
        ids = list(talent_ids)
        if not ids:
            return []
        stmt = select(TalentProfile).where(TalentProfile.id.in_(ids))
        return list(self.db.execute(stmt).scalars().all())

    def find_talents_with_skills(self, skills: Iterable[str], limit: int = 500) -> List[TalentProfile]:
        """Talents holding at least one of the given skills (case-insensitive)."""
        keys = {skill_key(s) for s in skills if s and s.strip()}
        if not keys:
            return []

        with_skill = select(TalentSkill.talent_id).where(TalentSkill.skill_key.in_(keys))
        stmt = (
            select(TalentProfile)
            .where(TalentProfile.id.in_(with_skill))
            .order_by(TalentProfile.id)
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def find_talents_mentioning(self, terms: Iterable[str], limit: int = 500) -> List[TalentProfile]:
        """Talents whose bio contains any of the terms (substring, case-insensitive)."""
        conditions = [TalentProfile.bio.ilike(f"%{t}%") for t in terms if t and t.strip()]
        if not conditions:
            return []

        stmt = (
            select(TalentProfile)
            .where(or_(*conditions))
            .order_by(TalentProfile.id)
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def create_talent_profile(
        self,
        skills: Iterable[str] = (),
        bio: Optional[str] = None,
        display_name: Optional[str] = None,
        availability: str = 'full_time',
        commitment: str = 'employee',
        talent_id: Any = None,
    ) -> TalentProfile:
        talent = TalentProfile(
            display_name=display_name,
            bio=bio,
            availability=availability,
            commitment=commitment,
        )
        if talent_id is not None:
            talent.id = talent_id
        talent.set_skills(skills)
        self.db.add(talent)
        self.flush()  # Generate ID
        logger.debug(f"Created talent profile {talent.id} with {len(talent.skill_tags)} skills")
        return talent
