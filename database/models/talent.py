import uuid
from typing import Iterable, List

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Uuid, CheckConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base
from .vocab import AVAILABILITY, COMMITMENT, dedupe_skills, sql_in


class TalentProfile(Base):
    """
    A talent user's profile as read by the match engine.

    Owned and edited by the talent; the engine only reads it.
    """
    __tablename__ = 'talent_profile'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    display_name = Column(Text)
    bio = Column(Text)
    availability = Column(Text, nullable=False, default='full_time')  # full_time|part_time|consulting|not_available
    commitment = Column(Text, nullable=False, default='employee')  # cofounder|employee|contractor|advisor

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    skill_tags = relationship(
        "TalentSkill",
        back_populates="talent",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="TalentSkill.skill_key",
    )
    matches = relationship("MatchRecord", back_populates="talent", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        CheckConstraint(sql_in('availability', AVAILABILITY), name='ck_talent_availability'),
        CheckConstraint(sql_in('commitment', COMMITMENT), name='ck_talent_commitment'),
    )

    @property
    def skills(self) -> List[str]:
        return [tag.skill for tag in self.skill_tags]

    def set_skills(self, skills: Iterable[str]) -> None:
        """Replace the skill set; duplicates differing only in case collapse to the first spelling."""
        seen = dedupe_skills(skills)
        existing = {tag.skill_key: tag for tag in self.skill_tags}
        self.skill_tags = [
            existing.get(key) or TalentSkill(skill=value, skill_key=key)
            for key, value in seen.items()
        ]


class TalentSkill(Base):
    """One skill tag of a talent profile, keyed case-insensitively."""
    __tablename__ = 'talent_skill'

    talent_id = Column(Uuid(as_uuid=True), ForeignKey('talent_profile.id', ondelete='CASCADE'), primary_key=True)
    skill_key = Column(Text, primary_key=True)
    skill = Column(Text, nullable=False)

    talent = relationship("TalentProfile", back_populates="skill_tags")

    __table_args__ = (
        Index('idx_talent_skill_key', 'skill_key'),
    )
