import uuid
from typing import Iterable, List

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Uuid, CheckConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base
from .vocab import INDUSTRIES, STAGES, dedupe_skills, sql_in


class StartupPosting(Base):
    """
    A founder's startup posting as read by the match engine.

    Sought skills are optional; when absent the scorer can derive them
    from the stage.
    """
    __tablename__ = 'startup_posting'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    founder_id = Column(Uuid(as_uuid=True), nullable=False)

    name = Column(Text, nullable=False)
    description = Column(Text)
    industry = Column(Text, nullable=False)
    stage = Column(Text, nullable=False, default='idea')  # idea|mvp|early_stage|growth|scaling

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    skill_tags = relationship(
        "StartupSkill",
        back_populates="startup",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="StartupSkill.skill_key",
    )
    matches = relationship("MatchRecord", back_populates="startup", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        CheckConstraint(sql_in('stage', STAGES), name='ck_startup_stage'),
        CheckConstraint(sql_in('industry', INDUSTRIES), name='ck_startup_industry'),
        Index('idx_startup_founder', 'founder_id'),
        Index('idx_startup_industry', 'industry'),
    )

    @property
    def skills(self) -> List[str]:
        return [tag.skill for tag in self.skill_tags]

    def set_skills(self, skills: Iterable[str]) -> None:
        seen = dedupe_skills(skills)
        existing = {tag.skill_key: tag for tag in self.skill_tags}
        self.skill_tags = [
            existing.get(key) or StartupSkill(skill=value, skill_key=key)
            for key, value in seen.items()
        ]


class StartupSkill(Base):
    """One sought skill of a startup posting."""
    __tablename__ = 'startup_skill'

    startup_id = Column(Uuid(as_uuid=True), ForeignKey('startup_posting.id', ondelete='CASCADE'), primary_key=True)
    skill_key = Column(Text, primary_key=True)
    skill = Column(Text, nullable=False)

    startup = relationship("StartupPosting", back_populates="skill_tags")

    __table_args__ = (
        Index('idx_startup_skill_key', 'skill_key'),
    )
