import uuid

from sqlalchemy import Column, Integer, TIMESTAMP, ForeignKey, Uuid, UniqueConstraint, CheckConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class MatchRecord(Base):
    """
    Persisted score for one (talent, startup) pair.

    System-owned derived data: written only by the match store synchronizer.
    At most one row per pair (uq_match_record_pair), and the total always
    equals the sum of its components.
    """
    __tablename__ = 'match_record'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    startup_id = Column(Uuid(as_uuid=True), ForeignKey('startup_posting.id', ondelete='CASCADE'), nullable=False)
    talent_id = Column(Uuid(as_uuid=True), ForeignKey('talent_profile.id', ondelete='CASCADE'), nullable=False)

    score = Column(Integer, nullable=False)
    skill_points = Column(Integer, nullable=False, default=0)  # 0-50
    industry_points = Column(Integer, nullable=False, default=0)  # 0-30
    stage_bonus = Column(Integer, nullable=False, default=0)  # 0-20

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    # Set explicitly by the synchronizer so an unchanged recompute leaves it untouched
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    calculated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    startup = relationship("StartupPosting", back_populates="matches")
    talent = relationship("TalentProfile", back_populates="matches")

    __table_args__ = (
        UniqueConstraint('startup_id', 'talent_id', name='uq_match_record_pair'),
        CheckConstraint('score >= 0 AND score <= 100', name='ck_match_record_score_range'),
        CheckConstraint('skill_points >= 0 AND skill_points <= 50', name='ck_match_record_skill_points'),
        CheckConstraint('industry_points >= 0 AND industry_points <= 30', name='ck_match_record_industry_points'),
        CheckConstraint('stage_bonus >= 0 AND stage_bonus <= 20', name='ck_match_record_stage_bonus'),
        CheckConstraint('score = skill_points + industry_points + stage_bonus', name='ck_match_record_score_sum'),
        Index('idx_match_record_talent_rank', 'talent_id', 'score', 'calculated_at'),
        Index('idx_match_record_startup_rank', 'startup_id', 'score', 'calculated_at'),
    )
