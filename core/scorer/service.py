#!/usr/bin/env python3
"""
Scoring Service - compatibility score between a talent and a startup.

score = skill alignment (0-50) + industry relevance (0-30) + stage bonus (0-20)

The scoring function is pure: no I/O, no clock, no randomness. Identical
inputs always give identical output.
"""

from typing import Iterable, List, Optional, Tuple
import logging

from core.config_loader import ScorerConfig
from core.errors import InputError
from database.models import INDUSTRIES

from core.scorer.dto import TalentProfileDTO, StartupPostingDTO
from core.scorer.models import MatchScore, PairScore
from core.scorer.policy import STAGE_SKILLS, build_keyword_table
from core.scorer.skill_score import calculate_skill_points
from core.scorer.industry_score import detect_industry_signal, points_for_signal
from core.scorer.stage_bonus import calculate_stage_bonus

logger = logging.getLogger(__name__)


def _validate(talent: TalentProfileDTO, startup: StartupPostingDTO) -> None:
    if talent is None or not getattr(talent, 'id', None):
        raise InputError("Talent profile is missing an id")
    if startup is None or not getattr(startup, 'id', None):
        raise InputError("Startup posting is missing an id")
    if startup.industry not in INDUSTRIES:
        raise InputError(f"Unknown industry for startup {startup.id}: {startup.industry!r}")


def resolve_sought_skills(startup: StartupPostingDTO, config: ScorerConfig) -> Tuple[Tuple[str, ...], str]:
    """Return (sought skills, source) where source is 'explicit', 'stage' or 'none'."""
    if startup.skills:
        return tuple(startup.skills), 'explicit'
    if config.derive_skills_from_stage and startup.stage in STAGE_SKILLS:
        return STAGE_SKILLS[startup.stage], 'stage'
    return (), 'none'


class ScoringService:
    """
    Computes MatchScore values from talent/startup snapshots.

    Holds the policy config and the merged industry keyword table so the
    table is built once per service rather than per pair.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()
        self.keyword_table = build_keyword_table(self.config.extra_industry_keywords)

    def score(self, talent: TalentProfileDTO, startup: StartupPostingDTO) -> MatchScore:
        """Score one pair.

        Raises:
            InputError: missing identity, unknown industry or stage.
        """
        _validate(talent, startup)

        sought, _ = resolve_sought_skills(startup, self.config)
        skill_points = calculate_skill_points(talent.skills, sought)

        signal = detect_industry_signal(startup.industry, talent.bio, talent.skills, self.keyword_table)
        industry_points = points_for_signal(signal, self.config)

        stage_bonus = calculate_stage_bonus(startup.stage, self.config)

        total = max(0, min(100, skill_points + industry_points + stage_bonus))

        logger.debug(
            f"Talent {talent.id} x startup {startup.id}: "
            f"skills={skill_points}, industry={industry_points} ({signal.tier}), "
            f"stage={stage_bonus}, total={total}"
        )

        return MatchScore(
            score=total,
            skill_points=skill_points,
            industry_points=industry_points,
            stage_bonus=stage_bonus,
        )

    def score_pairs(
        self,
        talents: Iterable[TalentProfileDTO],
        startups: Iterable[StartupPostingDTO]
    ) -> List[PairScore]:
        """Score the cross-product of talents and startups."""
        startups = list(startups)
        results = []
        for talent in talents:
            for startup in startups:
                results.append(PairScore(
                    talent_id=talent.id,
                    startup_id=startup.id,
                    breakdown=self.score(talent, startup),
                ))
        return results


def score(
    talent: TalentProfileDTO,
    startup: StartupPostingDTO,
    config: Optional[ScorerConfig] = None
) -> MatchScore:
    """Convenience wrapper around ScoringService.score."""
    return ScoringService(config).score(talent, startup)
