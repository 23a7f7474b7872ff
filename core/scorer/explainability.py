#!/usr/bin/env python3
"""
Explainability Module - why a talent/startup pair scored what it did.

Breaks a MatchScore down into the concrete evidence behind each component:
- skills: which sought skills the talent holds, which are missing, and
  whether the sought list was explicit or derived from the stage
- industry: the tier reached and the terms that triggered it
- stage: the startup's stage and the bonus it earns
"""

from typing import Any, Dict, Optional
import logging

from core.scorer.dto import TalentProfileDTO, StartupPostingDTO
from core.scorer.industry_score import detect_industry_signal
from core.scorer.service import ScoringService, resolve_sought_skills
from core.scorer.skill_score import normalize_skills, skill_overlap
from database.models import skill_key

logger = logging.getLogger(__name__)


def explain_match(
    talent: TalentProfileDTO,
    startup: StartupPostingDTO,
    scorer: Optional[ScoringService] = None
) -> Dict[str, Any]:
    """
    Build an explanation for one pair.

    Returns:
        Dict with 'score' (the breakdown) and 'skills', 'industry', 'stage'
        evidence sections.
    """
    scorer = scorer or ScoringService()
    breakdown = scorer.score(talent, startup)

    sought, source = resolve_sought_skills(startup, scorer.config)
    talent_keys = normalize_skills(talent.skills)
    matched = [s for s in sought if skill_key(s) in talent_keys]
    missing = [s for s in sought if skill_key(s) not in talent_keys]
    overlap, denominator = skill_overlap(talent.skills, sought)

    signal = detect_industry_signal(startup.industry, talent.bio, talent.skills, scorer.keyword_table)

    return {
        'score': breakdown.as_dict(),
        'skills': {
            'sought_skills': list(sought),
            'sought_source': source,
            'matched_skills': matched,
            'missing_skills': missing,
            'overlap': overlap,
            'denominator': denominator,
            'points': breakdown.skill_points,
        },
        'industry': {
            'industry': startup.industry,
            'tier': signal.tier,
            'matched_terms': list(signal.matched_terms),
            'points': breakdown.industry_points,
        },
        'stage': {
            'stage': startup.stage,
            'points': breakdown.stage_bonus,
        },
    }
