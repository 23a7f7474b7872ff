#!/usr/bin/env python3
"""
Scoring Module - talent/startup compatibility scoring.

Public API:
- ScoringService: pure scoring function holder (policy config + keyword table)
- score: convenience wrapper for one pair
- MatchScore / PairScore: score results
- TalentProfileDTO / StartupPostingDTO: scoring inputs

Modules:
- dto.py: plain snapshots of profiles and postings
- models.py: MatchScore, PairScore and the component maxima
- policy.py: stage skill table and industry keyword table
- skill_score.py: skill alignment (0-50)
- industry_score.py: industry relevance (0-30)
- stage_bonus.py: stage bonus (0-20)
- service.py: ScoringService orchestrator
- explainability.py: per-component evidence for one pair
- skill_gap.py: sought skills a startup team still lacks
"""

from core.scorer.dto import TalentProfileDTO, StartupPostingDTO
from core.scorer.models import MatchScore, PairScore
from core.scorer.service import ScoringService, score

__all__ = [
    'ScoringService',
    'score',
    'MatchScore',
    'PairScore',
    'TalentProfileDTO',
    'StartupPostingDTO',
]
