"""
Ranked match queries.

- RankingService: talent/founder match lists and per-pair breakdowns
- Viewer: explicit (viewer_id, viewer_role) context for every read
"""

from core.ranking.models import (
    Viewer,
    RankedMatch,
    StartupSummary,
    TalentSummary,
    StartupMatchGroup,
    FounderMatches,
    MatchBreakdown,
    ROLE_TALENT,
    ROLE_FOUNDER,
)
from core.ranking.service import RankingService, validate_limit

__all__ = [
    'RankingService',
    'validate_limit',
    'Viewer',
    'RankedMatch',
    'StartupSummary',
    'TalentSummary',
    'StartupMatchGroup',
    'FounderMatches',
    'MatchBreakdown',
    'ROLE_TALENT',
    'ROLE_FOUNDER',
]
