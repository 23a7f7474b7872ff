#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from dataclasses import dataclass, asdict
from typing import Dict

MAX_SKILL_POINTS = 50
MAX_INDUSTRY_POINTS = 30
MAX_STAGE_BONUS = 20


@dataclass(frozen=True)
class MatchScore:
    """Score for one talent/startup pair with its component breakdown.

    score == skill_points + industry_points + stage_bonus, 0 <= score <= 100.
    """
    score: int
    skill_points: int
    industry_points: int
    stage_bonus: int

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class PairScore:
    """A computed score addressed to its (talent, startup) pair."""
    talent_id: str
    startup_id: str
    breakdown: MatchScore

    @property
    def score(self) -> int:
        return self.breakdown.score
