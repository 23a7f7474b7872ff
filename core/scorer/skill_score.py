#!/usr/bin/env python3
"""
Skill alignment (0-50 points).

Points are proportional to the overlap between the talent's skills and the
startup's sought skills, normalised against the larger of the two sets:

    skill_points = round_half_up(50 * |T & S| / max(|T|, |S|))

Exact tag equality only, compared case-insensitively. An empty set on
either side yields 0.
"""

from typing import Iterable, Set, Tuple

from database.models import skill_key
from core.scorer.models import MAX_SKILL_POINTS


def normalize_skills(skills: Iterable[str]) -> Set[str]:
    return {skill_key(s) for s in skills if s and s.strip()}


def skill_overlap(talent_skills: Iterable[str], sought_skills: Iterable[str]) -> Tuple[int, int]:
    """Return (overlap size, normalising denominator)."""
    talent = normalize_skills(talent_skills)
    sought = normalize_skills(sought_skills)
    if not talent or not sought:
        return 0, 0
    return len(talent & sought), max(len(talent), len(sought))


def calculate_skill_points(talent_skills: Iterable[str], sought_skills: Iterable[str]) -> int:
    overlap, denominator = skill_overlap(talent_skills, sought_skills)
    if denominator == 0:
        return 0
    # Integer half-up rounding: 1 of 4 skills is 13 points, not 12
    return min(MAX_SKILL_POINTS, (2 * MAX_SKILL_POINTS * overlap + denominator) // (2 * denominator))
