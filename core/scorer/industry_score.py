#!/usr/bin/env python3
"""
Industry relevance (0-30 points).

Tiered:
- direct: the industry's own name appears in the bio or in a skill tag
- related: one of the industry's keywords appears in the bio or a skill tag
- none: 0 points

Terms match as whole words/phrases, case-insensitively, so "ai" does not
match inside "maintain".
"""

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, Mapping, Sequence, Tuple

from core.config_loader import ScorerConfig

TIER_DIRECT = 'direct'
TIER_RELATED = 'related'
TIER_NONE = 'none'


@dataclass(frozen=True)
class IndustrySignal:
    tier: str
    matched_terms: Tuple[str, ...] = field(default_factory=tuple)


@lru_cache(maxsize=1024)
def _term_pattern(term: str) -> re.Pattern:
    return re.compile(r'(?<!\w)' + re.escape(term.casefold()) + r'(?!\w)')


def _find_terms(terms: Iterable[str], haystacks: Sequence[str]) -> Tuple[str, ...]:
    found = []
    for term in terms:
        pattern = _term_pattern(term)
        if any(pattern.search(text) for text in haystacks):
            found.append(term)
    return tuple(found)


def detect_industry_signal(
    industry: str,
    bio: str,
    skills: Iterable[str],
    keyword_table: Mapping[str, Tuple[str, ...]]
) -> IndustrySignal:
    haystacks = [(bio or "").casefold()] + [s.casefold() for s in skills if s]

    if industry != 'Other':
        direct = _find_terms([industry], haystacks)
        if direct:
            return IndustrySignal(TIER_DIRECT, direct)

    related = _find_terms(keyword_table.get(industry, ()), haystacks)
    if related:
        return IndustrySignal(TIER_RELATED, related)

    return IndustrySignal(TIER_NONE)


def points_for_signal(signal: IndustrySignal, config: ScorerConfig) -> int:
    if signal.tier == TIER_DIRECT:
        return config.industry_direct_points
    if signal.tier == TIER_RELATED:
        return config.industry_related_points
    return 0
