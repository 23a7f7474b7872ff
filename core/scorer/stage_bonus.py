#!/usr/bin/env python3
"""
Stage bonus (0-20 points).

Earlier-stage startups need more generalist help, so they earn a larger
bonus. The per-stage values come from ScorerConfig.stage_bonus, which is
validated to be non-increasing with maturity.
"""

from core.config_loader import ScorerConfig
from core.errors import InputError
from core.scorer.models import MAX_STAGE_BONUS


def calculate_stage_bonus(stage: str, config: ScorerConfig) -> int:
    try:
        bonus = config.stage_bonus[stage]
    except KeyError:
        raise InputError(f"Unknown startup stage: {stage!r}") from None
    return max(0, min(MAX_STAGE_BONUS, int(bonus)))
