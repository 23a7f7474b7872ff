#!/usr/bin/env python3
"""
Startup endpoints - skill gap analysis for a founder's startup.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query

from core.ranking import RankingService, Viewer
from ..dependencies import get_ranking_service, get_viewer
from ..models.responses import SkillGapResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/startups", tags=["startups"])


@router.get("/{startup_id}/skill-gap", response_model=SkillGapResponse)
def get_skill_gap(
    startup_id: str,
    team_skill: List[str] = Query(default=[], description="Skills the current team already has (repeatable)"),
    viewer: Viewer = Depends(get_viewer),
    service: RankingService = Depends(get_ranking_service)
):
    """
    Get the sought skills the startup's team still lacks.

    Sought skills are the posting's explicit skills, or the stage defaults
    when it lists none.
    """
    analysis = service.get_skill_gap(viewer, startup_id, team_skill)
    return SkillGapResponse.from_analysis(startup_id, analysis)
