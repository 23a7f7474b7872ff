#!/usr/bin/env python3
"""
Match endpoints - ranked match lists and per-pair breakdowns.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.ranking import RankingService, Viewer
from ..dependencies import get_ranking_service, get_viewer
from ..models.responses import (
    FounderMatchesResponse,
    MatchBreakdownResponse,
    RankedMatchModel,
    StartupMatchGroupModel,
    TalentMatchesResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["matches"])


@router.get("/talent/{talent_id}/matches", response_model=TalentMatchesResponse)
def get_talent_matches(
    talent_id: str,
    limit: Optional[int] = Query(default=None, description="Maximum results to return (default 10)"),
    viewer: Viewer = Depends(get_viewer),
    service: RankingService = Depends(get_ranking_service)
):
    """
    Get a talent's matches, best first.

    Ties on score are broken by the most recently computed match.
    An empty list means the talent has no matches yet.
    """
    matches = service.list_matches_for_talent(viewer, talent_id, limit)
    return TalentMatchesResponse(
        success=True,
        count=len(matches),
        matches=[RankedMatchModel.from_ranked(m) for m in matches]
    )


@router.get("/founders/{founder_id}/matches", response_model=FounderMatchesResponse)
def get_founder_matches(
    founder_id: str,
    limit: Optional[int] = Query(default=None, description="Maximum results to return (default 20)"),
    viewer: Viewer = Depends(get_viewer),
    service: RankingService = Depends(get_ranking_service)
):
    """
    Get the top matches across all of a founder's startups.

    Also returns the same matches grouped per startup.
    """
    result = service.list_matches_for_founder(viewer, founder_id, limit)
    return FounderMatchesResponse(
        success=True,
        count=len(result.matches),
        matches=[RankedMatchModel.from_ranked(m) for m in result.matches],
        groups=[
            StartupMatchGroupModel(
                startup_id=g.startup_id,
                startup_name=g.startup_name,
                count=len(g.matches),
                matches=[RankedMatchModel.from_ranked(m) for m in g.matches]
            )
            for g in result.groups
        ]
    )


@router.get("/matches/{talent_id}/{startup_id}", response_model=MatchBreakdownResponse)
def get_match_breakdown(
    talent_id: str,
    startup_id: str,
    viewer: Viewer = Depends(get_viewer),
    service: RankingService = Depends(get_ranking_service)
):
    """
    Get the stored match for one pair with an explanation of each component.
    """
    result = service.get_match_breakdown(viewer, talent_id, startup_id)
    return MatchBreakdownResponse(
        success=True,
        match=RankedMatchModel.from_ranked(result.match),
        explanation=result.explanation,
        stale=result.stale
    )
