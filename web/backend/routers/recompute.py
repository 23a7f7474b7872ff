#!/usr/bin/env python3
"""
Recompute endpoints - on-demand and change-feed driven match refresh.

These only rewrite derived match records and are idempotent, so they sit
behind the service boundary rather than the viewer checks.
"""

import logging

from fastapi import APIRouter, Depends

from core.recompute import ChangeEvent, ChangeFeedAdapter, RecomputeService
from ..dependencies import get_change_feed, get_recompute_service
from ..models.requests import ChangeEventsRequest, RecomputeRequest
from ..models.responses import ChangeEventResult, ChangeEventsResponse, SyncReportResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recompute"])


@router.post("/recompute", response_model=SyncReportResponse)
def recompute(
    request: RecomputeRequest,
    service: RecomputeService = Depends(get_recompute_service)
):
    """
    Recompute every talent x startup pair of the request.

    Unknown ids reject the whole request before anything is written.
    Per-pair failures are reported in the results; success is false if any.
    """
    report = service.recompute(request.talent_ids, request.startup_ids)
    return SyncReportResponse.from_report(report)


@router.post("/talent/{talent_id}/recompute", response_model=SyncReportResponse)
def recompute_talent(
    talent_id: str,
    service: RecomputeService = Depends(get_recompute_service)
):
    """Refresh a talent's matches against relevant startups."""
    report = service.recompute_for_talent(talent_id)
    return SyncReportResponse.from_report(report)


@router.post("/startups/{startup_id}/recompute", response_model=SyncReportResponse)
def recompute_startup(
    startup_id: str,
    service: RecomputeService = Depends(get_recompute_service)
):
    """Refresh a startup's matches against relevant talents."""
    report = service.recompute_for_startup(startup_id)
    return SyncReportResponse.from_report(report)


@router.post("/change-events", response_model=ChangeEventsResponse)
def handle_change_events(
    request: ChangeEventsRequest,
    adapter: ChangeFeedAdapter = Depends(get_change_feed)
):
    """
    Apply a batch of profile/posting change events.

    Repeated events for the same entity collapse into one. Events that
    touch no scoring-relevant field are acknowledged without a recompute.
    A malformed event rejects the request before anything runs; once
    running, a failing event is reported in its own result.
    """
    events = [ChangeEvent.from_dict(e.model_dump()) for e in request.events]

    results = [ChangeEventResult.from_outcome(o) for o in adapter.handle_many(events)]

    return ChangeEventsResponse(
        success=all(r.success for r in results),
        count=len(results),
        results=results
    )
