#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header

from core.app_context import AppContext
from core.errors import AccessDenied
from core.ranking import RankingService, Viewer
from core.recompute import ChangeFeedAdapter, RecomputeService
from .config import get_config


@lru_cache()
def get_app_context() -> AppContext:
    """
    Wired services shared by all requests.

    Tests replace this through app.dependency_overrides.
    """
    return AppContext.build(get_config())


def get_recompute_service(ctx: AppContext = Depends(get_app_context)) -> RecomputeService:
    return ctx.recompute_service


def get_ranking_service(ctx: AppContext = Depends(get_app_context)) -> RankingService:
    return ctx.ranking_service


def get_change_feed(ctx: AppContext = Depends(get_app_context)) -> ChangeFeedAdapter:
    return ctx.change_feed


def get_viewer(
    x_viewer_id: Optional[str] = Header(default=None),
    x_viewer_role: Optional[str] = Header(default=None)
) -> Viewer:
    """
    Viewer context from the X-Viewer-Id / X-Viewer-Role headers.

    The authenticating proxy in front of this service sets both headers;
    a request without them is denied.
    """
    if not x_viewer_id or not x_viewer_role:
        raise AccessDenied("Missing viewer context")
    return Viewer.of(x_viewer_id, x_viewer_role)
