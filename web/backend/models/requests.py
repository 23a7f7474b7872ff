#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class RecomputeRequest(BaseModel):
    """Recompute the cross-product of the given talents and startups."""
    talent_ids: List[str] = Field(default_factory=list, description="Talent profile ids")
    startup_ids: List[str] = Field(default_factory=list, description="Startup posting ids")


class ChangeEventModel(BaseModel):
    """A profile/posting change pushed by the change feed."""
    entity_type: str = Field(..., description="talent or startup")
    id: str = Field(..., description="Id of the changed profile or posting")
    changed_fields: Optional[List[str]] = Field(
        None,
        description="Changed field names, or null for a newly created entity"
    )


class ChangeEventsRequest(BaseModel):
    events: List[ChangeEventModel] = Field(default_factory=list)
