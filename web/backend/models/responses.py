#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any

from core.ranking import RankedMatch
from core.scorer.skill_gap import SkillGapAnalysis, completion_message
from core.sync import SyncReport
from ..utils import safe_datetime_iso


class StartupSummaryModel(BaseModel):
    """Current state of the matched startup posting."""
    id: str
    founder_id: str
    name: str
    industry: str
    stage: str
    skills: List[str] = Field(default_factory=list)


class TalentSummaryModel(BaseModel):
    """Current state of the matched talent profile."""
    id: str
    display_name: Optional[str]
    availability: str
    commitment: str
    skills: List[str] = Field(default_factory=list)


class RankedMatchModel(BaseModel):
    """One stored match with its score breakdown."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "match_id": "550e8400-e29b-41d4-a716-446655440000",
                "talent_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                "startup_id": "6ba7b811-9dad-11d1-80b4-00c04fd430c8",
                "score": 75,
                "skill_points": 25,
                "industry_points": 30,
                "stage_bonus": 20,
                "calculated_at": "2026-02-01T12:00:00+00:00",
                "updated_at": "2026-02-01T12:00:00+00:00"
            }
        }
    )

    match_id: str
    talent_id: str
    startup_id: str
    score: int = Field(ge=0, le=100)
    skill_points: int = Field(ge=0, le=50)
    industry_points: int = Field(ge=0, le=30)
    stage_bonus: int = Field(ge=0, le=20)
    calculated_at: Optional[str]
    updated_at: Optional[str]
    startup: Optional[StartupSummaryModel] = None
    talent: Optional[TalentSummaryModel] = None

    @classmethod
    def from_ranked(cls, match: RankedMatch) -> "RankedMatchModel":
        return cls(
            match_id=match.match_id,
            talent_id=match.talent_id,
            startup_id=match.startup_id,
            score=match.score,
            skill_points=match.skill_points,
            industry_points=match.industry_points,
            stage_bonus=match.stage_bonus,
            calculated_at=safe_datetime_iso(match.calculated_at),
            updated_at=safe_datetime_iso(match.updated_at),
            startup=StartupSummaryModel(**vars(match.startup)) if match.startup else None,
            talent=TalentSummaryModel(**vars(match.talent)) if match.talent else None,
        )


class TalentMatchesResponse(BaseModel):
    """Ranked matches of one talent."""
    success: bool
    count: int
    matches: List[RankedMatchModel]


class StartupMatchGroupModel(BaseModel):
    startup_id: str
    startup_name: str
    count: int
    matches: List[RankedMatchModel]


class FounderMatchesResponse(BaseModel):
    """Ranked matches across a founder's startups, flat and grouped."""
    success: bool
    count: int
    matches: List[RankedMatchModel]
    groups: List[StartupMatchGroupModel]


class MatchBreakdownResponse(BaseModel):
    """Stored match plus per-component evidence."""
    success: bool
    match: RankedMatchModel
    explanation: Dict[str, Any]
    stale: bool = Field(description="Stored score differs from a fresh score of the current profiles")


class SkillGapResponse(BaseModel):
    success: bool
    startup_id: str
    required_skills: List[str]
    team_skills: List[str]
    missing_skills: List[str]
    completion_percentage: int = Field(ge=0, le=100)
    suggested_roles: List[str]
    stage_recommendations: List[str]
    message: str

    @classmethod
    def from_analysis(cls, startup_id: str, analysis: SkillGapAnalysis) -> "SkillGapResponse":
        return cls(
            success=True,
            startup_id=startup_id,
            required_skills=analysis.required_skills,
            team_skills=analysis.team_skills,
            missing_skills=analysis.missing_skills,
            completion_percentage=analysis.completion_percentage,
            suggested_roles=analysis.suggested_roles,
            stage_recommendations=analysis.stage_recommendations,
            message=completion_message(analysis.completion_percentage, analysis.suggested_roles),
        )


class PairResultModel(BaseModel):
    talent_id: str
    startup_id: str
    status: str = Field(description="created, updated, unchanged or failed")
    score: Optional[int] = None
    error: Optional[str] = None
    error_type: Optional[str] = None


class SyncCounts(BaseModel):
    created: int = 0
    updated: int = 0
    unchanged: int = 0
    failed: int = 0


class SyncReportResponse(BaseModel):
    """Per-pair outcome of a recompute; success is false if any pair failed."""
    success: bool
    total: int
    counts: SyncCounts
    results: List[PairResultModel]

    @classmethod
    def from_report(cls, report: SyncReport) -> "SyncReportResponse":
        return cls(
            success=report.ok,
            total=len(report.results),
            counts=SyncCounts(**report.counts()),
            results=[PairResultModel(**r.to_dict()) for r in report.results],
        )


class ChangeEventResult(BaseModel):
    entity_type: str
    id: str
    success: bool = True
    recomputed: bool
    report: Optional[SyncReportResponse] = None
    error: Optional[str] = None
    type: Optional[str] = None

    @classmethod
    def from_outcome(cls, outcome) -> "ChangeEventResult":
        report = outcome.report
        return cls(
            entity_type=outcome.event.entity_type,
            id=outcome.event.id,
            success=outcome.ok,
            recomputed=report is not None,
            report=SyncReportResponse.from_report(report) if report is not None else None,
            error=str(outcome.error) if outcome.error is not None else None,
            type=outcome.error.__class__.__name__ if outcome.error is not None else None,
        )


class ChangeEventsResponse(BaseModel):
    success: bool
    count: int
    results: List[ChangeEventResult]
