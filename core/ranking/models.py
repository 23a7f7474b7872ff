"""Read-side projections served by the ranked query service."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from core.errors import InputError
from core.utils import parse_id

ROLE_TALENT = 'talent'
ROLE_FOUNDER = 'founder'
ROLES = (ROLE_TALENT, ROLE_FOUNDER)


@dataclass(frozen=True)
class Viewer:
    """Who is asking. Passed into every read call."""
    id: str
    role: str

    @classmethod
    def of(cls, viewer_id: Any, role: str) -> "Viewer":
        if role not in ROLES:
            raise InputError(f"Unknown viewer role: {role!r}")
        return cls(id=str(parse_id(viewer_id, "viewer id")), role=role)


@dataclass
class StartupSummary:
    id: str
    founder_id: str
    name: str
    industry: str
    stage: str
    skills: List[str] = field(default_factory=list)

    @classmethod
    def from_orm(cls, startup: Any) -> "StartupSummary":
        return cls(
            id=str(startup.id),
            founder_id=str(startup.founder_id),
            name=startup.name,
            industry=startup.industry,
            stage=startup.stage,
            skills=list(startup.skills),
        )


@dataclass
class TalentSummary:
    id: str
    display_name: Optional[str]
    availability: str
    commitment: str
    skills: List[str] = field(default_factory=list)

    @classmethod
    def from_orm(cls, talent: Any) -> "TalentSummary":
        return cls(
            id=str(talent.id),
            display_name=talent.display_name,
            availability=talent.availability,
            commitment=talent.commitment,
            skills=list(talent.skills),
        )


@dataclass
class RankedMatch:
    """A stored match joined with the current profile/posting at read time."""
    match_id: str
    talent_id: str
    startup_id: str
    score: int
    skill_points: int
    industry_points: int
    stage_bonus: int
    calculated_at: Optional[datetime]
    updated_at: Optional[datetime]
    startup: Optional[StartupSummary] = None
    talent: Optional[TalentSummary] = None

    @classmethod
    def from_record(cls, record: Any, with_startup: bool = False, with_talent: bool = False) -> "RankedMatch":
        return cls(
            match_id=str(record.id),
            talent_id=str(record.talent_id),
            startup_id=str(record.startup_id),
            score=record.score,
            skill_points=record.skill_points,
            industry_points=record.industry_points,
            stage_bonus=record.stage_bonus,
            calculated_at=record.calculated_at,
            updated_at=record.updated_at,
            startup=StartupSummary.from_orm(record.startup) if with_startup else None,
            talent=TalentSummary.from_orm(record.talent) if with_talent else None,
        )


@dataclass
class StartupMatchGroup:
    startup_id: str
    startup_name: str
    matches: List[RankedMatch] = field(default_factory=list)


@dataclass
class FounderMatches:
    """Top matches across a founder's startups, flat and grouped by startup."""
    matches: List[RankedMatch] = field(default_factory=list)
    groups: List[StartupMatchGroup] = field(default_factory=list)


@dataclass
class MatchBreakdown:
    """A stored match and the evidence behind each score component."""
    match: RankedMatch
    explanation: Dict[str, Any]
    # Stored score differs from a fresh score of the current profiles
    stale: bool = False
