"""Data Transfer Objects for the scoring function.

Scoring runs on plain frozen snapshots rather than ORM objects, so it stays
pure and can run after the unit of work that loaded the profiles closed.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class TalentProfileDTO:
    """Snapshot of the talent fields that influence scoring."""
    id: str
    skills: Tuple[str, ...] = ()
    bio: str = ""
    availability: str = "full_time"
    commitment: str = "employee"
    display_name: Optional[str] = None

    @classmethod
    def from_orm(cls, talent: Any) -> "TalentProfileDTO":
        return cls(
            id=str(talent.id),
            skills=tuple(talent.skills),
            bio=talent.bio or "",
            availability=talent.availability,
            commitment=talent.commitment,
            display_name=talent.display_name,
        )


@dataclass(frozen=True)
class StartupPostingDTO:
    """Snapshot of the startup fields that influence scoring."""
    id: str
    founder_id: str
    industry: str
    stage: str
    skills: Tuple[str, ...] = field(default_factory=tuple)
    name: str = ""

    @classmethod
    def from_orm(cls, startup: Any) -> "StartupPostingDTO":
        return cls(
            id=str(startup.id),
            founder_id=str(startup.founder_id),
            industry=startup.industry,
            stage=startup.stage,
            skills=tuple(startup.skills),
            name=startup.name,
        )
