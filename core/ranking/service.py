#!/usr/bin/env python3
"""
Ranked Query Service - read-only access to stored matches.

Ordering is score desc, then calculated_at desc, then record id, so equal
scores always come back in the same order. Reads fail fast: a store error
surfaces as StoreUnavailable with no retry and no cached fallback, which
keeps "could not load" distinguishable from "no matches".
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.orm import Session

from core.config_loader import RankingConfig
from core.errors import AccessDenied, InputError, MatchNotFound
from core.ranking.models import (
    FounderMatches,
    MatchBreakdown,
    RankedMatch,
    StartupMatchGroup,
    Viewer,
    ROLE_FOUNDER,
    ROLE_TALENT,
)
from core.scorer import ScoringService, TalentProfileDTO, StartupPostingDTO
from core.scorer.explainability import explain_match
from core.scorer.skill_gap import SkillGapAnalysis, calculate_skill_gap
from core.utils import parse_id
from database.repositories.match import SCORE_FIELDS
from database.uow import match_uow

logger = logging.getLogger(__name__)


def validate_limit(limit: Any) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InputError(f"limit must be a positive integer, got {limit!r}")
    return limit


class RankingService:
    """Serves ranked match lists to talents and founders."""

    def __init__(
        self,
        config: Optional[RankingConfig] = None,
        scorer: Optional[ScoringService] = None,
        session_factory: Optional[Callable[[], Session]] = None
    ):
        self.config = config or RankingConfig()
        self.scorer = scorer or ScoringService()
        self.session_factory = session_factory

    def list_matches_for_talent(
        self,
        viewer: Viewer,
        talent_id: Any,
        limit: Optional[int] = None
    ) -> List[RankedMatch]:
        """Top matches for one talent, each joined with its startup posting.

        Raises:
            InputError: malformed talent id or limit < 1.
            AccessDenied: viewer is not this talent.
            StoreUnavailable: the store could not be read.
        """
        talent_id = parse_id(talent_id, "talent id")
        limit = validate_limit(self.config.talent_default_limit if limit is None else limit)

        if viewer.role != ROLE_TALENT or viewer.id != str(talent_id):
            raise AccessDenied(f"Viewer {viewer.id} ({viewer.role}) cannot read matches of talent {talent_id}")

        with match_uow(self.session_factory) as repo:
            records = repo.matches.list_for_talent(talent_id, limit)
            matches = [RankedMatch.from_record(r, with_startup=True) for r in records]

        logger.debug(f"Listed {len(matches)} matches for talent {talent_id} (limit={limit})")
        return matches

    def list_matches_for_founder(
        self,
        viewer: Viewer,
        founder_id: Any,
        limit: Optional[int] = None
    ) -> FounderMatches:
        """Top matches across all of a founder's startups.

        The flat list holds the overall top `limit`; groups hold the same
        matches per startup, ordered by each startup's best match, followed
        by the founder's startups without matches.
        """
        founder_id = parse_id(founder_id, "founder id")
        limit = validate_limit(self.config.founder_default_limit if limit is None else limit)

        if viewer.role != ROLE_FOUNDER or viewer.id != str(founder_id):
            raise AccessDenied(f"Viewer {viewer.id} ({viewer.role}) cannot read matches of founder {founder_id}")

        with match_uow(self.session_factory) as repo:
            startups = repo.startups.list_startups_for_founder(founder_id)
            records = repo.matches.list_for_startups([s.id for s in startups], limit)
            matches = [RankedMatch.from_record(r, with_startup=True, with_talent=True) for r in records]
            names = {str(s.id): s.name for s in startups}

        groups: Dict[str, StartupMatchGroup] = {}
        for match in matches:
            group = groups.get(match.startup_id)
            if group is None:
                group = groups[match.startup_id] = StartupMatchGroup(
                    startup_id=match.startup_id,
                    startup_name=names.get(match.startup_id, ""),
                )
            group.matches.append(match)
        for startup_id, name in names.items():
            groups.setdefault(startup_id, StartupMatchGroup(startup_id=startup_id, startup_name=name))

        logger.debug(
            f"Listed {len(matches)} matches over {len(names)} startups for founder {founder_id} (limit={limit})"
        )
        return FounderMatches(matches=matches, groups=list(groups.values()))

    def get_match_breakdown(self, viewer: Viewer, talent_id: Any, startup_id: Any) -> MatchBreakdown:
        """Stored record for one pair plus an explanation of each component.

        Readable by the talent and by the founder owning the startup.
        """
        talent_id = parse_id(talent_id, "talent id")
        startup_id = parse_id(startup_id, "startup id")

        with match_uow(self.session_factory) as repo:
            record = repo.matches.get_by_pair(talent_id, startup_id)
            if record is None:
                raise MatchNotFound(f"No match for talent {talent_id} / startup {startup_id}")

            is_talent = viewer.role == ROLE_TALENT and viewer.id == str(talent_id)
            is_owner = viewer.role == ROLE_FOUNDER and viewer.id == str(record.startup.founder_id)
            if not (is_talent or is_owner):
                raise AccessDenied(f"Viewer {viewer.id} ({viewer.role}) cannot read this match")

            match = RankedMatch.from_record(record, with_startup=True, with_talent=True)
            talent = TalentProfileDTO.from_orm(record.talent)
            startup = StartupPostingDTO.from_orm(record.startup)

        explanation = explain_match(talent, startup, self.scorer)
        return MatchBreakdown(
            match=match,
            explanation=explanation,
            stale=any(explanation['score'][f] != getattr(match, f) for f in SCORE_FIELDS),
        )

    def get_skill_gap(
        self,
        viewer: Viewer,
        startup_id: Any,
        team_skills: Optional[List[str]] = None
    ) -> SkillGapAnalysis:
        """Sought skills the founder's team still lacks for one startup."""
        startup_id = parse_id(startup_id, "startup id")

        with match_uow(self.session_factory) as repo:
            row = repo.startups.get_startup_posting(startup_id)
            if row is None:
                raise InputError(f"Unknown startup id: {startup_id}")
            if viewer.role != ROLE_FOUNDER or viewer.id != str(row.founder_id):
                raise AccessDenied(f"Viewer {viewer.id} ({viewer.role}) does not own startup {startup_id}")
            startup = StartupPostingDTO.from_orm(row)

        return calculate_skill_gap(startup, team_skills or (), self.scorer.config)
