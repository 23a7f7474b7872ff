#!/usr/bin/env python3
"""
Match Recomputation - decides which pairs to (re)score and hands them to
the synchronizer.

Entry points:
- recompute(talent_ids, startup_ids): explicit cross-product
- recompute_for_talent(talent_id): the talent x relevant startups
- recompute_for_startup(startup_id): the startup x relevant talents

Scoped fan-out always includes pairs that already have a record, so a
profile edit that removes a skill still refreshes the old scores.
All entry points are idempotent: unchanged inputs leave the store untouched.
"""

import logging
from typing import Any, Callable, Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session

from core.config_loader import RecomputeConfig
from core.errors import InputError
from core.scorer import ScoringService, TalentProfileDTO, StartupPostingDTO
from core.scorer.industry_score import TIER_NONE, detect_industry_signal
from core.scorer.policy import STAGE_SKILLS
from core.scorer.service import resolve_sought_skills
from core.scorer.skill_score import normalize_skills
from core.sync import MatchStoreSynchronizer, SyncReport, store_retrying
from core.utils import parse_id, parse_ids
from database.models import INDUSTRIES
from database.uow import match_uow

logger = logging.getLogger(__name__)


def _unique_by_id(rows: Iterable[Any]) -> List[Any]:
    seen = {}
    for row in rows:
        seen.setdefault(row.id, row)
    return list(seen.values())


class RecomputeService:
    """Loads profiles/postings, scores pairs, and syncs the results."""

    def __init__(
        self,
        scorer: Optional[ScoringService] = None,
        synchronizer: Optional[MatchStoreSynchronizer] = None,
        config: Optional[RecomputeConfig] = None,
        session_factory: Optional[Callable[[], Session]] = None
    ):
        self.scorer = scorer or ScoringService()
        self.session_factory = session_factory
        self.synchronizer = synchronizer or MatchStoreSynchronizer(session_factory=session_factory)
        self.config = config or RecomputeConfig()

    def _load(self, loader: Callable[..., Any], *args) -> Any:
        """Run a read-only loader in its own unit of work, with store backoff."""
        def run():
            with match_uow(self.session_factory) as repo:
                return loader(repo, *args)
        return store_retrying(self.synchronizer.config)(run)

    def _score_and_sync(
        self,
        talents: List[TalentProfileDTO],
        startups: List[StartupPostingDTO]
    ) -> SyncReport:
        pairs = self.scorer.score_pairs(talents, startups)
        logger.info(f"Scored {len(pairs)} pairs ({len(talents)} talents x {len(startups)} startups)")
        return self.synchronizer.upsert(pairs)

    # ------------------------------------------------------------------
    # Explicit cross-product
    # ------------------------------------------------------------------

    def recompute(self, talent_ids: Iterable[Any], startup_ids: Iterable[Any]) -> SyncReport:
        """Score every supplied talent against every supplied startup.

        Raises:
            InputError: an id is malformed or does not exist. Nothing is written.
        """
        talent_ids = parse_ids(talent_ids, "talent id")
        startup_ids = parse_ids(startup_ids, "startup id")
        if not talent_ids or not startup_ids:
            logger.info("Recompute called with an empty side, nothing to do")
            return SyncReport()

        talents, startups = self._load(self._load_pairs, talent_ids, startup_ids)
        return self._score_and_sync(talents, startups)

    @staticmethod
    def _load_pairs(repo, talent_ids, startup_ids) -> Tuple[List[TalentProfileDTO], List[StartupPostingDTO]]:
        talents = repo.talents.get_talent_profiles(talent_ids)
        startups = repo.startups.get_startup_postings(startup_ids)

        missing_talents = set(talent_ids) - {t.id for t in talents}
        if missing_talents:
            raise InputError(f"Unknown talent ids: {sorted(str(i) for i in missing_talents)}")
        missing_startups = set(startup_ids) - {s.id for s in startups}
        if missing_startups:
            raise InputError(f"Unknown startup ids: {sorted(str(i) for i in missing_startups)}")

        return (
            [TalentProfileDTO.from_orm(t) for t in talents],
            [StartupPostingDTO.from_orm(s) for s in startups],
        )

    # ------------------------------------------------------------------
    # Scoped fan-out
    # ------------------------------------------------------------------

    def recompute_for_talent(self, talent_id: Any) -> SyncReport:
        """Refresh one talent's matches against relevant startups."""
        talent_id = parse_id(talent_id, "talent id")
        talent, startups = self._load(self._load_talent_candidates, talent_id)
        logger.info(f"Recompute for talent {talent_id}: {len(startups)} candidate startups")
        if not startups:
            return SyncReport()
        return self._score_and_sync([talent], startups)

    def _load_talent_candidates(self, repo, talent_id) -> Tuple[TalentProfileDTO, List[StartupPostingDTO]]:
        row = repo.talents.get_talent_profile(talent_id)
        if row is None:
            raise InputError(f"Unknown talent id: {talent_id}")
        talent = TalentProfileDTO.from_orm(row)

        industries = [
            industry for industry in INDUSTRIES
            if detect_industry_signal(industry, talent.bio, talent.skills, self.scorer.keyword_table).tier != TIER_NONE
        ]
        stages = []
        if self.scorer.config.derive_skills_from_stage:
            held = normalize_skills(talent.skills)
            stages = [
                stage for stage, skills in STAGE_SKILLS.items()
                if held & normalize_skills(skills)
            ]

        candidates = repo.startups.find_startups_for_talent(
            talent.skills, industries, stages, limit=self.config.max_candidates
        )
        existing = repo.startups.get_startup_postings(repo.matches.matched_startup_ids(talent_id))
        startups = _unique_by_id(existing + candidates)
        return talent, [StartupPostingDTO.from_orm(s) for s in startups]

    def recompute_for_startup(self, startup_id: Any) -> SyncReport:
        """Refresh one startup's matches against relevant talents."""
        startup_id = parse_id(startup_id, "startup id")
        startup, talents = self._load(self._load_startup_candidates, startup_id)
        logger.info(f"Recompute for startup {startup_id}: {len(talents)} candidate talents")
        if not talents:
            return SyncReport()
        return self._score_and_sync(talents, [startup])

    def _load_startup_candidates(self, repo, startup_id) -> Tuple[StartupPostingDTO, List[TalentProfileDTO]]:
        row = repo.startups.get_startup_posting(startup_id)
        if row is None:
            raise InputError(f"Unknown startup id: {startup_id}")
        startup = StartupPostingDTO.from_orm(row)

        sought, _ = resolve_sought_skills(startup, self.scorer.config)
        industry_terms = list(self.scorer.keyword_table.get(startup.industry, ()))
        if startup.industry != 'Other':
            industry_terms.insert(0, startup.industry)

        limit = self.config.max_candidates
        candidates = repo.talents.find_talents_with_skills(list(sought) + industry_terms, limit=limit)
        if len(candidates) < limit:
            candidates += repo.talents.find_talents_mentioning(industry_terms, limit=limit - len(candidates))

        existing = repo.talents.get_talent_profiles(repo.matches.matched_talent_ids(startup_id))
        talents = _unique_by_id(existing + candidates)
        return startup, [TalentProfileDTO.from_orm(t) for t in talents]
