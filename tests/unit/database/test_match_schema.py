#!/usr/bin/env python3
"""
Schema-level guarantees of the match store (run on in-memory SQLite).
"""

import unittest
import uuid
from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from database.models import MatchRecord, TalentProfile
from database.uow import match_uow
from tests import count_match_records, make_session_factory, seed_startup, seed_talent


@pytest.mark.db
class TestMatchRecordConstraints(unittest.TestCase):

    def setUp(self):
        self.session_factory = make_session_factory()
        self.talent_id = uuid.UUID(seed_talent(self.session_factory, ["React"]))
        self.startup_id = uuid.UUID(seed_startup(self.session_factory, skills=["React"]))
        self.now = datetime.now(timezone.utc)

    def _values(self, score=75, skill=25, industry=30, stage=20):
        return {'score': score, 'skill_points': skill, 'industry_points': industry, 'stage_bonus': stage}

    def test_one_record_per_pair(self):
        with match_uow(self.session_factory) as repo:
            repo.matches.insert_match(self.talent_id, self.startup_id, self._values(), self.now)

        with self.assertRaises(IntegrityError):
            with match_uow(self.session_factory) as repo:
                repo.matches.insert_match(self.talent_id, self.startup_id, self._values(), self.now)

        self.assertEqual(count_match_records(self.session_factory, self.talent_id, self.startup_id), 1)

    def test_score_must_equal_sum(self):
        with self.assertRaises(IntegrityError):
            with match_uow(self.session_factory) as repo:
                repo.matches.insert_match(self.talent_id, self.startup_id, self._values(score=80), self.now)

    def test_component_ranges(self):
        with self.assertRaises(IntegrityError):
            with match_uow(self.session_factory) as repo:
                repo.matches.insert_match(
                    self.talent_id, self.startup_id,
                    self._values(score=85, skill=55, industry=10, stage=20),
                    self.now,
                )

    def test_failed_unit_of_work_rolls_back(self):
        with self.assertRaises(RuntimeError):
            with match_uow(self.session_factory) as repo:
                repo.matches.insert_match(self.talent_id, self.startup_id, self._values(), self.now)
                raise RuntimeError("cancelled")

        with match_uow(self.session_factory) as repo:
            self.assertIsNone(repo.matches.get_by_pair(self.talent_id, self.startup_id))


@pytest.mark.db
class TestProfileSkills(unittest.TestCase):

    def setUp(self):
        self.session_factory = make_session_factory()

    def test_skills_deduplicated_case_insensitively(self):
        talent_id = seed_talent(self.session_factory, ["React", "react", " Python ", ""])

        with match_uow(self.session_factory) as repo:
            talent = repo.talents.get_talent_profile(uuid.UUID(talent_id))
            self.assertEqual(sorted(talent.skills), ["Python", "React"])

    def test_set_skills_replaces(self):
        talent_id = uuid.UUID(seed_talent(self.session_factory, ["React", "Python"]))

        with match_uow(self.session_factory) as repo:
            talent = repo.talents.get_talent_profile(talent_id)
            talent.set_skills(["python", "Go"])

        with match_uow(self.session_factory) as repo:
            talent = repo.talents.get_talent_profile(talent_id)
            self.assertEqual(sorted(talent.skills), ["Go", "Python"])

    def test_invalid_availability_rejected(self):
        with self.assertRaises(IntegrityError):
            with match_uow(self.session_factory) as repo:
                repo.db.add(TalentProfile(availability='sometimes', commitment='employee'))
                repo.db.flush()

    def test_invalid_stage_rejected(self):
        with self.assertRaises(IntegrityError):
            seed_startup(self.session_factory, stage='series_a')


if __name__ == '__main__':
    unittest.main()
