#!/usr/bin/env python3
"""
Tests for ScoringService - the pure talent/startup scoring function.

Covers:
- End-to-end scoring scenarios
- Component bounds and the score == sum(components) invariant
- Determinism and monotonicity in skill overlap
- Input validation
"""

import unittest

from core.config_loader import ScorerConfig
from core.errors import InputError
from core.scorer import ScoringService, TalentProfileDTO, StartupPostingDTO, score
from core.scorer.models import MAX_SKILL_POINTS, MAX_INDUSTRY_POINTS, MAX_STAGE_BONUS
from database.models import INDUSTRIES, STAGES


def make_talent(skills=(), bio="", talent_id="t-1"):
    return TalentProfileDTO(id=talent_id, skills=tuple(skills), bio=bio)


def make_startup(skills=(), industry="Technology", stage="idea", startup_id="s-1"):
    return StartupPostingDTO(
        id=startup_id,
        founder_id="f-1",
        industry=industry,
        stage=stage,
        skills=tuple(skills),
    )


class TestScoringScenarios(unittest.TestCase):
    """End-to-end scoring scenarios."""

    def setUp(self):
        self.scorer = ScoringService()

    def test_partial_skill_overlap_direct_industry_idea_stage(self):
        """One of two skills shared, industry named in bio, idea stage -> 25 + 30 + 20."""
        talent = make_talent(["React", "Node.js"], bio="Ten years in Technology startups")
        startup = make_startup(["React", "Python"], industry="Technology", stage="idea")

        result = self.scorer.score(talent, startup)

        self.assertEqual(result.skill_points, 25)
        self.assertEqual(result.industry_points, 30)
        self.assertEqual(result.stage_bonus, 20)
        self.assertEqual(result.score, 75)

    def test_no_overlap_unrelated_industry_scaling_stage(self):
        """Nothing in common at the most mature stage scores zero."""
        talent = make_talent(["Figma", "Illustration"], bio="Children's book illustrator")
        startup = make_startup(["Solidity", "Rust"], industry="Finance", stage="scaling")

        result = self.scorer.score(talent, startup)

        self.assertEqual(result.skill_points, 0)
        self.assertEqual(result.industry_points, 0)
        self.assertEqual(result.stage_bonus, 0)
        self.assertEqual(result.score, 0)

    def test_perfect_match(self):
        talent = make_talent(["React", "Python"], bio="Technology generalist")
        startup = make_startup(["python", "REACT"], industry="Technology", stage="idea")

        result = self.scorer.score(talent, startup)

        self.assertEqual(result.skill_points, MAX_SKILL_POINTS)
        self.assertEqual(result.score, 100)

    def test_related_industry_keyword(self):
        """A keyword of the industry gives the related tier."""
        talent = make_talent(["Python"], bio="I build machine learning pipelines")
        startup = make_startup(["Go"], industry="AI/ML", stage="growth")

        result = self.scorer.score(talent, startup)

        self.assertEqual(result.industry_points, 15)
        self.assertEqual(result.stage_bonus, 5)

    def test_module_level_score_matches_service(self):
        talent = make_talent(["React"], bio="fintech engineer")
        startup = make_startup(["React", "Sales"], industry="Finance", stage="mvp")

        self.assertEqual(score(talent, startup), self.scorer.score(talent, startup))


class TestSkillsDerivedFromStage(unittest.TestCase):
    """Postings without sought skills fall back to the stage defaults."""

    def test_stage_defaults_used_when_no_skills(self):
        talent = make_talent(["React", "TypeScript"])
        startup = make_startup([], stage="mvp")

        result = ScoringService().score(talent, startup)

        # mvp defaults: React, TypeScript, UI/UX Design, Product Management
        self.assertEqual(result.skill_points, 25)

    def test_stage_defaults_disabled(self):
        talent = make_talent(["React", "TypeScript"])
        startup = make_startup([], stage="mvp")

        result = ScoringService(ScorerConfig(derive_skills_from_stage=False)).score(talent, startup)

        self.assertEqual(result.skill_points, 0)

    def test_explicit_skills_win_over_stage_defaults(self):
        talent = make_talent(["React", "TypeScript"])
        startup = make_startup(["Sales"], stage="mvp")

        self.assertEqual(ScoringService().score(talent, startup).skill_points, 0)


class TestScoringInvariants(unittest.TestCase):
    """Bounds, determinism and monotonicity."""

    SKILL_SETS = [
        (),
        ("React",),
        ("React", "Python", "Sales"),
        ("Marketing", "Finance", "Legal", "Operations", "DevOps"),
    ]
    BIOS = ["", "healthcare and medical devices", "Gaming studio lead", "maintain things"]

    def test_components_stay_in_bounds(self):
        scorer = ScoringService()
        for industry in INDUSTRIES:
            for stage in STAGES:
                for talent_skills in self.SKILL_SETS:
                    for sought in self.SKILL_SETS:
                        for bio in self.BIOS:
                            result = scorer.score(
                                make_talent(talent_skills, bio=bio),
                                make_startup(sought, industry=industry, stage=stage),
                            )
                            self.assertTrue(0 <= result.skill_points <= MAX_SKILL_POINTS)
                            self.assertTrue(0 <= result.industry_points <= MAX_INDUSTRY_POINTS)
                            self.assertTrue(0 <= result.stage_bonus <= MAX_STAGE_BONUS)
                            self.assertEqual(
                                result.score,
                                result.skill_points + result.industry_points + result.stage_bonus,
                            )
                            self.assertTrue(0 <= result.score <= 100)

    def test_deterministic(self):
        scorer = ScoringService()
        talent = make_talent(["React", "Node.js", "Sales"], bio="E-commerce marketplace builder")
        startup = make_startup(["React", "Marketing"], industry="E-commerce", stage="early_stage")

        results = {scorer.score(talent, startup) for _ in range(20)}

        self.assertEqual(len(results), 1)

    def test_adding_a_sought_skill_never_lowers_skill_points(self):
        scorer = ScoringService()
        sought = ["React", "Python", "Sales", "Marketing"]
        startup = make_startup(sought)

        talent_skills = []
        previous = 0
        for skill in sought:
            talent_skills.append(skill)
            points = scorer.score(make_talent(talent_skills), startup).skill_points
            self.assertGreaterEqual(points, previous)
            previous = points
        self.assertEqual(previous, MAX_SKILL_POINTS)

    def test_stage_bonus_non_increasing_with_maturity(self):
        scorer = ScoringService()
        talent = make_talent(["React"])
        bonuses = [scorer.score(talent, make_startup(stage=s)).stage_bonus for s in STAGES]

        self.assertEqual(bonuses, sorted(bonuses, reverse=True))


class TestScoringValidation(unittest.TestCase):
    """Malformed inputs raise InputError."""

    def setUp(self):
        self.scorer = ScoringService()

    def test_missing_talent_id(self):
        with self.assertRaises(InputError):
            self.scorer.score(make_talent(talent_id=""), make_startup())

    def test_missing_startup_id(self):
        with self.assertRaises(InputError):
            self.scorer.score(make_talent(), make_startup(startup_id=None))

    def test_unknown_industry(self):
        with self.assertRaises(InputError):
            self.scorer.score(make_talent(), make_startup(industry="Crypto"))

    def test_unknown_stage(self):
        with self.assertRaises(InputError):
            self.scorer.score(make_talent(), make_startup(stage="series_a"))


class TestScorePairs(unittest.TestCase):
    def test_cross_product(self):
        talents = [make_talent(["React"], talent_id=f"t-{i}") for i in range(3)]
        startups = [make_startup(["React"], startup_id=f"s-{i}") for i in range(2)]

        pairs = ScoringService().score_pairs(talents, startups)

        self.assertEqual(len(pairs), 6)
        self.assertEqual(
            {(p.talent_id, p.startup_id) for p in pairs},
            {(f"t-{i}", f"s-{j}") for i in range(3) for j in range(2)},
        )
        self.assertTrue(all(p.score == p.breakdown.score for p in pairs))


if __name__ == '__main__':
    unittest.main()
