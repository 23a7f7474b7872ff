#!/usr/bin/env python3
"""
Tests for skill gap analysis and match explanations.
"""

import unittest

from core.config_loader import ScorerConfig
from core.scorer import ScoringService, TalentProfileDTO, StartupPostingDTO
from core.scorer.explainability import explain_match
from core.scorer.skill_gap import calculate_skill_gap, completion_message


def make_startup(skills=(), industry="Technology", stage="idea"):
    return StartupPostingDTO(id="s-1", founder_id="f-1", industry=industry, stage=stage, skills=tuple(skills))


class TestSkillGap(unittest.TestCase):
    """Tests for calculate_skill_gap."""

    def test_partial_coverage(self):
        startup = make_startup(["React", "Python", "Marketing"])

        gap = calculate_skill_gap(startup, ["react"])

        self.assertEqual(gap.required_skills, ["React", "Python", "Marketing"])
        self.assertEqual(gap.missing_skills, ["Python", "Marketing"])
        self.assertEqual(gap.completion_percentage, 33)
        self.assertEqual(gap.suggested_roles, ["Backend/ML Engineer", "Marketing Lead"])
        self.assertEqual(gap.stage_recommendations, ["Product Management", "UI/UX Design"])

    def test_full_coverage(self):
        gap = calculate_skill_gap(make_startup(["React"], stage="scaling"), ["React", "Legal"])

        self.assertEqual(gap.missing_skills, [])
        self.assertEqual(gap.completion_percentage, 100)
        self.assertNotIn("Legal", gap.stage_recommendations)

    def test_stage_defaults_when_no_skills(self):
        gap = calculate_skill_gap(make_startup([], stage="idea"), [])

        self.assertEqual(gap.required_skills, ["Product Management", "UI/UX Design"])
        self.assertEqual(gap.suggested_roles, ["Product Manager", "UI/UX Designer"])

    def test_nothing_sought(self):
        config = ScorerConfig(derive_skills_from_stage=False)
        gap = calculate_skill_gap(make_startup([]), ["React"], config)

        self.assertEqual(gap.required_skills, [])
        self.assertEqual(gap.completion_percentage, 100)

    def test_roles_deduplicated(self):
        gap = calculate_skill_gap(make_startup(["Sales", "sales"]), [])
        self.assertEqual(gap.suggested_roles, ["Sales Lead"])

    def test_completion_messages(self):
        self.assertIn("every", completion_message(100, []))
        self.assertIn("well-rounded", completion_message(85, []))
        self.assertIn("CFO", completion_message(60, ["CFO"]))
        self.assertIn("forming", completion_message(40, []))
        self.assertIn("still open", completion_message(10, []))


class TestExplainMatch(unittest.TestCase):
    """Tests for explain_match."""

    def test_explains_each_component(self):
        talent = TalentProfileDTO(id="t-1", skills=("React", "Node.js"), bio="Technology lead")
        startup = make_startup(["React", "Python"], industry="Technology", stage="idea")

        explanation = explain_match(talent, startup, ScoringService())

        self.assertEqual(explanation['score']['score'], 75)
        self.assertEqual(explanation['skills']['matched_skills'], ["React"])
        self.assertEqual(explanation['skills']['missing_skills'], ["Python"])
        self.assertEqual(explanation['skills']['sought_source'], 'explicit')
        self.assertEqual(explanation['skills']['overlap'], 1)
        self.assertEqual(explanation['skills']['denominator'], 2)
        self.assertEqual(explanation['industry']['tier'], 'direct')
        self.assertEqual(explanation['industry']['matched_terms'], ["Technology"])
        self.assertEqual(explanation['stage'], {'stage': 'idea', 'points': 20})

    def test_stage_derived_source(self):
        talent = TalentProfileDTO(id="t-1", skills=("Finance",), bio="")
        startup = make_startup([], industry="Other", stage="growth")

        explanation = explain_match(talent, startup)

        self.assertEqual(explanation['skills']['sought_source'], 'stage')
        self.assertEqual(explanation['skills']['matched_skills'], ["Finance"])
        self.assertEqual(explanation['industry']['tier'], 'none')


if __name__ == '__main__':
    unittest.main()
