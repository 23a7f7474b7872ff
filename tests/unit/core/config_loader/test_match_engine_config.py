#!/usr/bin/env python3
"""
Tests for config loading and policy validation.
"""

import os
import tempfile
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from core.config_loader import AppConfig, ScorerConfig, SyncConfig, load_config


class TestScorerConfigValidation(unittest.TestCase):
    """Policy constants are validated at load time."""

    def test_defaults(self):
        config = ScorerConfig()
        self.assertEqual(config.stage_bonus['idea'], 20)
        self.assertEqual(config.stage_bonus['scaling'], 0)
        self.assertEqual(config.industry_direct_points, 30)
        self.assertEqual(config.industry_related_points, 15)
        self.assertTrue(config.derive_skills_from_stage)

    def test_stage_bonus_must_not_increase(self):
        with self.assertRaises(ValidationError):
            ScorerConfig(stage_bonus={'idea': 10, 'mvp': 15, 'early_stage': 5, 'growth': 0, 'scaling': 0})

    def test_stage_bonus_bounded(self):
        with self.assertRaises(ValidationError):
            ScorerConfig(stage_bonus={'idea': 25, 'mvp': 15, 'early_stage': 10, 'growth': 5, 'scaling': 0})

    def test_stage_bonus_requires_every_stage(self):
        with self.assertRaises(ValidationError):
            ScorerConfig(stage_bonus={'idea': 20, 'mvp': 15})

    def test_stage_bonus_rejects_unknown_stage(self):
        bonus = {'idea': 20, 'mvp': 15, 'early_stage': 10, 'growth': 5, 'scaling': 0, 'ipo': 0}
        with self.assertRaises(ValidationError):
            ScorerConfig(stage_bonus=bonus)

    def test_industry_tiers_ordered(self):
        with self.assertRaises(ValidationError):
            ScorerConfig(industry_direct_points=10, industry_related_points=20)
        with self.assertRaises(ValidationError):
            ScorerConfig(industry_direct_points=40)

    def test_sync_bounds(self):
        with self.assertRaises(ValidationError):
            SyncConfig(max_conflict_retries=0)


class TestLoadConfig(unittest.TestCase):
    """Tests for load_config with YAML files and env overrides."""

    def _write(self, text):
        handle = tempfile.NamedTemporaryFile('w', suffix='.yaml', delete=False)
        handle.write(text)
        handle.close()
        self.addCleanup(os.unlink, handle.name)
        return handle.name

    @patch.dict(os.environ, {}, clear=True)
    def test_load_from_yaml(self):
        path = self._write(
            "scorer:\n"
            "  industry_related_points: 10\n"
            "ranking:\n"
            "  talent_default_limit: 5\n"
            "sync:\n"
            "  max_store_attempts: 2\n"
        )

        config = load_config(path)

        self.assertIsInstance(config, AppConfig)
        self.assertEqual(config.scorer.industry_related_points, 10)
        self.assertEqual(config.ranking.talent_default_limit, 5)
        self.assertEqual(config.ranking.founder_default_limit, 20)
        self.assertEqual(config.sync.max_store_attempts, 2)

    @patch.dict(os.environ, {
        'DATABASE_URL': 'sqlite:///override.db',
        'WEB_HOST': '127.0.0.1',
        'WEB_PORT': '9090',
    }, clear=True)
    def test_env_overrides(self):
        config = load_config(self._write("database:\n  url: postgresql://x/y\n"))

        self.assertEqual(config.database.url, 'sqlite:///override.db')
        self.assertEqual(config.web.host, '127.0.0.1')
        self.assertEqual(config.web.port, 9090)

    @patch.dict(os.environ, {}, clear=True)
    def test_empty_file_gives_defaults(self):
        config = load_config(self._write(""))
        self.assertEqual(config.recompute.max_candidates, 500)
        self.assertEqual(config.web.port, 8080)

    @patch.dict(os.environ, {}, clear=True)
    def test_invalid_policy_in_yaml(self):
        path = self._write("scorer:\n  stage_bonus:\n    idea: 0\n    mvp: 20\n    early_stage: 0\n    growth: 0\n    scaling: 0\n")
        with self.assertRaises(ValidationError):
            load_config(path)


if __name__ == '__main__':
    unittest.main()
