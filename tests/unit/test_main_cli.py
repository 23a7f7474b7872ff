#!/usr/bin/env python3
"""
Tests for the command line entry point.
"""

import os
import tempfile
import unittest
from unittest.mock import MagicMock, patch

import main
from core.config_loader import AppConfig
from core.errors import InputError
from core.sync import PairResult, SyncReport
from web.backend.config import CONFIG_PATH_ENV, get_config


class TestCli(unittest.TestCase):

    def setUp(self):
        self.ctx = MagicMock()
        patcher = patch.object(main.AppContext, 'build', return_value=self.ctx)
        self.mock_build = patcher.start()
        self.addCleanup(patcher.stop)
        config_patcher = patch.object(main, 'load_config', return_value=AppConfig())
        config_patcher.start()
        self.addCleanup(config_patcher.stop)

    def test_parser_requires_command(self):
        with self.assertRaises(SystemExit):
            main.build_parser().parse_args([])

    def test_recompute_collects_repeated_ids(self):
        self.ctx.recompute_service.recompute.return_value = SyncReport()

        code = main.main(['recompute', '--talent', 't1', '--talent', 't2', '--startup', 's1'])

        self.assertEqual(code, 0)
        self.ctx.recompute_service.recompute.assert_called_once_with(['t1', 't2'], ['s1'])

    def test_failed_pairs_give_nonzero_exit(self):
        self.ctx.recompute_service.recompute_for_startup.return_value = SyncReport(
            results=[PairResult('t1', 's1', 'failed', error='db down', error_type='StoreUnavailable')]
        )

        self.assertEqual(main.main(['recompute-startup', 's1']), 1)

    def test_engine_errors_are_reported(self):
        self.ctx.recompute_service.recompute_for_talent.side_effect = InputError("Unknown talent id: t1")

        self.assertEqual(main.main(['recompute-talent', 't1']), 2)

    def test_init_db_uses_configured_url(self):
        with patch.object(main, 'init_db') as mock_init, patch.object(main, 'get_engine') as mock_engine:
            self.assertEqual(main.main(['init-db']), 0)

        mock_engine.assert_called_once_with(AppConfig().database.url)
        mock_init.assert_called_once_with(mock_engine.return_value)
        self.mock_build.assert_not_called()

    def test_serve_uses_given_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'alt.yaml')
            with open(path, 'w') as f:
                f.write("ranking:\n  talent_default_limit: 7\n")

            with patch.dict(os.environ, {}), patch('web.backend.app.main') as mock_serve:
                self.assertEqual(main.main(['--config', path, 'serve']), 0)
                self.assertEqual(os.environ[CONFIG_PATH_ENV], os.path.abspath(path))
                self.assertEqual(get_config().ranking.talent_default_limit, 7)

        mock_serve.assert_called_once_with()
        self.mock_build.assert_not_called()


if __name__ == '__main__':
    unittest.main()
