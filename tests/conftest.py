"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: tests that run against an in-memory SQLite match store"
    )


@pytest.fixture(autouse=True)
def _isolate_cached_config():
    """Clear cached web config/context so env overrides in one test do not leak."""
    from web.backend.config import get_config
    from web.backend.dependencies import get_app_context

    get_config.cache_clear()
    get_app_context.cache_clear()
    yield
    get_config.cache_clear()
    get_app_context.cache_clear()
