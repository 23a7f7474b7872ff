#!/usr/bin/env python3
"""
Configuration access for the FounderMatch web application.
"""

import os
from pathlib import Path
from functools import lru_cache

from core.config_loader import AppConfig, load_config

# Set by `main.py --config ... serve`; falls back to the project root config.yaml
CONFIG_PATH_ENV = "FOUNDERMATCH_CONFIG"


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads the file named by FOUNDERMATCH_CONFIG, or config.yaml from the
    project root, and applies environment variable overrides. Result is
    cached for the process lifetime.

    Returns:
        AppConfig: The application configuration.
    """
    return load_config(get_config_path())


def get_config_path() -> str:
    return os.environ.get(CONFIG_PATH_ENV) or str(get_project_root() / 'config.yaml')


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent
