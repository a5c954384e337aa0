#!/usr/bin/env python3
"""
Configuration management for the CareMatch web application.
"""

import os
from pathlib import Path
from functools import lru_cache

from carematch.config_loader import AppConfig, load_config


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads ``config.yaml`` from the project root (or the path in
    ``CAREMATCH_CONFIG``) and applies environment variable overrides.
    Result is cached for performance.

    Returns:
        AppConfig: The application configuration.
    """
    config_path = os.environ.get("CAREMATCH_CONFIG") or str(get_project_root() / 'config.yaml')
    return load_config(config_path)


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent
