#!/usr/bin/env python3
"""
Configuration management for the Intervyo web application.
"""

from functools import lru_cache

from core.config_loader import AppConfig, load_config


@lru_cache()
def get_config() -> AppConfig:
    """
    Application configuration, loaded once per process.

    config.yaml (or $INTERVYO_CONFIG) with DATABASE_URL / WEB_HOST / WEB_PORT
    overrides applied.
    """
    return load_config()
