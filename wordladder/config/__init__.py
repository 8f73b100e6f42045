"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: application configuration (environment-based)
- ladder_settings.py: search and AI tuning constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
]
