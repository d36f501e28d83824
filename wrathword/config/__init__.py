"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and word-list loading
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    VALID_LENGTHS, DEFAULT_LENGTH, DEFAULT_MAX_ROWS,
    load_word_lists, validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'VALID_LENGTHS', 'DEFAULT_LENGTH', 'DEFAULT_MAX_ROWS',
    'load_word_lists', 'validate_word_list_integrity'
]
