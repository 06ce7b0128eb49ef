"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: game rules, constants and dictionary loading
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ALPHABET, VOWELS, HINT_RATIO, QWERTY_ROWS, DEFAULT_WORD_LENGTH, DEFAULT_MAX_ATTEMPTS,
    load_word_list
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ALPHABET', 'VOWELS', 'HINT_RATIO', 'QWERTY_ROWS', 'DEFAULT_WORD_LENGTH', 'DEFAULT_MAX_ATTEMPTS',
    'load_word_list'
]
