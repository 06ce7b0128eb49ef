"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _optional_int(name: str):
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return None
    return int(value)


class Config:
    """Base configuration class with all settings."""

    # Dictionary Settings
    WORD_FILE = os.getenv('WORD_FILE', os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words.json'))

    # Game Settings
    DEFAULT_WORD_LENGTH = int(os.getenv('DEFAULT_WORD_LENGTH', 5))
    DEFAULT_MAX_ATTEMPTS = int(os.getenv('DEFAULT_MAX_ATTEMPTS', 6))
    RANDOM_SEED = _optional_int('RANDOM_SEED')

    # Display Settings
    USE_COLOR = os.getenv('USE_COLOR', 'True').lower() == 'true'

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', '')


class DevelopmentConfig(Config):
    """Development configuration: verbose logs written to a local directory."""
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')
    LOG_DIR = os.getenv('LOG_DIR') or 'logs'


class ProductionConfig(Config):
    """Production configuration."""


class TestingConfig(Config):
    """Testing configuration."""
    RANDOM_SEED = 1234
    USE_COLOR = False
    LOG_DIR = ''


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}
