"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    MAX_ATTEMPTS, MIN_WORD_LENGTH, MAX_WORD_LENGTH,
    is_supported_length, validate_word
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'MAX_ATTEMPTS', 'MIN_WORD_LENGTH', 'MAX_WORD_LENGTH',
    'is_supported_length', 'validate_word'
]
