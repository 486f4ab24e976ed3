"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: environment-based settings (selection mode, logging)
- game_settings.py: puzzle constants and the curated word lists
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    SUPPORTED_WORD_LENGTHS, get_word_list, get_word_lists, max_guesses_for,
    validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'SUPPORTED_WORD_LENGTHS', 'get_word_list', 'get_word_lists', 'max_guesses_for',
    'validate_word_list_integrity', 'get_word_statistics'
]
