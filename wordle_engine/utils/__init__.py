"""
Utilities Package

Contains logging helpers.
"""

from .game_logger import GameLogger, configure_game_logger, get_game_logger

__all__ = ['GameLogger', 'configure_game_logger', 'get_game_logger']
