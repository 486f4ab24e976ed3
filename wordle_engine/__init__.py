"""
Word-Guessing Puzzle Engine

Scoring, puzzle state machine and word lists for a single-player
word-guessing game. Rendering and input handling live with the caller.
"""

from .config import Config
from .exceptions import (
    WordleError, IllegalWordError, ContractViolation, InvalidLetter,
    UnsupportedWordLength, WordIndexOutOfRange, GameNotFoundError
)
from .models import EngineLifecycle, GuessSummary, ScoredLetter, SlotOutcome
from .services import GuessEngine, WordSource, score


def create_service(config_class=Config, **kwargs):
    """
    Factory for a ready-to-use game service.

    Args:
        config_class: Configuration class to use

    Returns:
        GameService with logging configured and word lists validated
    """
    from .config.game_settings import validate_word_list_integrity
    from .services.game_service import initialize_game_service
    from .utils.game_logger import configure_game_logger

    logger = configure_game_logger(config_class)
    validate_word_list_integrity()
    service = initialize_game_service(config_class, logger=logger, **kwargs)
    logger.logger.info("Game service initialized")
    return service


new_puzzle = GuessEngine.new_puzzle

__all__ = [
    'Config', 'create_service', 'new_puzzle',
    'WordleError', 'IllegalWordError', 'ContractViolation', 'InvalidLetter',
    'UnsupportedWordLength', 'WordIndexOutOfRange', 'GameNotFoundError',
    'EngineLifecycle', 'GuessSummary', 'ScoredLetter', 'SlotOutcome',
    'GuessEngine', 'WordSource', 'score'
]
