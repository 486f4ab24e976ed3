"""
Services Package

Contains the scoring algorithm, the puzzle state machine and the services
built on top of it.
"""

from .scoring import score, summarize
from .word_source import WordSource
from .engine import GuessEngine
from .sequencer import WordSequencer
from .keyboard import KeyboardHints
from .game_service import GameService, SubmitOutcome, get_game_service, initialize_game_service

__all__ = [
    'score', 'summarize',
    'WordSource', 'GuessEngine', 'WordSequencer', 'KeyboardHints',
    'GameService', 'SubmitOutcome', 'get_game_service', 'initialize_game_service'
]
