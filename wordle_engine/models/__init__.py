"""
Data Models Package

Contains all data models used throughout the engine.
"""

from .game import (
    SlotOutcome, LetterStatus, EngineLifecycle, ScoredLetter,
    GuessSummary, EndGameSummary, PuzzleState
)

__all__ = [
    'SlotOutcome', 'LetterStatus', 'EngineLifecycle', 'ScoredLetter',
    'GuessSummary', 'EndGameSummary', 'PuzzleState'
]
