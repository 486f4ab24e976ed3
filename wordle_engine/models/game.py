"""
Game Data Models

Contains all puzzle-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class SlotOutcome(Enum):
    """Scoring outcome of one letter position."""
    MATCHED = "MATCHED"      # correct letter, correct position
    MISPLACED = "MISPLACED"  # correct letter, wrong position
    ABSENT = "ABSENT"        # not in the word, or already fully accounted for


class LetterStatus(Enum):
    """Keyboard hint for one letter across every guess so far."""
    MATCHED = "MATCHED"
    MISPLACED = "MISPLACED"
    ABSENT = "ABSENT"
    UNUSED = "UNUSED"


class EngineLifecycle(Enum):
    """Overall phase of a puzzle. FOUND and OUT_OF_GUESSES are terminal."""
    GUESSING = "GUESSING"
    FOUND = "FOUND"
    OUT_OF_GUESSES = "OUT_OF_GUESSES"

    @property
    def is_terminal(self) -> bool:
        return self is not EngineLifecycle.GUESSING


@dataclass(frozen=True)
class ScoredLetter:
    """A guessed character and its outcome."""
    letter: str
    outcome: SlotOutcome


@dataclass
class GuessSummary:
    """
    Per-occurrence partition of one scored guess.

    Every letter of ``word`` lands in exactly one of the three lists, so their
    combined length is the word length. Lists are not deduplicated.
    """
    word: str
    matches: List[str] = field(default_factory=list)
    mismatches: List[str] = field(default_factory=list)
    no_matches: List[str] = field(default_factory=list)


@dataclass
class EndGameSummary:
    """Everything needed to render win/lose messaging."""
    won: bool
    guesses_used: int
    max_guesses: int
    secret: str


@dataclass
class PuzzleState:
    """Read-only snapshot of a puzzle for callers."""
    word_length: int
    max_guesses: int
    lifecycle: str
    guesses_used: int
    current_guess: str
    guesses: List[str]
    guess_results: List[List[ScoredLetter]]
    answer: Optional[str] = None  # Only included when the puzzle is over
    game_id: Optional[str] = None
