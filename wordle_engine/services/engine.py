"""
Guess Engine

State machine for a single puzzle: the secret word, the in-progress guess,
the scored history and the lifecycle. Not thread-safe; serialize calls per
instance (GameService does this with one lock per puzzle).
"""

import logging
import random
from typing import List, Optional

from ..config.game_settings import UPPERCASE_LETTERS, max_guesses_for
from ..exceptions import ContractViolation, IllegalWordError, InvalidLetter
from ..models.game import (
    EndGameSummary, EngineLifecycle, GuessSummary, PuzzleState, ScoredLetter
)
from .scoring import is_solved, score, summarize
from .word_source import WordSource

logger = logging.getLogger(__name__)


class GuessEngine:
    """
    One puzzle instance.

    Input goes through append_letter / remove_last_letter / submit. Once the
    lifecycle leaves GUESSING neither the buffer nor the history changes.
    """

    def __init__(self, secret: str, word_source: WordSource):
        if len(secret) != word_source.length or not set(secret) <= UPPERCASE_LETTERS:
            raise ContractViolation(
                f"Secret must be {word_source.length} uppercase letters, got {secret!r}"
            )
        self.word_source = word_source
        self.word_length = word_source.length
        self.secret = secret
        self.max_guesses = max_guesses_for(self.word_length)
        self.lifecycle = EngineLifecycle.GUESSING
        self._history: List[List[ScoredLetter]] = []
        self._buffer: List[str] = []

    @classmethod
    def new_puzzle(cls, length: int, index: Optional[int] = None,
                   rng: Optional[random.Random] = None) -> 'GuessEngine':
        """
        Create a puzzle of ``length`` letters.

        Args:
            length: Word length; must have a configured word list
            index: Pick this word from the ordered list; random when None
            rng: Random source for random selection

        Raises:
            UnsupportedWordLength: If ``length`` has no word list
            WordIndexOutOfRange: If ``index`` is outside the list
        """
        word_source = WordSource(length)
        return cls(word_source.select(index, rng), word_source)

    @property
    def history(self) -> List[List[ScoredLetter]]:
        return [list(row) for row in self._history]

    @property
    def current_buffer(self) -> str:
        return ''.join(self._buffer)

    @property
    def guesses_used(self) -> int:
        return len(self._history)

    @property
    def is_over(self) -> bool:
        return self.lifecycle.is_terminal

    def append_letter(self, letter: str) -> bool:
        """
        Add a letter to the guess.

        Returns:
            bool: False when nothing happened (puzzle over or guess full)

        Raises:
            InvalidLetter: If ``letter`` is not a single uppercase A-Z character
        """
        if not isinstance(letter, str) or letter not in UPPERCASE_LETTERS:
            raise InvalidLetter(letter)
        if self.lifecycle is not EngineLifecycle.GUESSING or len(self._buffer) >= self.word_length:
            return False
        self._buffer.append(letter)
        return True

    def remove_last_letter(self) -> bool:
        """Backspace. Returns False when nothing happened."""
        if self.lifecycle is not EngineLifecycle.GUESSING or not self._buffer:
            return False
        self._buffer.pop()
        return True

    def submit(self) -> Optional[GuessSummary]:
        """
        Score the current guess.

        Returns:
            GuessSummary for the new row, or None when the puzzle is over or
            the guess is not full yet

        Raises:
            IllegalWordError: If the guess is not a word; the guess is kept
                so it can be edited
        """
        if self.lifecycle is not EngineLifecycle.GUESSING or len(self._buffer) != self.word_length:
            return None

        word = self.current_buffer
        if not self.word_source.is_legal(word):
            raise IllegalWordError(word)

        row = score(self.secret, word)
        self._history.append(row)
        self._buffer.clear()

        if is_solved(row):
            self.lifecycle = EngineLifecycle.FOUND
        elif len(self._history) >= self.max_guesses:
            self.lifecycle = EngineLifecycle.OUT_OF_GUESSES

        logger.debug("Guess %d/%d scored, lifecycle %s",
                     len(self._history), self.max_guesses, self.lifecycle.value)
        return summarize(word, row)

    def end_game_summary(self) -> Optional[EndGameSummary]:
        """Guesses used and allowed, once the puzzle is over."""
        if not self.is_over:
            return None
        return EndGameSummary(
            won=self.lifecycle is EngineLifecycle.FOUND,
            guesses_used=self.guesses_used,
            max_guesses=self.max_guesses,
            secret=self.secret
        )

    def snapshot(self, game_id: Optional[str] = None) -> PuzzleState:
        """Current state without revealing the secret unless the puzzle is over."""
        return PuzzleState(
            word_length=self.word_length,
            max_guesses=self.max_guesses,
            lifecycle=self.lifecycle.value,
            guesses_used=self.guesses_used,
            current_guess=self.current_buffer,
            guesses=[''.join(slot.letter for slot in row) for row in self._history],
            guess_results=self.history,
            answer=self.secret if self.is_over else None,
            game_id=game_id
        )
