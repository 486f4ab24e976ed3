"""
Game Service

Registry of live puzzles keyed by game id. Every mutation of a puzzle runs
under that puzzle's own lock, so one service can be shared by several
callers.
"""

import random
import threading
import uuid
from dataclasses import dataclass
from typing import Dict, Optional

from ..config.app_config import Config
from ..config.game_settings import UPPERCASE_LETTERS
from ..exceptions import ContractViolation, GameNotFoundError, IllegalWordError, InvalidLetter
from ..models.game import EndGameSummary, GuessSummary, PuzzleState
from ..utils.game_logger import GameLogger, get_game_logger
from .engine import GuessEngine
from .keyboard import KeyboardHints
from .sequencer import WordSequencer

ACCEPTED = "accepted"
REJECTED = "rejected"
NOOP = "noop"


@dataclass
class SubmitOutcome:
    """Result of a guess submission as seen by the caller."""
    status: str  # "accepted", "rejected" or "noop"
    summary: Optional[GuessSummary] = None
    error: Optional[str] = None
    state: Optional[PuzzleState] = None


@dataclass
class _GameEntry:
    engine: GuessEngine
    keyboard: KeyboardHints
    lock: threading.Lock


class GameService:
    """
    Core game service managing multiple puzzles.

    This class handles:
    - Puzzle management with unique game IDs
    - Word selection, random or sequential through a WordSequencer
    - Guess submission and keyboard hint tracking
    - State snapshots without exposing answers before the puzzle is over
    """

    def __init__(self, config_class=Config, sequencer: Optional[WordSequencer] = None,
                 rng: Optional[random.Random] = None, logger: Optional[GameLogger] = None):
        self.games: Dict[str, _GameEntry] = {}
        self.default_word_length = config_class.DEFAULT_WORD_LENGTH
        self.selection_mode = config_class.SELECTION_MODE
        self.sequencer = sequencer or WordSequencer()
        self.rng = rng
        self.game_logger = logger or get_game_logger()
        self._registry_lock = threading.Lock()
        self._sequencer_lock = threading.Lock()

    def _get_entry(self, game_id: str) -> _GameEntry:
        with self._registry_lock:
            entry = self.games.get(game_id)
        if entry is None:
            raise GameNotFoundError(game_id)
        return entry

    def create_new_game(self, word_length: Optional[int] = None, index: Optional[int] = None,
                        sequential: Optional[bool] = None) -> str:
        """
        Creates a new puzzle.

        Args:
            word_length: Letters in the secret word (configured default when None)
            index: Explicit word index; overrides the selection mode
            sequential: Take the next index from the sequencer; defaults to
                the configured selection mode

        Returns:
            str: Unique game ID for this puzzle

        Raises:
            UnsupportedWordLength: If no word list exists for ``word_length``
            WordIndexOutOfRange: If ``index`` is outside the list
        """
        if word_length is None:
            word_length = self.default_word_length
        if sequential is None:
            sequential = self.selection_mode == "sequential"

        try:
            if index is None and sequential:
                with self._sequencer_lock:
                    index = self.sequencer.next_index(word_length)
            engine = GuessEngine.new_puzzle(word_length, index, self.rng)
        except ContractViolation as e:
            self.game_logger.log_error(e, 'new_game')
            raise

        game_id = str(uuid.uuid4())
        with self._registry_lock:
            self.games[game_id] = _GameEntry(engine, KeyboardHints(), threading.Lock())

        self.game_logger.log_game_event(
            game_id, 'game_created',
            word_length=word_length, max_guesses=engine.max_guesses,
            selection='indexed' if index is not None else 'random', word_index=index
        )
        return game_id

    def append_letter(self, game_id: str, letter: str) -> bool:
        """Add a letter to the current guess. False when nothing happened."""
        entry = self._get_entry(game_id)
        with entry.lock:
            try:
                return entry.engine.append_letter(letter)
            except ContractViolation as e:
                self.game_logger.log_error(e, 'append_letter', game_id)
                raise

    def remove_last_letter(self, game_id: str) -> bool:
        """Remove the last letter of the current guess. False when nothing happened."""
        entry = self._get_entry(game_id)
        with entry.lock:
            return entry.engine.remove_last_letter()

    def type_word(self, game_id: str, word: str) -> int:
        """
        Append every letter of ``word`` in one locked step.

        Nothing is appended if any character is not an uppercase letter.

        Returns:
            int: Number of letters actually appended
        """
        entry = self._get_entry(game_id)
        with entry.lock:
            letters = word.upper()
            bad = next((letter for letter in letters if letter not in UPPERCASE_LETTERS), None)
            if bad is not None:
                error = InvalidLetter(bad)
                self.game_logger.log_error(error, 'type_word', game_id)
                raise error
            return sum(1 for letter in letters if entry.engine.append_letter(letter))

    def submit_guess(self, game_id: str) -> SubmitOutcome:
        """
        Submits the current guess.

        Returns:
            SubmitOutcome: ``accepted`` with the guess summary, ``rejected``
            when the guess is not a word, ``noop`` when the guess is not full
            or the puzzle is over
        """
        entry = self._get_entry(game_id)
        with entry.lock:
            engine = entry.engine
            try:
                summary = engine.submit()
            except IllegalWordError as e:
                self.game_logger.log_user_action(
                    'guess_rejected', game_id, attempted_guess=e.word, reason=str(e)
                )
                return SubmitOutcome(REJECTED, error=str(e), state=engine.snapshot(game_id))

            if summary is None:
                return SubmitOutcome(NOOP, state=engine.snapshot(game_id))

            entry.keyboard.apply(summary)
            self.game_logger.log_game_event(
                game_id, 'guess_scored',
                guess_number=engine.guesses_used, max_guesses=engine.max_guesses,
                lifecycle=engine.lifecycle.value
            )

            end_game = engine.end_game_summary()
            if end_game is not None:
                self.game_logger.log_game_event(
                    game_id, 'game_won' if end_game.won else 'game_lost',
                    guesses_used=end_game.guesses_used, max_guesses=end_game.max_guesses,
                    target_word=end_game.secret
                )

            return SubmitOutcome(ACCEPTED, summary=summary, state=engine.snapshot(game_id))

    def get_game_state(self, game_id: str) -> PuzzleState:
        """Returns a snapshot of the puzzle (answer hidden until it is over)."""
        entry = self._get_entry(game_id)
        with entry.lock:
            return entry.engine.snapshot(game_id)

    def get_letter_status(self, game_id: str) -> Dict[str, str]:
        """Keyboard hint per letter A-Z."""
        entry = self._get_entry(game_id)
        with entry.lock:
            return entry.keyboard.as_dict()

    def get_end_game_summary(self, game_id: str) -> Optional[EndGameSummary]:
        entry = self._get_entry(game_id)
        with entry.lock:
            return entry.engine.end_game_summary()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a puzzle from memory.

        Returns:
            bool: True if the puzzle was deleted, False if not found
        """
        with self._registry_lock:
            removed = self.games.pop(game_id, None)
        if removed is None:
            return False
        self.game_logger.log_game_event(game_id, 'game_deleted')
        return True

    def active_game_count(self) -> int:
        with self._registry_lock:
            return len(self.games)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=Config, **kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(config_class, **kwargs)
    return _game_service
