"""
Engine Exceptions

Only IllegalWordError is meant to reach the player. Everything deriving from
ContractViolation signals a caller bug.
"""


class WordleError(Exception):
    """Base class for all engine errors."""


class IllegalWordError(WordleError):
    """A full-length guess that is not in the dictionary for its length."""

    def __init__(self, word: str):
        super().__init__(f"Not a word: {word}")
        self.word = word


class ContractViolation(WordleError, ValueError):
    """Programming error: input no legal sequence of engine calls can produce."""


class InvalidLetter(ContractViolation):
    """Appended character is not a single uppercase A-Z letter."""

    def __init__(self, letter):
        super().__init__(f"Uppercase A-Z only, got {letter!r}")
        self.letter = letter


class UnsupportedWordLength(ContractViolation):
    """No word list is configured for the requested length."""

    def __init__(self, length):
        super().__init__(f"Invalid word size: {length}")
        self.length = length


class WordIndexOutOfRange(ContractViolation, IndexError):
    """Indexed word selection outside the list for that length."""

    def __init__(self, length: int, index: int, size: int):
        super().__init__(f"Word index {index} out of range for length {length} (0..{size - 1})")
        self.length = length
        self.index = index
        self.size = size


class GameNotFoundError(WordleError, KeyError):
    """No puzzle is registered under the given game id."""

    def __init__(self, game_id: str):
        super().__init__(f"Game not found: {game_id}")
        self.game_id = game_id

    def __str__(self):
        return self.args[0]
