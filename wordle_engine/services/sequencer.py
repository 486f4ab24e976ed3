"""
Word Sequencer

Tracks the next word index per length so a player can work through every
word once before the list starts over.
"""

from typing import Dict, Optional, Tuple

from ..config.game_settings import SUPPORTED_WORD_LENGTHS, get_word_list
from ..exceptions import UnsupportedWordLength


class WordSequencer:
    """
    Stateful "next unseen word" counter.

    Stored values are the number of words already handed out for each length.
    Persisting them is up to the caller (see to_dict / from_dict).
    """

    def __init__(self, word_idx: Optional[Dict[int, int]] = None):
        self.word_idx: Dict[int, int] = {}
        for length, index in (word_idx or {}).items():
            self._check_length(int(length))
            self.word_idx[int(length)] = int(index)

    @staticmethod
    def _check_length(length: int) -> None:
        if length not in SUPPORTED_WORD_LENGTHS:
            raise UnsupportedWordLength(length)

    def next_index(self, length: int) -> int:
        """
        Index of the word to play next, advancing the counter.

        When every word of this length has been played the counter wraps to 0.
        """
        self._check_length(length)
        total = len(get_word_list(length))
        index = self.word_idx.get(length, 0)
        if index >= total:
            index = 0
        self.word_idx[length] = index + 1
        return index

    def peek_index(self, length: int) -> int:
        """Index next_index would return, without advancing."""
        self._check_length(length)
        index = self.word_idx.get(length, 0)
        return 0 if index >= len(get_word_list(length)) else index

    def progress(self, length: int) -> Tuple[int, int]:
        """(words played, words available) for this length."""
        self._check_length(length)
        total = len(get_word_list(length))
        return min(self.word_idx.get(length, 0), total), total

    def is_complete(self, length: int) -> bool:
        played, total = self.progress(length)
        return played == total

    def to_dict(self) -> Dict[str, int]:
        return {str(length): index for length, index in self.word_idx.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> 'WordSequencer':
        return cls({int(length): index for length, index in data.items()})
