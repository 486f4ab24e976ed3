"""
Word Source

Legality checks and secret-word selection for one word length.
"""

import logging
import random
from typing import FrozenSet, Optional, Tuple

from ..config.game_settings import get_word_list
from ..exceptions import WordIndexOutOfRange

logger = logging.getLogger(__name__)


class WordSource:
    """
    Read-only view over the curated list for a single word length.

    The list order is stable, so an index always names the same word and a
    caller can step through every word once.
    """

    def __init__(self, length: int):
        self.length = length
        self.words: Tuple[str, ...] = get_word_list(length)
        self._lookup: FrozenSet[str] = frozenset(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word) -> bool:
        return self.is_legal(word)

    def is_legal(self, word) -> bool:
        """True if ``word`` (a string or sequence of characters) is a word of this length."""
        if not isinstance(word, str):
            word = ''.join(word)
        return word in self._lookup

    def word_at(self, index: int) -> str:
        """
        Indexed selection.

        Raises:
            WordIndexOutOfRange: If ``index`` is outside the list
        """
        if not 0 <= index < len(self.words):
            raise WordIndexOutOfRange(self.length, index, len(self.words))
        return self.words[index]

    def random_word(self, rng: Optional[random.Random] = None) -> str:
        """Uniform choice over the list."""
        word = (rng or random).choice(self.words)
        logger.debug("Picked random %d-letter word", self.length)
        return word

    def select(self, index: Optional[int] = None, rng: Optional[random.Random] = None) -> str:
        """Indexed selection when ``index`` is given, otherwise random."""
        if index is None:
            return self.random_word(rng)
        return self.word_at(index)
