"""
Game Configuration Constants Module

This module defines the puzzle constants and owns the curated word lists.
Word lists are loaded once per process from JSON and exposed as read-only
tuples keyed by word length.
"""

import json
import os
import string
from functools import lru_cache
from typing import Dict, Final, FrozenSet, Optional, Tuple

from ..exceptions import UnsupportedWordLength
from .app_config import Config

SUPPORTED_WORD_LENGTHS: Final[Tuple[int, ...]] = (4, 5, 6, 7)
"""
Word lengths a puzzle may be created with.
Type: Final[Tuple[int, ...]] - Immutable to prevent accidental modification
"""

UPPERCASE_LETTERS: Final[FrozenSet[str]] = frozenset(string.ascii_uppercase)

DEFAULT_WORD_LIST_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'word_lists.json'
)


def max_guesses_for(word_length: int) -> int:
    """One more guess than there are letters."""
    return word_length + 1


def _word_list_path() -> str:
    return Config.WORD_LIST_PATH or DEFAULT_WORD_LIST_FILE


@lru_cache(maxsize=None)
def _load_word_lists(path: str) -> Dict[int, Tuple[str, ...]]:
    """
    Load every per-length word list from a JSON file.

    Args:
        path: JSON file holding an object of ``{"<length>": [words...]}``

    Returns:
        Dict[int, Tuple[str, ...]]: Word lists keyed by length, in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed or any list fails integrity checks
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError("Word list file must contain an object keyed by word length")

    word_lists = {}
    for key, words in raw.items():
        length = int(key)
        if not isinstance(words, list):
            raise ValueError(f"Word list for length {length} must be an array of words")
        word_lists[length] = tuple(words)
        _check_words(word_lists[length], length)

    return word_lists


def get_word_lists() -> Dict[int, Tuple[str, ...]]:
    """Return all configured word lists (loaded lazily, shared, read-only)."""
    return _load_word_lists(_word_list_path())


def get_word_list(length: int) -> Tuple[str, ...]:
    """
    Return the ordered word list for a length.

    Raises:
        UnsupportedWordLength: If no list is configured for ``length``
    """
    word_lists = get_word_lists()
    if length not in SUPPORTED_WORD_LENGTHS or length not in word_lists:
        raise UnsupportedWordLength(length)
    return word_lists[length]


def _check_words(words: Tuple[str, ...], expected_length: int) -> None:
    if not words:
        raise ValueError(f"Word list for length {expected_length} cannot be empty")

    wrong_length = [word for word in words if len(word) != expected_length]
    if wrong_length:
        raise ValueError(f"Invalid {expected_length} len words {wrong_length}")

    not_caps = [word for word in words if not set(word) <= UPPERCASE_LETTERS]
    if not_caps:
        raise ValueError(f"Invalid cap words {not_caps}")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")


def validate_word_list_integrity(length: Optional[int] = None) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: Every word matches its bucket's length
    2. Character validation: Only uppercase A-Z allowed
    3. Uniqueness validation: No duplicate entries

    Args:
        length: Check only this bucket; every configured bucket when None

    Returns:
        bool: True if the word lists pass all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    lengths = SUPPORTED_WORD_LENGTHS if length is None else (length,)
    for word_length in lengths:
        _check_words(get_word_list(word_length), word_length)
    return True


def get_word_statistics(length: int) -> dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words of this length
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters with counts
    """
    words = get_word_list(length)

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "word_length": length,
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        for word_length in SUPPORTED_WORD_LENGTHS:
            stats = get_word_statistics(word_length)
            print(f" {word_length}-letter statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
