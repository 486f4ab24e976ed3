"""
Keyboard Hints

Aggregates guess summaries into one status per letter for an on-screen
keyboard.
"""

import string
from typing import Dict

from ..models.game import GuessSummary, LetterStatus


class KeyboardHints:
    """
    Per-letter status that only ever improves:
    MATCHED over MISPLACED over ABSENT over UNUSED.
    """

    def __init__(self):
        self.letter_status: Dict[str, LetterStatus] = {
            letter: LetterStatus.UNUSED for letter in string.ascii_uppercase
        }

    def apply(self, summary: GuessSummary) -> None:
        for letter in summary.matches:
            self.letter_status[letter] = LetterStatus.MATCHED
        for letter in summary.mismatches:
            if self.letter_status[letter] is not LetterStatus.MATCHED:
                self.letter_status[letter] = LetterStatus.MISPLACED
        for letter in summary.no_matches:
            if self.letter_status[letter] is LetterStatus.UNUSED:
                self.letter_status[letter] = LetterStatus.ABSENT

    def status_of(self, letter: str) -> LetterStatus:
        return self.letter_status[letter]

    def as_dict(self) -> Dict[str, str]:
        """Status values as plain strings, for JSON serialization."""
        return {letter: status.value for letter, status in self.letter_status.items()}
