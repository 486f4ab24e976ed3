"""
Guess Scoring

Pure letter-by-letter evaluation of a guess against the secret word. Safe to
share between threads.
"""

from typing import List, Sequence

from ..models.game import GuessSummary, ScoredLetter, SlotOutcome


def score(secret: Sequence[str], guess: Sequence[str]) -> List[ScoredLetter]:
    """
    Score ``guess`` against ``secret``.

    Position pass: a letter in the right place is MATCHED, a letter found
    anywhere else in the secret is tentatively MISPLACED, anything else is
    ABSENT.

    Correction pass: for each letter of the secret, once every occurrence of
    it is covered by a MATCHED slot, all other slots holding that letter are
    downgraded to ABSENT. With secret SHOTS and guess LOOKS the second O
    matches, so the first O becomes ABSENT rather than MISPLACED.

    Args:
        secret: The hidden word
        guess: The submitted word, same length as ``secret``

    Returns:
        List[ScoredLetter]: One entry per position

    Raises:
        ValueError: If the lengths differ
    """
    if len(secret) != len(guess):
        raise ValueError("Secret and guess must be the same length")

    row = []
    for i, letter in enumerate(guess):
        if secret[i] == letter:
            row.append(ScoredLetter(letter, SlotOutcome.MATCHED))
        elif letter in secret:
            row.append(ScoredLetter(letter, SlotOutcome.MISPLACED))
        else:
            row.append(ScoredLetter(letter, SlotOutcome.ABSENT))

    _remove_false_mismatches(secret, row)
    return row


def _remove_false_mismatches(secret: Sequence[str], row: List[ScoredLetter]) -> None:
    # Counts are taken from the row as it stands, once per letter of the secret.
    for letter in secret:
        instances = sum(1 for c in secret if c == letter)
        matches = sum(1 for slot in row if slot.letter == letter and slot.outcome is SlotOutcome.MATCHED)
        if instances == matches:
            for i, slot in enumerate(row):
                if slot.letter == letter and slot.outcome is not SlotOutcome.MATCHED:
                    row[i] = ScoredLetter(letter, SlotOutcome.ABSENT)


def summarize(word: str, row: Sequence[ScoredLetter]) -> GuessSummary:
    """Partition a scored row by outcome, one entry per occurrence."""
    summary = GuessSummary(word=word)
    for slot in row:
        if slot.outcome is SlotOutcome.MATCHED:
            summary.matches.append(slot.letter)
        elif slot.outcome is SlotOutcome.MISPLACED:
            summary.mismatches.append(slot.letter)
        elif slot.outcome is SlotOutcome.ABSENT:
            summary.no_matches.append(slot.letter)
        else:
            raise ValueError(f"Unknown slot outcome: {slot.outcome}")
    return summary


def is_solved(row: Sequence[ScoredLetter]) -> bool:
    return all(slot.outcome is SlotOutcome.MATCHED for slot in row)
