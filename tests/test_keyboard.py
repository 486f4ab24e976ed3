from wordle_engine.models import GuessSummary, LetterStatus
from wordle_engine.services import KeyboardHints, score, summarize


def test_all_letters_start_unused():
    hints = KeyboardHints()
    assert len(hints.letter_status) == 26
    assert set(hints.as_dict().values()) == {"UNUSED"}


def test_matched_beats_absent_in_same_guess():
    hints = KeyboardHints()
    hints.apply(summarize("LOOKS", score("SHOTS", "LOOKS")))
    assert hints.status_of("O") is LetterStatus.MATCHED
    assert hints.status_of("S") is LetterStatus.MATCHED
    assert hints.status_of("L") is LetterStatus.ABSENT
    assert hints.status_of("K") is LetterStatus.ABSENT
    assert hints.status_of("Z") is LetterStatus.UNUSED


def test_status_only_improves():
    hints = KeyboardHints()
    hints.apply(GuessSummary("OVER", mismatches=["O", "R"], no_matches=["V", "E"]))
    assert hints.status_of("O") is LetterStatus.MISPLACED

    hints.apply(GuessSummary("ROOT", matches=["O"], no_matches=["R", "O", "T"]))
    assert hints.status_of("O") is LetterStatus.MATCHED
    assert hints.status_of("R") is LetterStatus.MISPLACED

    hints.apply(GuessSummary("OAKS", mismatches=["O"], no_matches=["A", "K", "S"]))
    assert hints.status_of("O") is LetterStatus.MATCHED
