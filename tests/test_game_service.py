import json
import threading

import pytest

from wordle_engine import create_service
from wordle_engine.config import Config, TestingConfig
from wordle_engine.exceptions import GameNotFoundError, InvalidLetter, UnsupportedWordLength
from wordle_engine.services import get_game_service
from wordle_engine.services.game_service import ACCEPTED, NOOP, REJECTED, GameService
from wordle_engine.utils import GameLogger


def test_sequential_selection_walks_the_list(service):
    first = service.create_new_game(4)
    second = service.create_new_game(4)
    assert service.sequencer.progress(4) == (2, 33)
    service.type_word(first, "AQUA")
    assert service.submit_guess(first).state.lifecycle == "FOUND"
    service.type_word(second, "BANK")
    assert service.submit_guess(second).state.lifecycle == "FOUND"


def test_explicit_index_overrides_sequence(service):
    game_id = service.create_new_game(4, index=32)
    service.type_word(game_id, "over")
    outcome = service.submit_guess(game_id)
    assert outcome.status == ACCEPTED
    assert outcome.summary.matches == list("OVER")
    assert service.sequencer.progress(4) == (0, 33)


def test_random_selection(quiet_logger):
    service = GameService(Config, logger=quiet_logger)
    game_id = service.create_new_game(5, sequential=False)
    state = service.get_game_state(game_id)
    assert state.word_length == 5
    assert state.answer is None


def test_default_word_length(service):
    state = service.get_game_state(service.create_new_game())
    assert state.word_length == TestingConfig.DEFAULT_WORD_LENGTH
    assert state.max_guesses == TestingConfig.DEFAULT_WORD_LENGTH + 1


def test_submit_outcomes(service):
    game_id = service.create_new_game(4, index=32)

    service.type_word(game_id, "QQA")
    assert service.submit_guess(game_id).status == NOOP

    service.append_letter(game_id, "S")
    outcome = service.submit_guess(game_id)
    assert outcome.status == REJECTED
    assert outcome.error == "Not a word: QQAS"
    assert outcome.state.current_guess == "QQAS"
    assert outcome.state.guesses == []

    for _ in range(4):
        assert service.remove_last_letter(game_id)
    assert service.remove_last_letter(game_id) is False

    service.type_word(game_id, "TORT")
    outcome = service.submit_guess(game_id)
    assert outcome.status == ACCEPTED
    assert outcome.summary.mismatches == ["O", "R"]
    assert outcome.state.guesses == ["TORT"]

    letters = service.get_letter_status(game_id)
    assert letters["O"] == "MISPLACED"
    assert letters["T"] == "ABSENT"
    assert letters["Z"] == "UNUSED"


def test_end_game_and_terminal_noop(service):
    game_id = service.create_new_game(4, index=32)
    assert service.get_end_game_summary(game_id) is None
    for word in ["AQUA", "BANK", "CASH", "DOCK", "GOLF"]:
        service.type_word(game_id, word)
        service.submit_guess(game_id)

    end = service.get_end_game_summary(game_id)
    assert end.won is False
    assert (end.guesses_used, end.max_guesses) == (5, 5)
    assert service.get_game_state(game_id).answer == "OVER"
    assert service.append_letter(game_id, "O") is False
    assert service.submit_guess(game_id).status == NOOP


def test_contract_violations_propagate(service):
    with pytest.raises(UnsupportedWordLength):
        service.create_new_game(9)
    game_id = service.create_new_game(4)
    with pytest.raises(InvalidLetter):
        service.append_letter(game_id, "?")
    with pytest.raises(InvalidLetter):
        service.type_word(game_id, "AB1")
    with pytest.raises(UnsupportedWordLength):
        service.create_new_game(0)
    with pytest.raises(UnsupportedWordLength):
        service.create_new_game(0, sequential=False)


def test_unknown_game(service):
    with pytest.raises(GameNotFoundError):
        service.get_game_state("nope")
    with pytest.raises(KeyError):
        service.submit_guess("nope")
    assert service.delete_game("nope") is False


def test_delete_game(service):
    game_id = service.create_new_game(4)
    assert service.active_game_count() == 1
    assert service.delete_game(game_id) is True
    assert service.active_game_count() == 0


def test_concurrent_typing_never_overfills(service):
    game_id = service.create_new_game(7)
    barrier = threading.Barrier(8)

    def hammer():
        barrier.wait()
        for _ in range(50):
            service.append_letter(game_id, "Z")
            service.remove_last_letter(game_id)
            service.append_letter(game_id, "Z")

    threads = [threading.Thread(target=hammer) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    guess = service.get_game_state(game_id).current_guess
    assert 0 < len(guess) <= 7
    assert set(guess) == {"Z"}
    service.type_word(game_id, "Z" * 10)
    assert service.get_game_state(game_id).current_guess == "Z" * 7


def test_create_service_sets_global(tmp_path, monkeypatch):
    monkeypatch.setattr(TestingConfig, "LOG_DIR", str(tmp_path))
    service = create_service(TestingConfig)
    assert get_game_service() is service
    assert service.selection_mode == "sequential"


def test_game_events_are_logged_as_json(tmp_path):
    logger = GameLogger(str(tmp_path), log_to_file=True)
    service = GameService(TestingConfig, logger=logger)
    game_id = service.create_new_game(4, index=32)
    service.type_word(game_id, "QQAS")
    service.submit_guess(game_id)
    for _ in range(4):
        service.remove_last_letter(game_id)
    service.type_word(game_id, "OVER")
    service.submit_guess(game_id)

    stats = logger.get_log_stats()
    assert stats["game_events"] == 3
    assert stats["user_actions"] == 1

    log_file = next(tmp_path.glob("game_log_*.log"))
    entries = [json.loads(line.split(" | ", 2)[2]) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert [e["action"] for e in entries] == ["game_created", "guess_rejected", "guess_scored", "game_won"]
    assert entries[0]["details"]["game_id"] == game_id
    # The secret only shows up once the puzzle is over.
    assert "OVER" not in json.dumps(entries[0])
    assert entries[-1]["details"]["target_word"] == "OVER"


def test_type_word_with_bad_letter_leaves_guess_untouched(service):
    game_id = service.create_new_game(4, index=32)
    service.append_letter(game_id, "O")
    with pytest.raises(InvalidLetter):
        service.type_word(game_id, "VE1")
    assert service.get_game_state(game_id).current_guess == "O"
    assert service.type_word(game_id, "ver") == 3
    assert service.get_game_state(game_id).current_guess == "OVER"


def test_zero_length_is_not_replaced_by_default(service):
    with pytest.raises(UnsupportedWordLength):
        service.create_new_game(0)
    assert service.active_game_count() == 0
