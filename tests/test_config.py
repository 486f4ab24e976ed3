from wordle_engine.config import Config, TestingConfig, config, max_guesses_for


def test_defaults():
    assert Config.DEFAULT_WORD_LENGTH == 5
    assert Config.SELECTION_MODE in ("random", "sequential")
    assert Config.WORD_LIST_PATH is None or Config.WORD_LIST_PATH


def test_testing_config():
    assert TestingConfig.TESTING is True
    assert TestingConfig.LOG_TO_FILE is False
    assert TestingConfig.SELECTION_MODE == "sequential"
    assert config['testing'] is TestingConfig
    assert config['default'] is config['development']


def test_guess_budget():
    assert [max_guesses_for(n) for n in (4, 5, 6, 7)] == [5, 6, 7, 8]
