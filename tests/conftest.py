import random

import pytest

from wordle_engine.config import TestingConfig
from wordle_engine.services import GameService, GuessEngine, WordSource
from wordle_engine.utils import GameLogger


@pytest.fixture
def make_engine():
    def _make(secret, length=None):
        return GuessEngine(secret, WordSource(length or len(secret)))
    return _make


@pytest.fixture
def quiet_logger():
    return GameLogger(log_to_file=False)


@pytest.fixture
def service(quiet_logger):
    return GameService(TestingConfig, rng=random.Random(7), logger=quiet_logger)
