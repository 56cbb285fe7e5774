"""Pytest configuration and fixtures."""

import io
import random

import pytest

from textrpg.config import GameConfig
from textrpg.engine.game_engine import Game
from textrpg.models.character import Character, CharacterClass


@pytest.fixture
def rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def warrior():
    return Character(name="Rogan", character_class=CharacterClass.WARRIOR)


@pytest.fixture
def mage():
    return Character(name="Ilsa", character_class=CharacterClass.MAGE)


@pytest.fixture
def healer():
    return Character(name="Bren", character_class=CharacterClass.HEALER)


@pytest.fixture
def make_game(rng):
    """Build a game fed by scripted lines. Returns (game, output)."""

    def _make(lines, registry=None):
        text = "".join(f"{line}\n" for line in lines)
        output = io.StringIO()
        game = Game(
            input_stream=io.StringIO(text),
            output_stream=output,
            rng=rng,
            registry=registry,
            config=GameConfig(rng_seed=1234),
        )
        return game, output

    return _make
