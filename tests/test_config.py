"""Tests for configuration defaults and GameConfig."""

import pytest
from pydantic import ValidationError

from textrpg.config import (
    DEFAULT_BASE_ATTACK,
    DEFAULT_BASE_DEFENSE,
    DEFAULT_BASE_STAMINA,
    LOG_LEVEL_ENV,
    RNG_SEED_ENV,
    GameConfig,
)


class TestConfig:
    """Test suite for configuration."""

    def test_base_stats(self):
        assert (DEFAULT_BASE_ATTACK, DEFAULT_BASE_DEFENSE, DEFAULT_BASE_STAMINA) == (5, 10, 80)

    def test_defaults(self):
        config = GameConfig()
        assert config.log_level == "WARNING"
        assert config.rng_seed is None

    def test_log_level_is_normalized(self):
        assert GameConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            GameConfig(log_level="LOUD")

    def test_seed_is_optional(self):
        assert GameConfig(rng_seed=None).rng_seed is None
        assert GameConfig(rng_seed=42).rng_seed == 42


class TestConfigFromEnv:
    """Test suite for reading settings from the environment."""

    def test_unset_environment(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        monkeypatch.delenv(RNG_SEED_ENV, raising=False)
        config = GameConfig.from_env()
        assert config.log_level == "WARNING"
        assert config.rng_seed is None

    def test_values_are_parsed(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "info")
        monkeypatch.setenv(RNG_SEED_ENV, "42")
        config = GameConfig.from_env()
        assert config.log_level == "INFO"
        assert config.rng_seed == 42

    def test_blank_seed_means_unset(self, monkeypatch):
        monkeypatch.setenv(RNG_SEED_ENV, "")
        assert GameConfig.from_env().rng_seed is None

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "bogus")
        with pytest.raises(ValidationError):
            GameConfig.from_env()

    def test_invalid_seed_rejected(self, monkeypatch):
        monkeypatch.setenv(RNG_SEED_ENV, "abc")
        with pytest.raises(ValidationError):
            GameConfig.from_env()
