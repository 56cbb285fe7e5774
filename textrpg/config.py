"""Central configuration defaults and constants for TextRPG."""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Base character stats (game rules, not overridable)
DEFAULT_BASE_ATTACK = 5
DEFAULT_BASE_DEFENSE = 10
DEFAULT_BASE_STAMINA = 80

# Logging
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "[%(name)-19s - %(levelname)5s] %(message)s"

# Environment variables read by GameConfig.from_env
LOG_LEVEL_ENV = "TEXTRPG_LOG_LEVEL"
RNG_SEED_ENV = "TEXTRPG_RNG_SEED"  # unset means seed from the wall clock

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class GameConfig(BaseModel):
    """Runtime settings for a single game session."""

    model_config = ConfigDict(validate_default=True)

    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level name")
    rng_seed: Optional[int] = Field(
        default=None, description="Seed for the random source (None = wall clock)"
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        """Accept standard logging level names only."""
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("rng_seed", mode="before")
    @classmethod
    def blank_seed_is_unset(cls, value):
        """An empty seed string means no seed."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_env(cls) -> "GameConfig":
        """
        Build settings from the environment.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        return cls(
            log_level=os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
            rng_seed=os.getenv(RNG_SEED_ENV),
        )
