"""Character statistics models."""

from pydantic import BaseModel, ConfigDict, Field

from textrpg.config import DEFAULT_BASE_ATTACK, DEFAULT_BASE_DEFENSE, DEFAULT_BASE_STAMINA


class CharacterStats(BaseModel):
    """Numeric character stats. No clamping is applied."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    attack: int = Field(default=DEFAULT_BASE_ATTACK, description="Attack stat")
    defense: int = Field(default=DEFAULT_BASE_DEFENSE, description="Defense stat")
    stamina: int = Field(default=DEFAULT_BASE_STAMINA, description="Stamina stat")
