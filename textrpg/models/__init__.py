"""Data models module for TextRPG."""

# Stats
from textrpg.models.stats import CharacterStats

# Character
from textrpg.models.character import (
    CLASS_PROFILES,
    Character,
    CharacterClass,
    ClassProfile,
)

__all__ = [
    # Stats
    "CharacterStats",
    # Character
    "Character",
    "CharacterClass",
    "ClassProfile",
    "CLASS_PROFILES",
]
