"""Character model and per-class formula tables."""

import random
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from textrpg.dice import DiceRoller
from textrpg.models.stats import CharacterStats


class CharacterClass(str, Enum):
    """Playable character classes."""

    WARRIOR = "warrior"
    MAGE = "mage"
    HEALER = "healer"

    @property
    def display_name(self) -> str:
        """Display name of the class."""
        return self.value.capitalize()

    @classmethod
    def from_token(cls, token: str) -> Optional["CharacterClass"]:
        """Match a typed token against class names, ignoring case."""
        try:
            return cls(token.lower())
        except ValueError:
            return None


class ClassProfile(BaseModel):
    """Formula table and flavor text for one class."""

    model_config = ConfigDict(frozen=True)

    damage_range: tuple[int, int] = Field(description="Bonus range added to attack")
    defense_range: tuple[int, int] = Field(description="Bonus range added to defense")
    special_label: str = Field(description="Stat name shown by the special ability")
    special_stat: Literal["attack", "defense", "stamina"] = Field(
        description="Stat the special ability derives its value from"
    )
    special_bonus: int = Field(description="Amount added to the special stat")
    blurb: str = Field(description="Shown while the class is being chosen")
    greeting: str = Field(description="Template shown to a character of this class")


CLASS_PROFILES: dict[CharacterClass, ClassProfile] = {
    CharacterClass.WARRIOR: ClassProfile(
        damage_range=(3, 5),
        defense_range=(5, 10),
        special_label="Stamina",
        special_stat="stamina",
        special_bonus=25,
        blurb="Warrior - a daring melee fighter. Strong, hardy and brave.",
        greeting="{name}, you are a Warrior - an excellent close-combat fighter.",
    ),
    CharacterClass.MAGE: ClassProfile(
        damage_range=(5, 10),
        defense_range=(-2, 2),
        special_label="Attack",
        special_stat="attack",
        special_bonus=40,
        blurb="Mage - a resourceful ranged fighter. Possesses great intellect.",
        greeting="{name}, you are a Mage - a superb tamer of the elements.",
    ),
    CharacterClass.HEALER: ClassProfile(
        damage_range=(-3, -1),
        defense_range=(2, 5),
        special_label="Defense",
        special_stat="defense",
        special_bonus=30,
        blurb="Healer - a powerful spellcaster. Draws strength from nature, faith and spirits.",
        greeting="{name}, you are a Healer - a sorcerer able to heal wounds.",
    ),
}

UNKNOWN_CLASS_MESSAGE = "unknown character class"


class Character(BaseModel):
    """A player character. Formulas never write back into stats."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(min_length=1, description="Character name")
    character_class: CharacterClass = Field(description="Chosen class")
    stats: CharacterStats = Field(default_factory=CharacterStats, description="Current stats")

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        """Names are stored trimmed and must not be blank."""
        value = value.strip()
        if not value:
            raise ValueError("name cannot be empty")
        return value

    @property
    def profile(self) -> Optional[ClassProfile]:
        """Formula table for this character's class, if known."""
        return CLASS_PROFILES.get(self.character_class)

    def calculate_attack_damage(self, rng: Optional[random.Random] = None) -> int:
        """Base attack plus a class-specific roll."""
        profile = self.profile
        if profile is None:
            return self.stats.attack
        return DiceRoller.roll_bonus(self.stats.attack, profile.damage_range, rng)["total"]

    def calculate_defense_value(self, rng: Optional[random.Random] = None) -> int:
        """Base defense plus a class-specific roll."""
        profile = self.profile
        if profile is None:
            return self.stats.defense
        return DiceRoller.roll_bonus(self.stats.defense, profile.defense_range, rng)["total"]

    def special_ability_value(self) -> Optional[tuple[str, int]]:
        """Label and derived value of the special ability, without storing it."""
        profile = self.profile
        if profile is None:
            return None
        base = getattr(self.stats, profile.special_stat)
        return profile.special_label, base + profile.special_bonus

    def use_special_ability(self) -> str:
        """Describe the special ability. Stats are left untouched."""
        ability = self.special_ability_value()
        if ability is None:
            return UNKNOWN_CLASS_MESSAGE
        label, value = ability
        return f"{self.name} used the special ability `{label} {value}`"

    def show_class_description(self) -> Optional[str]:
        """Class greeting for this character, or None for an unknown class."""
        profile = self.profile
        if profile is None:
            return None
        return profile.greeting.format(name=self.name)
