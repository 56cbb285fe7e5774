"""Training actions and the command registry."""

import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from textrpg.models.character import Character


class Action(ABC):
    """Stateless named operation performed by a character."""

    name: str = ""

    @abstractmethod
    def execute(self, character: Character, rng: Optional[random.Random] = None) -> str:
        """Compute the outcome for the character and describe it."""


class AttackAction(Action):
    """Roll attack damage."""

    name = "attack"

    def execute(self, character: Character, rng: Optional[random.Random] = None) -> str:
        damage = character.calculate_attack_damage(rng)
        return f"{character.name} dealt {damage} damage to the opponent."


class DefenseAction(Action):
    """Roll blocked damage."""

    name = "defense"

    def execute(self, character: Character, rng: Optional[random.Random] = None) -> str:
        defense = character.calculate_defense_value(rng)
        return f"{character.name} blocked {defense} damage."


class SpecialAction(Action):
    """Report the class special ability."""

    name = "special"

    def execute(self, character: Character, rng: Optional[random.Random] = None) -> str:
        return character.use_special_ability()


class ActionRegistry:
    """Maps command names to actions. Lookups are exact and case-sensitive."""

    def __init__(self) -> None:
        self._actions: dict[str, Action] = {}

    def register(self, action: Action) -> None:
        """Register an action under its command name."""
        if not action.name:
            raise ValueError("Action must have a command name")
        self._actions[action.name] = action

    def get(self, name: str) -> Optional[Action]:
        """Action registered under exactly this name, if any."""
        return self._actions.get(name)

    def names(self) -> list[str]:
        """Command names in registration order."""
        return list(self._actions)

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions.values())

    def __len__(self) -> int:
        return len(self._actions)


def default_registry() -> ActionRegistry:
    """Registry with the standard training actions."""
    registry = ActionRegistry()
    registry.register(AttackAction())
    registry.register(DefenseAction())
    registry.register(SpecialAction())
    return registry
