"""Game engine package."""

from textrpg.engine.actions import (
    Action,
    ActionRegistry,
    AttackAction,
    DefenseAction,
    SpecialAction,
    default_registry,
)
from textrpg.engine.game_engine import Game

__all__ = [
    "Action",
    "ActionRegistry",
    "AttackAction",
    "DefenseAction",
    "SpecialAction",
    "default_registry",
    "Game",
]
