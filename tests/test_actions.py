"""Tests for training actions and the registry."""

import random

import pytest

from textrpg.engine.actions import (
    Action,
    ActionRegistry,
    AttackAction,
    DefenseAction,
    SpecialAction,
    default_registry,
)


class TestActions:
    """Test suite for the standard actions."""

    def test_attack_message(self, warrior):
        message = AttackAction().execute(warrior, random.Random(2))
        assert message.startswith("Rogan dealt ")
        damage = int(message.split()[2])
        assert 8 <= damage <= 10

    def test_defense_message(self, healer):
        message = DefenseAction().execute(healer, random.Random(2))
        blocked = int(message.split()[2])
        assert message == f"Bren blocked {blocked} damage."
        assert 12 <= blocked <= 15

    def test_special_message(self, mage):
        assert SpecialAction().execute(mage) == "Ilsa used the special ability `Attack 45`"

    def test_actions_do_not_modify_character(self, warrior):
        before = warrior.model_copy()
        rng = random.Random(0)
        for action in default_registry():
            action.execute(warrior, rng)
        assert warrior == before


class TestActionRegistry:
    """Test suite for ActionRegistry."""

    def test_default_registry_names(self):
        assert default_registry().names() == ["attack", "defense", "special"]

    def test_lookup_is_case_sensitive(self):
        registry = default_registry()
        assert isinstance(registry.get("attack"), AttackAction)
        assert registry.get("Attack") is None
        assert "ATTACK" not in registry

    def test_unknown_lookup(self):
        assert default_registry().get("dance") is None

    def test_register_custom_action(self):
        class ShoutAction(Action):
            name = "shout"

            def execute(self, character, rng=None):
                return f"{character.name} shouts."

        registry = ActionRegistry()
        registry.register(ShoutAction())
        assert "shout" in registry
        assert len(registry) == 1

    def test_register_requires_name(self):
        class NamelessAction(Action):
            def execute(self, character, rng=None):
                return ""

        with pytest.raises(ValueError):
            ActionRegistry().register(NamelessAction())
