"""Interactive game session: character creation followed by training."""

import logging
import random
import sys
from typing import Optional, TextIO

from textrpg import prompts
from textrpg.config import GameConfig
from textrpg.dice import new_rng
from textrpg.engine.actions import ActionRegistry, default_registry
from textrpg.exceptions import GameError, InputStreamError, ValidationError
from textrpg.models.character import CLASS_PROFILES, Character, CharacterClass
from textrpg.models.stats import CharacterStats

logger = logging.getLogger(__name__)


class Game:
    """Line-oriented game session over a pair of text streams."""

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
        registry: Optional[ActionRegistry] = None,
        config: Optional[GameConfig] = None,
    ) -> None:
        """
        Initialize game session.

        Args:
            input_stream: Where player lines are read from (stdin by default)
            output_stream: Where prompts and results are written (stdout by default)
            rng: Random source for all rolls (seeded from config if omitted)
            registry: Available training actions (attack, defense, special by default)
            config: Session settings
        """
        self._config = config or GameConfig()
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stdout
        self._rng = rng if rng is not None else new_rng(self._config.rng_seed)
        self._actions = registry if registry is not None else default_registry()

    @property
    def actions(self) -> ActionRegistry:
        """Get the action registry."""
        return self._actions

    def _print(self, text: str = "") -> None:
        self._output.write(text + "\n")

    def read_input(self, prompt: str) -> str:
        """
        Write a prompt and read one line with surrounding whitespace removed.

        Raises:
            InputStreamError: If the stream is exhausted or cannot be read
        """
        self._output.write(prompt)
        self._output.flush()
        try:
            line = self._input.readline()
        except (OSError, ValueError) as e:
            raise InputStreamError("failed to read input") from e
        if not line:
            raise InputStreamError("failed to read input")
        return line.strip()

    def create_character(self) -> Character:
        """
        Ask for a name and a class.

        Raises:
            ValidationError: If the name is empty
            InputStreamError: If input cannot be read
        """
        name = self.read_input(prompts.NAME_PROMPT)
        if not name:
            raise ValidationError("name cannot be empty")

        stats = CharacterStats()
        self._print(prompts.HELLO.format(name=name))
        self._print(prompts.BASE_STATS.format(stamina=stats.stamina, attack=stats.attack, defense=stats.defense))
        self._print(prompts.PATHS_INTRO)
        self._print(", ".join(character_class.display_name for character_class in CharacterClass))

        character_class = self.choose_character_class()
        character = Character(name=name, character_class=character_class, stats=stats)
        logger.info(f"Character created: name={character.name}, class={character.character_class.value}")
        return character

    def choose_character_class(self) -> CharacterClass:
        """Repeat class selection until a class is confirmed."""
        while True:
            token = self.read_input(prompts.CLASS_PROMPT)
            character_class = CharacterClass.from_token(token)
            if character_class is None:
                logger.info(f"Unknown class token: {token!r}")
                self._print(prompts.UNKNOWN_CLASS)
                continue

            self._print(CLASS_PROFILES[character_class].blurb)

            confirm = self.read_input(prompts.CONFIRM_PROMPT)
            if confirm.lower() == prompts.CONFIRM_TOKEN:
                return character_class
            logger.debug(f"Class {character_class.value} not confirmed")

    def show_instructions(self) -> None:
        """List the training commands."""
        for line in prompts.INSTRUCTIONS:
            self._print(line)

    def start_training(self, character: Character) -> None:
        """
        Dispatch typed commands until the player skips.

        Raises:
            InputStreamError: If input cannot be read
        """
        description = character.show_class_description()
        if description is not None:
            self._print(description)
        self.show_instructions()

        while True:
            command = self.read_input(prompts.COMMAND_PROMPT)

            if command == prompts.SKIP_COMMAND:
                self._print(prompts.TRAINING_OVER)
                return

            action = self._actions.get(command)
            if action is None:
                logger.info(f"Unknown command: {command!r}")
                self._print(
                    prompts.UNKNOWN_COMMAND.format(
                        commands=", ".join(self._actions.names()), skip=prompts.SKIP_COMMAND
                    )
                )
                continue

            logger.debug(f"Executing {action.name} for {character.name}")
            self._print(action.execute(character, self._rng))

    def run(self) -> None:
        """
        Run the whole session.

        Raises:
            GameError: On input failure or an invalid name
        """
        self._print(prompts.WELCOME)
        self._print(prompts.BEFORE_START)

        try:
            character = self.create_character()
        except GameError as e:
            raise type(e)(f"character creation error: {e}") from e

        self.start_training(character)
