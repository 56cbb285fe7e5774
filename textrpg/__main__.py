"""Command line entry point."""

import logging
import sys
from typing import Optional, TextIO

from pydantic import ValidationError as ConfigValidationError

from textrpg import prompts
from textrpg.config import DEFAULT_LOG_FORMAT, GameConfig
from textrpg.engine.game_engine import Game
from textrpg.exceptions import GameError

logger = logging.getLogger(__name__.split(".")[0])


def _config_error_message(error: ConfigValidationError) -> str:
    details = error.errors()[0]
    field = ".".join(str(part) for part in details["loc"])
    return f"invalid configuration: {field}: {details['msg']}"


def main(
    input_stream: Optional[TextIO] = None,
    output_stream: Optional[TextIO] = None,
    config: Optional[GameConfig] = None,
) -> int:
    """Play one session and return the process exit code."""
    output = output_stream if output_stream is not None else sys.stdout

    try:
        config = config or GameConfig.from_env()
    except ConfigValidationError as e:
        output.write(f"{prompts.ERROR_PREFIX}{_config_error_message(e)}\n")
        return 1

    logging.basicConfig(level=config.log_level, format=DEFAULT_LOG_FORMAT, stream=sys.stderr)

    try:
        game = Game(input_stream=input_stream, output_stream=output, config=config)
        logger.info("Session started")
        game.run()
    except GameError as e:
        logger.error(f"Session aborted: {e}")
        output.write(f"{prompts.ERROR_PREFIX}{e}\n")
        return 1
    except KeyboardInterrupt:
        logger.error("Session interrupted")
        output.write(f"{prompts.ERROR_PREFIX}input interrupted\n")
        return 1
    logger.info("Session finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
