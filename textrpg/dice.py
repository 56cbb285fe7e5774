"""Random rolls for character formulas."""

import logging
import random
import time
from typing import Optional

logger = logging.getLogger(__name__)


def new_rng(seed: Optional[int] = None) -> random.Random:
    """Create a random source, seeded from the wall clock when no seed is given."""
    if seed is None:
        seed = time.time_ns()
    logger.info(f"Random source seeded with {seed}")
    return random.Random(seed)


class DiceRoller:
    """Handles the inclusive range rolls used by class formulas."""

    @staticmethod
    def rand_range(low: int, high: int, rng: Optional[random.Random] = None) -> int:
        """
        Roll an integer in [low, high], both ends included.

        Args:
            low: One bound of the range
            high: The other bound; swapped with low if smaller
            rng: Random source to draw from (module random if omitted)

        Returns:
            The rolled integer
        """
        if low > high:
            low, high = high, low
        source = rng if rng is not None else random
        return source.randint(low, high)

    @staticmethod
    def roll_bonus(base: int, bonus_range: tuple[int, int], rng: Optional[random.Random] = None) -> dict[str, int]:
        """Roll a bonus from a range and add it to a base value."""
        bonus = DiceRoller.rand_range(bonus_range[0], bonus_range[1], rng)
        return {
            "total": base + bonus,
            "base": base,
            "bonus": bonus,
        }
