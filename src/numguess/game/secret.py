# topmark:header:start
#
#   project      : NumGuess
#   file         : secret.py
#   file_relpath : src/numguess/game/secret.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sources for the secret value.

The guessing loop never calls `random` directly; it asks a `SecretSource` for one
integer in an inclusive range. Production code uses `RandomSecretSource`, tests
inject a `FixedSecretSource`.
"""

from __future__ import annotations

import random
from typing import Protocol

from numguess.config.logging import get_logger

logger = get_logger(__name__)


class SecretSource(Protocol):
    """Provides one uniformly distributed integer in ``[low, high]`` on demand."""

    def draw(self, low: int, high: int) -> int:
        """Return an integer ``n`` with ``low <= n <= high``."""
        ...


class RandomSecretSource:
    """Secret source backed by a private `random.Random` instance.

    Args:
        seed (int | None): Optional seed; the same seed always yields the same
            sequence of secrets. ``None`` seeds from system entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def draw(self, low: int, high: int) -> int:
        """Return a uniformly distributed integer in ``[low, high]``."""
        value = self._rng.randint(low, high)
        logger.trace("drew secret %d from [%d, %d] (seed=%r)", value, low, high, self.seed)
        return value


class FixedSecretSource:
    """Secret source that always returns the same value.

    Args:
        value (int): The secret to hand out.
    """

    def __init__(self, value: int) -> None:
        self.value = value

    def draw(self, low: int, high: int) -> int:
        """Return the fixed value.

        Raises:
            ValueError: If the fixed value lies outside ``[low, high]``.
        """
        if not low <= self.value <= high:
            raise ValueError(f"Fixed secret {self.value} is outside [{low}, {high}]")
        return self.value
