"""Random page-index providers used by the random-selection helpers."""

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomIndexProvider(Protocol):
    """Protocol for anything that can draw an index from ``[0, stop)``.

    ``random.Random`` and ``random.SystemRandom`` both satisfy it, so tests
    can pass ``random.Random(seed)`` to make the selected page repeatable.
    """

    def randrange(self, stop: int) -> int:
        """Return an integer drawn uniformly from ``[0, stop)``."""
        ...


def default_random_source() -> random.Random:
    """Create a generator seeded once from OS entropy."""
    return random.Random()
