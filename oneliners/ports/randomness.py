from typing import Protocol


class RandomPort(Protocol):
    """Non-cryptographic randomness source."""

    def random(self) -> float:
        """Return a float in [0, 1)."""
        ...

    def randbelow(self, n: int) -> int:
        """Return an int in [0, n)."""
        ...
