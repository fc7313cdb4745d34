"""Food pellets that bugs can eat."""

from __future__ import annotations

import random
from typing import Any, Optional


class Food:
    """A pellet at a fixed position carrying a random amount of satiety."""

    COLOR = (255, 255, 0)
    SIZE = 2

    def __init__(self, position: Any, rng: Optional[random.Random] = None) -> None:
        source = rng if rng is not None else random
        self.position = position
        self.satiety = 50 + source.randrange(500)

    def eat(self) -> int:
        """Report the pellet as eaten and return the energy it gives."""
        print("eaten!")
        return self.satiety

    def __repr__(self) -> str:
        return f"Food(position={self.position!r}, satiety={self.satiety})"