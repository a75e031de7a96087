# core/coordinate.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import random


@dataclass
class Coordinate:
    x: int
    y: int

    @classmethod
    def random(cls, max_x: int, max_y: int, rng: Optional[random.Random] = None) -> "Coordinate":
        """Uniform over [0, max_x) x [0, max_y)."""
        rng = rng or random
        return cls(rng.randrange(max_x), rng.randrange(max_y))


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    @classmethod
    def from_key(cls, symbol: str) -> Optional["Direction"]:
        if not isinstance(symbol, str) or len(symbol) != 1:
            return None
        return _KEYMAP.get(symbol.lower())


_KEYMAP = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}
