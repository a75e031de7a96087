# core/game_grid.py  (render cache, no rules)
from __future__ import annotations
from typing import Iterable
import numpy as np
from .coordinate import Coordinate


class GameGrid:
    """Row-major occupancy matrix, shape (height, width)."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.data = np.zeros((height, width), dtype=bool)

    def clear(self) -> None:
        self.data[:, :] = False

    def set_all(self, coordinates: Iterable[Coordinate], value: bool) -> None:
        # callers only pass wrapped / generated coordinates, so no bounds check
        for c in coordinates:
            self.data[c.y, c.x] = value

    def copy(self) -> "GameGrid":
        g = GameGrid(self.width, self.height)
        g.data[:, :] = self.data
        return g

    def frozen(self) -> np.ndarray:
        arr = self.data.copy()
        arr.flags.writeable = False
        return arr

    def count(self) -> int:
        return int(self.data.sum())
