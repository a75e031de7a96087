# core/game_state.py
from __future__ import annotations
from .game_grid import GameGrid
from .interfaces import GameSnapshot


class GameState:
    def __init__(self, width: int, height: int):
        self.grid = GameGrid(width, height)
        self.score = 0
        self.dead = False
        self.step_count = 0

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            grid=self.grid.frozen(),
            width=self.grid.width,
            height=self.grid.height,
            score=self.score,
            dead=self.dead,
            step_count=self.step_count,
        )
