# core/player.py  (pure movement rules, no pygame)
from __future__ import annotations
from typing import List
from .coordinate import Coordinate, Direction


class Player:
    def __init__(self, x: int, y: int, direction: Direction = Direction.RIGHT):
        self.coordinate = Coordinate(x, y)
        self.body: List[Coordinate] = []   # newest first, oldest last
        self.direction = direction
        self.extend = False

    def move(self, grid_w: int, grid_h: int) -> None:
        if self.body or self.extend:
            if self.extend:
                self.extend = False
            else:
                self.body.pop()
            self.body.insert(0, Coordinate(self.coordinate.x, self.coordinate.y))

        x = self.coordinate.x + self.direction.dx
        y = self.coordinate.y + self.direction.dy
        # toroidal board, no walls
        if x >= grid_w: x = 0
        elif x < 0:     x = grid_w - 1
        if y >= grid_h: y = 0
        elif y < 0:     y = grid_h - 1
        self.coordinate = Coordinate(x, y)

    def steer(self, direction: Direction) -> None:
        # Prevent instant 180° reversal if the snake has a body
        if self.body and direction is self.direction.opposite:
            return
        self.direction = direction

    def handle_key(self, symbol: str) -> None:
        direction = Direction.from_key(symbol)
        if direction is None:
            return
        self.steer(direction)

    def grow(self) -> None:
        self.extend = True

    def hits_body(self) -> bool:
        return any(seg == self.coordinate for seg in self.body)

    def segments(self) -> List[Coordinate]:
        return [self.coordinate, *self.body]

    def __len__(self) -> int:
        return 1 + len(self.body)
