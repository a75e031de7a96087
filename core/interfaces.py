# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol
import numpy as np


@dataclass(frozen=True)
class GameSnapshot:
    grid: np.ndarray       # read-only (height, width) bool
    width: int
    height: int
    score: int
    dead: bool
    step_count: int

    def is_on(self, x: int, y: int) -> bool:
        return bool(self.grid[y, x])


class SinkClosed(RuntimeError):
    """Raised by a SnapshotSink whose consumer has gone away."""


class SnapshotSink(Protocol):
    def push(self, snap: GameSnapshot) -> None: ...
    def close(self) -> None: ...
