# core/simulation.py  (tick state machine + worker thread, no pygame)
from __future__ import annotations
import logging
import queue
import random
import threading
import time
from typing import Callable, Iterable, Optional
from config import AppConfig
from .channels import drain
from .coordinate import Coordinate
from .game_state import GameState
from .interfaces import GameSnapshot, SinkClosed, SnapshotSink
from .player import Player

logger = logging.getLogger(__name__)


class Simulation:
    def __init__(self, cfg: AppConfig, rng: Optional[random.Random] = None):
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.width, self.height = cfg.grid_w, cfg.grid_h
        self.state = GameState(self.width, self.height)
        self.player = Player(self.width // 2, self.height // 2)
        self.point = Coordinate.random(self.width, self.height, self.rng)

    @property
    def dead(self) -> bool:
        return self.state.dead

    def tick(self, keys: Iterable[str] = ()) -> GameSnapshot:
        """Advance one step. Once dead, returns the terminal snapshot unchanged."""
        if self.state.dead:
            return self.state.snapshot()

        for key in keys:
            self.player.handle_key(key)
        self.player.move(self.width, self.height)
        self.state.step_count += 1

        if self.player.coordinate == self.point:
            self.player.grow()
            self.state.score += 1
            # may land on the body; kept as-is
            self.point = Coordinate.random(self.width, self.height, self.rng)
            logger.debug("point collected, score=%d next=%s", self.state.score, self.point)

        if self.player.hits_body():
            # grid keeps the previous frame
            self.state.dead = True
            logger.info("self-collision at %s, final score %d", self.player.coordinate, self.state.score)
            return self.state.snapshot()

        grid = self.state.grid
        grid.clear()
        grid.set_all([*self.player.segments(), self.point], True)
        return self.state.snapshot()

    def run(
        self,
        keys: "queue.Queue[str]",
        sink: SnapshotSink,
        sleep: Callable[[float], None] = time.sleep,
    ) -> GameSnapshot:
        """Blocking loop: tick, emit, sleep. Returns the final (dead) snapshot."""
        logger.info("simulation started: grid=%dx%d delay=%dms", self.width, self.height, self.cfg.delay_ms)
        while True:
            snap = self.tick(drain(keys))
            if snap.dead:
                sink.push(snap)  # consumer must get the final frame
                return snap
            try:
                sink.push(snap)
            except SinkClosed:
                logger.debug("sink closed, dropping frame %d", snap.step_count)
            sleep(self.cfg.delay_sec)


class SimulationThread(threading.Thread):
    def __init__(
        self,
        sim: Simulation,
        keys: "queue.Queue[str]",
        sink: SnapshotSink,
        sleep: Callable[[float], None] = time.sleep,
    ):
        super().__init__(name="SnakeSimulation", daemon=True)
        self.sim = sim
        self.keys = keys
        self.sink = sink
        self._sleep = sleep
        self.result: Optional[GameSnapshot] = None

    def run(self) -> None:
        self.result = self.sim.run(self.keys, self.sink, self._sleep)
