# runners/run_snake.py
from __future__ import annotations
import logging
import queue
import time
from typing import Callable, Optional, Protocol
from config import AppConfig
from core.channels import QueueSink, drain, offer_key
from core.interfaces import GameSnapshot
from core.simulation import Simulation, SimulationThread
from viz.keyboard import QUIT
from viz.render_iface import Renderer

logger = logging.getLogger(__name__)


class KeySource(Protocol):
    def poll(self) -> list[str]: ...


def play(
    cfg: AppConfig,
    renderer: Renderer,
    keyboard: KeySource,
    sim: Optional[Simulation] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """UI side of the game. Returns the process exit status."""
    sim = sim or Simulation(cfg)
    keys: "queue.Queue[str]" = queue.Queue(maxsize=cfg.key_queue_max)
    sink = QueueSink()
    worker = SimulationThread(sim, keys, sink, sleep=sleep)

    renderer.open(cfg)
    worker.start()
    try:
        while True:
            symbols = keyboard.poll()
            if QUIT in symbols:
                logger.info("window closed before game over")
                return 0
            for sym in symbols:
                offer_key(keys, sym)

            alive = worker.is_alive()
            for snap in drain(sink.queue):
                renderer.draw(snap)
                if snap.dead:
                    _game_over(renderer, snap)
                    return 0
            if not alive:
                raise RuntimeError("simulation thread exited without a final snapshot")
            renderer.tick(cfg.fps)
    finally:
        sink.close()
        renderer.close()


def _game_over(renderer: Renderer, snap: GameSnapshot) -> None:
    logger.info("game over after %d ticks, score %d", snap.step_count, snap.score)
    renderer.show_game_over(snap.score)


def main(cfg: Optional[AppConfig] = None) -> int:
    from viz.keyboard import Keyboard
    from viz.renderer_pygame import PygameRenderer

    cfg = cfg or AppConfig()
    print("=== Snake ===")
    print(f"[snake] grid: {cfg.grid_w}x{cfg.grid_h}  delay: {cfg.delay_ms}ms  seed: {cfg.seed}")
    print("[snake] controls: w/a/s/d, esc to quit")
    return play(cfg, PygameRenderer(), Keyboard())
