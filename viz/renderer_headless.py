# viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
from config import AppConfig
from core.interfaces import GameSnapshot
from viz.render_iface import Renderer, caption_for, game_over_text

class HeadlessRenderer(Renderer):
    """Records what a window would have shown. Never blocks."""
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.frames: List[GameSnapshot] = []
        self.captions: List[str] = []
        self.game_over: Optional[str] = None
        self.ticks = 0
        self.closed = False

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
    def draw(self, snap: GameSnapshot) -> None:
        assert self.cfg is not None, "Renderer not opened"
        self.frames.append(snap)
        self.captions.append(caption_for(self.cfg.render_title, snap.score))
    def tick(self, fps: int) -> None:
        self.ticks += 1
    def show_game_over(self, score: int) -> None:
        self.game_over = game_over_text(score)
    def close(self) -> None:
        self.closed = True
