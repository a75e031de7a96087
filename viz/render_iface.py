# viz/render_iface.py
from __future__ import annotations
from typing import Protocol
from config import AppConfig
from core.interfaces import GameSnapshot


def caption_for(title: str, score: int) -> str:
    return f"{title} | Score: {score}"


def game_over_text(score: int) -> str:
    return f"You lost! Score: {score}"


class Renderer(Protocol):
    def open(self, cfg: AppConfig) -> None: ...
    def draw(self, snap: GameSnapshot) -> None: ...
    def tick(self, fps: int) -> None: ...
    def show_game_over(self, score: int) -> None: ...
    def close(self) -> None: ...
