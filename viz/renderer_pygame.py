# viz/renderer_pygame.py
from __future__ import annotations
from typing import Optional, Tuple
import pygame as pg
from config import AppConfig
from core.interfaces import GameSnapshot
from viz.render_iface import caption_for, game_over_text
import viz.renderer_colors as theme

_ACK_EVENTS = (pg.QUIT, pg.KEYDOWN, pg.MOUSEBUTTONDOWN)

class PygameRenderer:
    """Draws the grid as a board of toggle switches, one per cell."""
    def __init__(self):
        self.cell = 48
        self.spacing = 8
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self.caption = ""
        self._auto_flip = True
        self._owns_window = False
        self._grid_w = 0
        self._grid_h = 0

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self._grid_w, self._grid_h = cfg.grid_w, cfg.grid_h
        self.cell = cfg.render_cell
        self.spacing = cfg.render_spacing

        pg.init()
        self.surf = pg.display.set_mode((self._grid_w * self.cell, self._grid_h * self.cell))
        self.clock = pg.time.Clock()
        self._auto_flip = True
        self._owns_window = True
        self._set_caption(caption_for(cfg.render_title, 0))

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw onto a caller-owned surface; no window, no caption, no flip."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self._grid_w, self._grid_h = cfg.grid_w, cfg.grid_h
        self.cell = cfg.render_cell
        self.spacing = cfg.render_spacing
        self.surf = surface
        self.clock = None
        self._auto_flip = False
        self._owns_window = False

    # --- geometry ---
    def switch_rect(self, x: int, y: int) -> pg.Rect:
        c, pad = self.cell, self.spacing
        w = c - pad
        h = w // 2
        return pg.Rect(x * c + pad // 2, y * c + (c - h) // 2, w, h)

    def knob_center(self, x: int, y: int, on: bool) -> Tuple[int, int]:
        r = self.switch_rect(x, y)
        half = r.height // 2
        cx = r.right - half if on else r.left + half
        return (cx, r.centery)

    # --- drawing ---
    def draw(self, s: GameSnapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        surf.fill(theme.BG)
        for y in range(s.height):
            for x in range(s.width):
                self._draw_switch(x, y, s.is_on(x, y))
        self._set_caption(caption_for(self.cfg.render_title, s.score))
        if self._auto_flip:
            pg.display.flip()

    def _draw_switch(self, x: int, y: int, on: bool) -> None:
        track = self.switch_rect(x, y)
        half = track.height // 2
        pg.draw.rect(self.surf, theme.TRACK_ON if on else theme.TRACK_OFF, track, border_radius=half)
        pg.draw.circle(self.surf, theme.KNOB, self.knob_center(x, y, on), max(1, half - 2))

    def draw_game_over(self, score: int) -> pg.Rect:
        assert self.surf is not None, "Renderer not opened"
        surf = self.surf
        font = pg.font.SysFont(None, 32)
        small = pg.font.SysFont(None, 22)
        msg = font.render(game_over_text(score), True, theme.TEXT)
        hint = small.render("Press any key", True, theme.TEXT)

        w = max(msg.get_width(), hint.get_width()) + 40
        h = msg.get_height() + hint.get_height() + 40
        box = pg.Rect(0, 0, w, h)
        box.center = surf.get_rect().center
        pg.draw.rect(surf, theme.DIALOG_BG, box)
        pg.draw.rect(surf, theme.DIALOG_BORDER, box, width=2)
        surf.blit(msg, msg.get_rect(midtop=(box.centerx, box.top + 14)))
        surf.blit(hint, hint.get_rect(midbottom=(box.centerx, box.bottom - 12)))
        if self._auto_flip:
            pg.display.flip()
        return box

    def show_game_over(self, score: int) -> None:
        """Modal: blocks until a key, click, or window close."""
        self.draw_game_over(score)
        if not self._owns_window:
            return
        pg.event.clear()
        while True:
            e = pg.event.wait()
            if e.type in _ACK_EVENTS:
                return

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None

    def _set_caption(self, text: str) -> None:
        self.caption = text
        if self._owns_window:
            pg.display.set_caption(text)
