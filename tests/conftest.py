# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from config import AppConfig


class FixedRng:
    """randrange() stand-in that always returns the same axis values."""
    def __init__(self, x=0, y=0):
        self.x, self.y = x, y
        self._next_is_x = True
    def randrange(self, stop):
        v = self.x if self._next_is_x else self.y
        self._next_is_x = not self._next_is_x
        return min(v, stop - 1)


@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def cfg():
    return AppConfig(seed=1234)

@pytest.fixture
def screen(cfg):
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((cfg.grid_w * cfg.render_cell, cfg.grid_h * cfg.render_cell))

@pytest.fixture
def sim_factory(cfg):
    from core.simulation import Simulation
    def make(point=None, rng=None, **overrides):
        sim = Simulation(cfg.with_(**overrides), rng=rng or FixedRng())
        if point is not None:
            from core.coordinate import Coordinate
            sim.point = Coordinate(*point)
        return sim
    return make

@pytest.fixture
def fixed_rng():
    return FixedRng
