import pytest

import main as cli
from config import AppConfig
from core.coordinate import Coordinate
from core.simulation import Simulation
from runners.run_snake import play
from viz.keyboard import QUIT
from viz.renderer_headless import HeadlessRenderer


class ScriptedKeyboard:
    def __init__(self, *batches):
        self.batches = list(batches)
        self.polls = 0
    def poll(self):
        self.polls += 1
        return self.batches.pop(0) if self.batches else []


def _ring_sim(cfg, fixed_rng):
    # 6x1 ring: keeps eating the point at (0,0) until it bites its tail
    sim = Simulation(cfg.with_(grid_w=6, grid_h=1), rng=fixed_rng())
    sim.player.coordinate = Coordinate(2, 0)
    sim.point = Coordinate(3, 0)
    return sim


def test_play_until_game_over(cfg, fixed_rng):
    sim = _ring_sim(cfg, fixed_rng)
    rend = HeadlessRenderer()
    status = play(sim.cfg, rend, ScriptedKeyboard(["x", "q"]), sim=sim, sleep=lambda s: None)
    assert status == 0
    assert rend.frames, "no frames rendered"
    assert rend.frames[-1].dead
    assert [f.dead for f in rend.frames].count(True) == 1
    scores = [f.score for f in rend.frames]
    assert scores == sorted(scores)
    assert all(b - a in (0, 1) for a, b in zip(scores, scores[1:]))
    assert rend.game_over == f"You lost! Score: {scores[-1]}"
    assert rend.captions[-1] == f"Snake | Score: {scores[-1]}"
    assert rend.closed


def test_quit_before_game_over(cfg):
    sim = Simulation(cfg)
    rend = HeadlessRenderer()
    status = play(cfg, rend, ScriptedKeyboard([QUIT]), sim=sim)
    assert status == 0
    assert rend.game_over is None
    assert rend.closed


def test_cli_builds_config():
    args = cli.parse_args(["snake", "--grid-w", "20", "--grid-h", "12", "--delay-ms", "100", "--seed", "5"])
    cfg = cli.config_from_args(args)
    assert (cfg.grid_w, cfg.grid_h, cfg.delay_ms, cfg.seed) == (20, 12, 100, 5)
    assert cfg.delay_sec == pytest.approx(0.1)
    assert cfg.key_queue_max == 100


def test_cli_defaults():
    cfg = cli.config_from_args(cli.parse_args([]))
    assert cfg == AppConfig()


@pytest.mark.parametrize("kwargs", [
    {"grid_w": 0}, {"grid_h": -1}, {"delay_ms": 0}, {"key_queue_max": 0},
    {"render_cell": 8, "render_spacing": 8},
])
def test_config_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        AppConfig(**kwargs)


def test_config_with_clones():
    base = AppConfig()
    other = base.with_(grid_w=20)
    assert base.grid_w == 14 and other.grid_w == 20
    assert base.delay_ms == 250
