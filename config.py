from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board / simulation
    grid_w: int = 14
    grid_h: int = 10
    delay_ms: int = 250
    key_queue_max: int = 100
    seed: Optional[int] = None

    # ui loop
    fps: int = 60

    # render
    render_cell: int = 48
    render_spacing: int = 8
    render_title: str = "Snake"

    def __post_init__(self):
        if self.grid_w <= 0 or self.grid_h <= 0:
            raise ValueError(f"grid must be positive, got {self.grid_w}x{self.grid_h}")
        if self.delay_ms <= 0:
            raise ValueError(f"delay_ms must be positive, got {self.delay_ms}")
        if self.key_queue_max <= 0:
            raise ValueError(f"key_queue_max must be positive, got {self.key_queue_max}")
        if self.render_cell <= self.render_spacing:
            raise ValueError("render_cell must be larger than render_spacing")

    @property
    def delay_sec(self) -> float:
        return self.delay_ms / 1000.0

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
