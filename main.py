import argparse
import logging
import sys

from config import AppConfig
from runners.run_snake import main as snake

_DEFAULTS = AppConfig()

def run_snake(cfg: AppConfig) -> int: return snake(cfg)

def parse_args(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("mode", nargs="?", default="snake", choices=["snake"])
    p.add_argument("--grid-w", type=int, default=_DEFAULTS.grid_w)
    p.add_argument("--grid-h", type=int, default=_DEFAULTS.grid_h)
    p.add_argument("--delay-ms", type=int, default=_DEFAULTS.delay_ms)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-px", type=int, default=_DEFAULTS.render_cell)
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)

def config_from_args(args) -> AppConfig:
    return _DEFAULTS.with_(
        grid_w=args.grid_w,
        grid_h=args.grid_h,
        delay_ms=args.delay_ms,
        seed=args.seed,
        render_cell=args.cell_px,
    )

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(threadName)s %(name)s: %(message)s",
    )
    cfg = config_from_args(args)
    if args.mode == "snake":
        return run_snake(cfg)
    return 2

if __name__ == "__main__":
    sys.exit(main())
