"""
Application configuration.

Dataclass defaults reproduce the reference layout (800×600 orbit canvas,
120 px Earth, 5 s telemetry refresh). parse_args() overrides a subset from
the command line.
"""

from __future__ import annotations
import argparse
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple


# Window defaults
WIDTH, HEIGHT = 1280, 720
FPS = 60
TITLE = "Live Satellite Tracker"


@dataclass(frozen=True)
class RenderConfig:
    """Orbit canvas geometry and decoration sizes (pixels, ms)."""
    canvas_width: int = 800
    canvas_height: int = 600
    earth_radius: float = 120.0
    altitude_scale: float = 5.0          # km per px of orbit radius above the surface
    halo_scale: float = 1.5
    halo_inner_scale: float = 0.8
    grid_rings: int = 8
    orbit_dash: Tuple[float, float] = (5.0, 5.0)
    glow_radius: float = 15.0
    marker_radius: float = 4.0
    ping_rings: int = 3
    ping_max_radius: float = 20.0
    ping_period_ms: float = 1000.0
    star_count: int = 100
    trail_alpha: float = 0.2


@dataclass(frozen=True)
class SimulationConfig:
    regen_period_ms: float = 5000.0
    clock_period_ms: float = 1000.0
    seed: Optional[int] = None


@dataclass(frozen=True)
class AppConfig:
    width: int = WIDTH
    height: int = HEIGHT
    fps: int = FPS
    title: str = TITLE
    log_level: str = "INFO"
    render: RenderConfig = field(default_factory=RenderConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)


def parse_args(argv: Optional[Sequence[str]] = None) -> AppConfig:
    """
    Build AppConfig from command line arguments

    Args:
        argv: Argument list (None = sys.argv[1:])

    Returns:
        AppConfig
    """
    ap = argparse.ArgumentParser(description=TITLE)
    ap.add_argument("--width", type=int, default=WIDTH, help="Window width")
    ap.add_argument("--height", type=int, default=HEIGHT, help="Window height")
    ap.add_argument("--fps", type=int, default=FPS, help="Frame rate cap")
    ap.add_argument("--seed", type=int, default=None,
                    help="Seed for the velocity random source (default: nondeterministic)")
    ap.add_argument("--regen-ms", type=float, default=SimulationConfig.regen_period_ms,
                    help="Telemetry refresh period in ms")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    if args.regen_ms <= 0:
        ap.error("--regen-ms must be positive")
    if args.fps <= 0:
        ap.error("--fps must be positive")

    return AppConfig(
        width=args.width,
        height=args.height,
        fps=args.fps,
        log_level=args.log_level,
        simulation=SimulationConfig(regen_period_ms=args.regen_ms, seed=args.seed),
    )


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
