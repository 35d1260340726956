"""
Render pipeline — one orbit-view frame as a list of draw operations.

render(state, now_ms, width, height) is a pure function of its inputs.
Layers, back to front:

  1. trail fade      translucent fill instead of a clear (motion trails)
  2. earth halo      radial glow to 1.5 R
  3. earth body      lit sphere, highlight offset up-left
  4. latitude grid   8 concentric rings
  5. satellites      dashed orbit, glow, marker, ping rings if selected
  6. starfield       fixed points, independent of time and state

Orbits use a flat circular layout (radius grows with altitude), not a
projection of real orbital geometry.
"""

from __future__ import annotations
import math
from functools import lru_cache
from typing import List, Optional, Tuple

import numpy as np

from core.config import RenderConfig
from core.types import Satellite
from simulation.state import SimulationState
from .draw_ops import (
    ColorStop, DrawOp, FillCircle, FillRect, Point, RadialGradient, StrokeCircle,
    hex_color, rgba,
)

DEFAULT_CONFIG = RenderConfig()

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
_TRAIL_RGB        = (5, 8, 20)
_HALO_RGB         = (59, 130, 246)
_EARTH_STOPS      = (
    ColorStop(0.0, hex_color("#4facfe")),
    ColorStop(0.5, hex_color("#2563eb")),
    ColorStop(1.0, hex_color("#1e40af")),
)
_GRID_COLOR       = rgba(255, 255, 255, 0.1)

_SELECTED_RGB     = (34, 197, 94)
_IDLE_RGB         = (59, 130, 246)
_ORBIT_SELECTED   = rgba(*_SELECTED_RGB, 0.4)
_ORBIT_IDLE       = rgba(100, 116, 139, 0.2)
_GLOW_SELECTED    = rgba(*_SELECTED_RGB, 0.8)
_GLOW_IDLE        = rgba(*_IDLE_RGB, 0.6)
_GLOW_EDGE        = rgba(*_SELECTED_RGB, 0.0)
_MARKER_SELECTED  = rgba(*_SELECTED_RGB)
_MARKER_IDLE      = rgba(*_IDLE_RGB)

_STAR_COLOR       = rgba(255, 255, 255, 0.8)
_STAR_STEP        = (137.508, 197.508)


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

def orbit_radius(altitude_km: float, earth_radius: float,
                 altitude_scale: float = DEFAULT_CONFIG.altitude_scale) -> float:
    return earth_radius + altitude_km / altitude_scale


def satellite_position(sat: Satellite, center: Point,
                       config: RenderConfig = DEFAULT_CONFIG) -> Point:
    """Screen position of a satellite on its flat circular orbit."""
    r = orbit_radius(sat.altitude, config.earth_radius, config.altitude_scale)
    angle = math.radians(sat.orbit_angle)
    return (center[0] + math.cos(angle) * r,
            center[1] + math.sin(angle) * r)


def ping_radii(now_ms: float, config: RenderConfig = DEFAULT_CONFIG) -> List[float]:
    """
    Radii of the signal rings at now_ms

    Each ring sweeps 0 → ping_max_radius once per ping_period_ms; ring i
    lags ring 0 by i/6 of a cycle.
    """
    phase = now_ms / config.ping_period_ms
    return [((phase + i / 6.0) % 1.0) * config.ping_max_radius
            for i in range(config.ping_rings)]


def ping_alpha(radius: float, config: RenderConfig = DEFAULT_CONFIG) -> float:
    # 0.5 at the centre, fading to 0 at ping_max_radius
    return 0.5 - radius / (2.0 * config.ping_max_radius)


def star_field(width: int, height: int, count: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Static star positions and sizes

    Returns:
        (xs, ys, sizes) arrays of length count; sizes cycle 0, 0.5, 1
    """
    idx = np.arange(count, dtype=np.float64)
    xs = np.mod(idx * _STAR_STEP[0], width)
    ys = np.mod(idx * _STAR_STEP[1], height)
    sizes = np.mod(np.arange(count), 3) / 2.0
    return xs, ys, sizes


@lru_cache(maxsize=8)
def _star_ops(width: int, height: int, count: int) -> Tuple[FillRect, ...]:
    xs, ys, sizes = star_field(width, height, count)
    return tuple(FillRect(float(x), float(y), float(s), float(s), _STAR_COLOR)
                 for x, y, s in zip(xs, ys, sizes))


def hit_test(state: SimulationState, pos: Point, width: int, height: int,
             config: RenderConfig = DEFAULT_CONFIG,
             tolerance: Optional[float] = None) -> Optional[int]:
    """
    Satellite id under a canvas point, nearest first

    Args:
        state: Current simulation state
        pos: Point in canvas pixels
        width, height: Canvas size
        tolerance: Pick radius (None = glow radius)

    Returns:
        Satellite id, or None if nothing is close enough
    """
    if tolerance is None:
        tolerance = config.glow_radius
    center = (width / 2.0, height / 2.0)

    best_id, best_d = None, tolerance
    for sat in state.satellites:
        x, y = satellite_position(sat, center, config)
        d = math.hypot(pos[0] - x, pos[1] - y)
        if d <= best_d:
            best_id, best_d = sat.id, d
    return best_id


# ---------------------------------------------------------------------------
# Frame
# ---------------------------------------------------------------------------

def render(state: SimulationState, now_ms: float, width: int, height: int,
           config: RenderConfig = DEFAULT_CONFIG) -> List[DrawOp]:
    """
    Draw operations for one frame

    Args:
        state: Satellite set and selection to draw
        now_ms: Frame time, ms since epoch (drives the ping rings)
        width, height: Canvas size in pixels
        config: Geometry / decoration sizes

    Returns:
        Ordered draw operations, back to front
    """
    ops: List[DrawOp] = []
    cx, cy = width / 2.0, height / 2.0
    center = (cx, cy)
    R = config.earth_radius

    # 1. Trail fade
    ops.append(FillRect(0.0, 0.0, float(width), float(height),
                        rgba(*_TRAIL_RGB, config.trail_alpha)))

    # 2. Earth halo
    halo_r = R * config.halo_scale
    ops.append(FillCircle(center, halo_r, RadialGradient(
        start=center, start_radius=R * config.halo_inner_scale,
        end=center, end_radius=halo_r,
        stops=(ColorStop(0.0, rgba(*_HALO_RGB, 0.3)),
               ColorStop(1.0, rgba(*_HALO_RGB, 0.0))),
    )))

    # 3. Earth body
    ops.append(FillCircle(center, R, RadialGradient(
        start=(cx - R / 4.0, cy - R / 4.0), start_radius=R / 6.0,
        end=center, end_radius=R,
        stops=_EARTH_STOPS,
    )))

    # 4. Latitude grid
    for k in range(1, config.grid_rings + 1):
        ops.append(StrokeCircle(center, R * k / config.grid_rings, _GRID_COLOR, 1))

    # 5. Satellites
    for sat in state.satellites:
        ops.extend(_satellite_ops(sat, state.is_selected(sat), center, now_ms, config))

    # 6. Starfield
    ops.extend(_star_ops(int(width), int(height), config.star_count))

    return ops


def _satellite_ops(sat: Satellite, selected: bool, center: Point,
                   now_ms: float, config: RenderConfig) -> List[DrawOp]:
    r = orbit_radius(sat.altitude, config.earth_radius, config.altitude_scale)
    pos = satellite_position(sat, center, config)

    ops: List[DrawOp] = [
        StrokeCircle(center, r, _ORBIT_SELECTED if selected else _ORBIT_IDLE,
                     1, dash=config.orbit_dash),
        FillCircle(pos, config.glow_radius, RadialGradient(
            start=pos, start_radius=0.0,
            end=pos, end_radius=config.glow_radius,
            stops=(ColorStop(0.0, _GLOW_SELECTED if selected else _GLOW_IDLE),
                   ColorStop(1.0, _GLOW_EDGE)),
        )),
        FillCircle(pos, config.marker_radius,
                   _MARKER_SELECTED if selected else _MARKER_IDLE),
    ]

    if selected:
        for radius in ping_radii(now_ms, config):
            ops.append(StrokeCircle(pos, radius,
                                    rgba(*_SELECTED_RGB, ping_alpha(radius, config)), 2))
    return ops
