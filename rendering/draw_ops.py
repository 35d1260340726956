"""
Draw operations — the output of the render pipeline.

Plain immutable records, one per primitive. The pipeline builds them
without touching a surface; PygameCanvas applies them in order.

Colours are RGBA with integer 0-255 channels (alpha included).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union

Color = Tuple[int, int, int, int]
Point = Tuple[float, float]


def rgba(r: int, g: int, b: int, a: float = 1.0) -> Color:
    """CSS-style rgba() with alpha in 0..1 -> 0-255 RGBA tuple."""
    return (r, g, b, int(round(max(0.0, min(1.0, a)) * 255)))


def hex_color(code: str, a: float = 1.0) -> Color:
    code = code.lstrip("#")
    return rgba(int(code[0:2], 16), int(code[2:4], 16), int(code[4:6], 16), a)


@dataclass(frozen=True)
class ColorStop:
    offset: float    # 0..1
    color: Color


@dataclass(frozen=True)
class RadialGradient:
    """
    Two-circle radial gradient (start circle -> end circle).

    Colour at a point comes from the largest interpolation factor w for
    which the point lies on the circle lerp(start, end, w); w is clamped
    to [0, 1] before stop lookup.
    """
    start: Point
    start_radius: float
    end: Point
    end_radius: float
    stops: Tuple[ColorStop, ...]


Paint = Union[Color, RadialGradient]


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    width: float
    height: float
    color: Color


@dataclass(frozen=True)
class FillCircle:
    center: Point
    radius: float
    paint: Paint


@dataclass(frozen=True)
class StrokeCircle:
    center: Point
    radius: float
    color: Color
    width: int = 1
    dash: Optional[Tuple[float, float]] = None   # (on, off) in px along the circumference


DrawOp = Union[FillRect, FillCircle, StrokeCircle]
