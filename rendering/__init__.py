"""
Rendering package - orbit view frames.

Main exports:
- render: pure frame builder: state + time + size → draw ops
- PygameCanvas: applies draw ops to an off-screen pygame Surface
- AnimationLoop: host-driven redraw, IDLE / RUNNING / STOPPED
"""
from .draw_ops import (
    ColorStop, RadialGradient, FillRect, FillCircle, StrokeCircle, DrawOp, rgba,
)
from .pipeline import render, orbit_radius, satellite_position, hit_test
from .canvas import PygameCanvas
from .animation import AnimationLoop, LoopState

__all__ = [
    "ColorStop",
    "RadialGradient",
    "FillRect",
    "FillCircle",
    "StrokeCircle",
    "DrawOp",
    "rgba",
    "render",
    "orbit_radius",
    "satellite_position",
    "hit_test",
    "PygameCanvas",
    "AnimationLoop",
    "LoopState",
]
