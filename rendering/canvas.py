"""
PygameCanvas — applies draw operations to an off-screen pygame Surface.

The surface persists between frames (the trail-fade layer depends on the
previous contents), and the UI blits it into the orbit-view panel.

Translucent primitives are drawn into per-pixel-alpha scratch surfaces and
blitted, since pygame.draw writes colour without blending. Radial
gradients are rasterised with numpy (two-circle gradient, premultiplied
stop interpolation) and converted with frombuffer. Scratch surfaces are
cached by their geometry relative to the pixel grid, so static layers and
the moving satellite glow are built once.
"""

from __future__ import annotations
import logging
import math
from typing import Dict, Iterable, Tuple

import numpy as np
import pygame

from .draw_ops import Color, DrawOp, FillCircle, FillRect, RadialGradient, StrokeCircle

logger = logging.getLogger(__name__)

BACKGROUND = (5, 8, 20)
_CACHE_LIMIT = 512


class PygameCanvas:
    """
    Drawing surface for the orbit view

    Args:
        width, height: Surface size in pixels
        background: Initial fill colour
    """

    def __init__(self, width: int, height: int,
                 background: Tuple[int, int, int] = BACKGROUND):
        self.background = background
        self.surface = pygame.Surface((int(width), int(height)), 0, 32)
        self.surface.fill(background)
        self._cache: Dict[tuple, pygame.Surface] = {}

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def apply(self, ops: Iterable[DrawOp]) -> int:
        """
        Draw operations in order

        Returns:
            Number of operations applied

        Raises:
            pygame.error: if the surface rejects a draw
        """
        n = 0
        for op in ops:
            if isinstance(op, FillRect):
                self._fill_rect(op)
            elif isinstance(op, FillCircle):
                self._fill_circle(op)
            elif isinstance(op, StrokeCircle):
                self._stroke_circle(op)
            else:
                raise TypeError(f"Unknown draw op: {op!r}")
            n += 1
        return n

    # ── Primitives ──────────────────────────────────────────────────────────

    def _fill_rect(self, op: FillRect):
        if op.width <= 0 or op.height <= 0 or op.color[3] == 0:
            return

        pw = max(1, int(round(op.width)))
        ph = max(1, int(round(op.height)))
        r, g, b, a = op.color
        # Sub-pixel rects: spread the colour over one pixel, weaker
        coverage = min(1.0, (op.width * op.height) / (pw * ph))
        a = int(round(a * coverage))
        if a <= 0:
            return

        x, y = int(op.x), int(op.y)
        if a == 255:
            self.surface.fill((r, g, b), pygame.Rect(x, y, pw, ph))
            return

        key = ("rect", pw, ph, (r, g, b, a))
        patch = self._cache.get(key)
        if patch is None:
            patch = pygame.Surface((pw, ph), pygame.SRCALPHA)
            patch.fill((r, g, b, a))
            self._store(key, patch)
        self.surface.blit(patch, (x, y))

    def _fill_circle(self, op: FillCircle):
        if op.radius <= 0:
            return
        if isinstance(op.paint, RadialGradient):
            self._fill_gradient_circle(op)
            return

        color = op.paint
        if color[3] == 0:
            return
        if color[3] == 255:
            pygame.draw.circle(self.surface, color[:3], _round_pt(op.center),
                               max(1, int(round(op.radius))))
            return

        size = int(math.ceil(op.radius * 2)) + 2
        key = ("disc", size, op.radius, color)
        patch = self._cache.get(key)
        if patch is None:
            patch = pygame.Surface((size, size), pygame.SRCALPHA)
            pygame.draw.circle(patch, color, (size // 2, size // 2),
                               max(1, int(round(op.radius))))
            self._store(key, patch)
        cx, cy = _round_pt(op.center)
        self.surface.blit(patch, (cx - size // 2, cy - size // 2))

    def _fill_gradient_circle(self, op: FillCircle):
        grad: RadialGradient = op.paint
        # Snap the circle to the pixel grid, moving the gradient with it
        cx, cy = _round_pt(op.center)
        dx, dy = cx - op.center[0], cy - op.center[1]

        half = int(math.ceil(op.radius)) + 1
        size = half * 2
        ox, oy = cx - half, cy - half

        rel = (
            round(grad.start[0] + dx - ox, 2), round(grad.start[1] + dy - oy, 2),
            round(grad.start_radius, 2),
            round(grad.end[0] + dx - ox, 2), round(grad.end[1] + dy - oy, 2),
            round(grad.end_radius, 2),
        )
        key = ("grad", size, round(op.radius, 2), rel, grad.stops)
        patch = self._cache.get(key)
        if patch is None:
            rgba = rasterize_radial(size, size, (half, half), op.radius,
                                    (rel[0], rel[1]), rel[2], (rel[3], rel[4]), rel[5],
                                    grad.stops)
            patch = pygame.image.frombuffer(rgba.tobytes(), (size, size), "RGBA").copy()
            self._store(key, patch)
        self.surface.blit(patch, (ox, oy))

    def _stroke_circle(self, op: StrokeCircle):
        # Below 1 px the ring is invisible; pygame would draw a dot
        if op.radius < 1.0 or op.color[3] == 0:
            return

        radius = int(round(op.radius))
        width = max(1, int(op.width))
        if op.dash is None and op.color[3] == 255:
            pygame.draw.circle(self.surface, op.color[:3], _round_pt(op.center),
                               radius, width)
            return

        half = radius + width + 1
        size = half * 2
        key = ("ring", radius, width, op.color, op.dash)
        patch = self._cache.get(key)
        if patch is None:
            patch = pygame.Surface((size, size), pygame.SRCALPHA)
            if op.dash is None:
                pygame.draw.circle(patch, op.color, (half, half), radius, width)
            else:
                rect = pygame.Rect(half - radius, half - radius, radius * 2, radius * 2)
                for start, stop in dash_angles(op.radius, op.dash):
                    pygame.draw.arc(patch, op.color, rect, start, stop, width)
            self._store(key, patch)
        cx, cy = _round_pt(op.center)
        self.surface.blit(patch, (cx - half, cy - half))

    def _store(self, key: tuple, patch: pygame.Surface):
        if len(self._cache) >= _CACHE_LIMIT:
            logger.debug("Canvas patch cache full (%d), clearing", len(self._cache))
            self._cache.clear()
        self._cache[key] = patch


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _round_pt(p) -> Tuple[int, int]:
    return int(round(p[0])), int(round(p[1]))


def dash_angles(radius: float, dash: Tuple[float, float]) -> list[Tuple[float, float]]:
    """
    Arc segments (start, stop) in radians for a dashed circle

    Dash lengths are measured along the circumference; a trailing partial
    dash is clipped at 2π.
    """
    on, off = dash
    period = on + off
    if radius <= 0 or on <= 0:
        return []
    if off <= 0:
        return [(0.0, 2 * math.pi)]

    circumference = 2 * math.pi * radius
    segments = []
    s = 0.0
    while s < circumference:
        e = min(s + on, circumference)
        segments.append((s / radius, e / radius))
        s += period
    return segments


def rasterize_radial(width: int, height: int, circle_center, circle_radius: float,
                     start, start_radius: float, end, end_radius: float,
                     stops) -> np.ndarray:
    """
    RGBA pixels of a circle filled with a two-circle radial gradient

    Args:
        width, height: Patch size
        circle_center, circle_radius: Fill area (patch pixel coordinates)
        start, start_radius: Gradient start circle
        end, end_radius: Gradient end circle
        stops: ColorStop sequence, offsets ascending

    Returns:
        uint8 array (height, width, 4)
    """
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    xs += 0.5
    ys += 0.5

    inside = ((xs - circle_center[0]) ** 2 + (ys - circle_center[1]) ** 2
              <= circle_radius ** 2)

    w = gradient_parameter(xs, ys, start, start_radius, end, end_radius)
    painted = inside & ~np.isnan(w)
    w = np.clip(np.nan_to_num(w, nan=0.0), 0.0, 1.0)

    offsets = np.array([s.offset for s in stops], dtype=np.float64)
    cols = np.array([s.color for s in stops], dtype=np.float64)
    alpha_stops = cols[:, 3] / 255.0

    # Interpolate premultiplied colour so transparent stops don't tint
    alpha = np.interp(w, offsets, alpha_stops)
    rgba = np.zeros((height, width, 4), dtype=np.uint8)
    safe_alpha = np.where(alpha > 0, alpha, 1.0)
    for ch in range(3):
        premult = np.interp(w, offsets, cols[:, ch] * alpha_stops)
        rgba[:, :, ch] = np.clip(premult / safe_alpha, 0, 255).astype(np.uint8)
    rgba[:, :, 3] = np.where(painted, np.clip(alpha * 255.0, 0, 255), 0).astype(np.uint8)
    return np.ascontiguousarray(rgba)


def gradient_parameter(xs: np.ndarray, ys: np.ndarray, start, start_radius: float,
                       end, end_radius: float) -> np.ndarray:
    """
    Interpolation factor w per pixel (NaN where the gradient is undefined)

    Solves |p - c(w)| = r(w) with c, r linear in w and keeps the largest
    root with r(w) >= 0.
    """
    qx = xs - start[0]
    qy = ys - start[1]
    dcx = end[0] - start[0]
    dcy = end[1] - start[1]
    dr = end_radius - start_radius

    a = dcx * dcx + dcy * dcy - dr * dr
    b = -2.0 * (qx * dcx + qy * dcy + start_radius * dr)
    c = qx * qx + qy * qy - start_radius * start_radius

    with np.errstate(divide="ignore", invalid="ignore"):
        if abs(a) < 1e-9:
            w = np.where(b != 0, -c / b, np.nan)
            return np.where(start_radius + w * dr >= 0, w, np.nan)

        disc = b * b - 4.0 * a * c
        sq = np.sqrt(np.where(disc >= 0, disc, np.nan))
        w1 = (-b + sq) / (2.0 * a)
        w2 = (-b - sq) / (2.0 * a)
        hi = np.fmax(w1, w2)
        lo = np.fmin(w1, w2)
        w = np.where(start_radius + hi * dr >= 0, hi,
                     np.where(start_radius + lo * dr >= 0, lo, np.nan))
    return w
