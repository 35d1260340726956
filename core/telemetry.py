"""
Synthetic telemetry generator.

Satellite state is a closed-form function of wall-clock time (ms since
epoch) and catalog index. There is no propagation: each call is
independent, so a whole set can be rebuilt at any instant.

    latitude    = sin(t/10000 + i) * 60
    longitude   = ((t/5000 + 90 i) mod 360) - 180
    altitude    = 400 + 100 i
    orbit_angle = (t/1000 + 90 i) mod 360
    velocity    = U[7.5, 8.0)   (redrawn every call)

Only velocity is random; the source is injectable so tests can pin it.
"""

from __future__ import annotations
import math
from typing import Iterable, Protocol

import numpy as np

from .types import CatalogEntry, Satellite


MAX_LATITUDE_DEG = 60.0
BASE_ALTITUDE_KM = 400.0
ALTITUDE_STEP_KM = 100.0
VELOCITY_RANGE_KMS = (7.5, 8.0)
PHASE_STEP_DEG = 90.0

LATITUDE_PERIOD_MS = 10000.0
LONGITUDE_RATE_MS = 5000.0      # ms per degree
ORBIT_RATE_MS = 1000.0          # ms per degree


class RandomSource(Protocol):
    def uniform(self, low: float, high: float) -> float: ...


def _wrap(value: float, period: float) -> float:
    """Floored modulo into [0, period), also for float round-up at the edge."""
    r = value % period
    return 0.0 if r >= period else r


def generate(entry: CatalogEntry, index: int, now_ms: float,
             rng: RandomSource) -> Satellite:
    """
    Instantaneous telemetry for one catalog entry

    Args:
        entry: Catalog identity
        index: 0-based catalog position
        now_ms: Wall-clock milliseconds since epoch
        rng: Random source for velocity

    Returns:
        Satellite snapshot
    """
    latitude = math.sin(now_ms / LATITUDE_PERIOD_MS + index) * MAX_LATITUDE_DEG
    longitude = _wrap(now_ms / LONGITUDE_RATE_MS + index * PHASE_STEP_DEG, 360.0) - 180.0
    orbit_angle = _wrap(now_ms / ORBIT_RATE_MS + index * PHASE_STEP_DEG, 360.0)
    altitude = BASE_ALTITUDE_KM + index * ALTITUDE_STEP_KM
    velocity = float(rng.uniform(*VELOCITY_RANGE_KMS))

    return Satellite(
        id=entry.id,
        name=entry.name,
        latitude=latitude,
        longitude=longitude,
        altitude=altitude,
        velocity=velocity,
        orbit_angle=orbit_angle,
    )


def generate_all(catalog: Iterable[CatalogEntry], now_ms: float,
                 rng: RandomSource) -> tuple[Satellite, ...]:
    """Full satellite set in catalog order, all sampled at the same instant."""
    return tuple(generate(entry, i, now_ms, rng) for i, entry in enumerate(catalog))


def default_rng(seed: int | None = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def format_telemetry(sat: Satellite) -> list[tuple[str, str]]:
    """Label/value rows for the telemetry panel."""
    return [
        ("Latitude", f"{sat.latitude:.4f}°"),
        ("Longitude", f"{sat.longitude:.4f}°"),
        ("Altitude", f"{sat.altitude:.2f} km"),
        ("Velocity", f"{sat.velocity:.2f} km/s"),
    ]
