from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Satellite:
    id: int
    name: str
    latitude: float      # deg, [-60, 60]
    longitude: float     # deg, [-180, 180)
    altitude: float      # km
    velocity: float      # km/s
    orbit_angle: float   # deg, [0, 360) -- flat on-screen position, not an orbital element
