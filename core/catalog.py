"""
Satellite catalog — the fixed set of tracked identities.

Order matters: the catalog index drives altitude and phase of the
synthetic telemetry, and is the draw / list order of the orbit view.
"""

from .types import CatalogEntry


CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry(25544, "ISS (ZARYA)"),
    CatalogEntry(20580, "HUBBLE SPACE TELESCOPE"),
    CatalogEntry(43226, "STARLINK-1007"),
    CatalogEntry(28654, "GPS BIIR-13"),
)
