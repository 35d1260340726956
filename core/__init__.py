"""
Core package - data types, catalog, synthetic telemetry, time and scheduling.

Main exports:
- CatalogEntry, Satellite: data model
- CATALOG: the four tracked satellites
- generate, generate_all: synthetic telemetry
- SystemClock, ManualClock: time sources (ms since epoch)
- HostScheduler, Handle: cooperative timers / frame requests
"""
from .types import CatalogEntry, Satellite
from .catalog import CATALOG
from .telemetry import generate, generate_all, format_telemetry, default_rng
from .clock import SystemClock, ManualClock, format_utc
from .scheduler import HostScheduler, Handle

__all__ = [
    "CatalogEntry",
    "Satellite",
    "CATALOG",
    "generate",
    "generate_all",
    "format_telemetry",
    "default_rng",
    "SystemClock",
    "ManualClock",
    "format_utc",
    "HostScheduler",
    "Handle",
]
