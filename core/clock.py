"""
Clock — wall-clock time source in milliseconds since epoch.

- SystemClock: real time, used by the app
- ManualClock: advanced by hand, used by tests and offline rendering

Both expose now_ms() and utc; the telemetry formulas and ping animation
only ever read now_ms().
"""

from __future__ import annotations
import time
from datetime import datetime, timezone


class SystemClock:
    """Real wall-clock time."""

    def now_ms(self) -> float:
        return time.time() * 1000.0

    @property
    def utc(self) -> datetime:
        return _ms_to_dt(self.now_ms())


class ManualClock:
    """
    Clock that only moves when told to.

    Parameters
    ----------
    start_ms : initial time, ms since epoch (default 0)
    """

    def __init__(self, start_ms: float = 0.0):
        self._ms = float(start_ms)

    def now_ms(self) -> float:
        return self._ms

    @property
    def utc(self) -> datetime:
        return _ms_to_dt(self._ms)

    def advance(self, delta_ms: float) -> float:
        """Move forward by delta_ms; returns the new time."""
        self._ms += delta_ms
        return self._ms

    def set(self, now_ms: float):
        self._ms = float(now_ms)


def _ms_to_dt(ms: float) -> datetime:
    return datetime.fromtimestamp(ms / 1000.0, tz=timezone.utc)


def format_utc(dt: datetime) -> str:
    """RFC 1123 style, e.g. 'Sun, 19 Oct 2026 11:40:00 GMT'."""
    return dt.strftime("%a, %d %b %Y %H:%M:%S GMT")
