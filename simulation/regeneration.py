"""
Regeneration Scheduler

Rebuilds the full satellite set on a fixed period and commits it to the
SimulationController. The first tick runs synchronously in start() and
doubles as initial population.

A tick that raises is logged and skipped: the previously committed set
stays in effect and the timer keeps running, so the next period is the
retry.
"""

from __future__ import annotations
import logging
from typing import Callable, Iterable, Optional

from core.catalog import CATALOG
from core.scheduler import Handle, HostScheduler
from core.telemetry import RandomSource, default_rng, generate_all
from core.types import CatalogEntry, Satellite
from .state import SimulationController

logger = logging.getLogger(__name__)

DEFAULT_PERIOD_MS = 5000.0

SetBuilder = Callable[[Iterable[CatalogEntry], float, RandomSource], tuple[Satellite, ...]]


class RegenerationScheduler:
    """
    Periodic telemetry refresh

    Args:
        controller: State owner to commit into
        host: Timer host
        clock: Time source (now_ms)
        catalog: Entries to generate, in order
        rng: Velocity random source (default: unseeded numpy generator)
        period_ms: Refresh period
        generator: Set builder, generate_all by default
    """

    def __init__(self, controller: SimulationController, host: HostScheduler, clock,
                 catalog: Iterable[CatalogEntry] = CATALOG,
                 rng: Optional[RandomSource] = None,
                 period_ms: float = DEFAULT_PERIOD_MS,
                 generator: SetBuilder = generate_all):
        self._controller = controller
        self._host = host
        self._clock = clock
        self._catalog = tuple(catalog)
        self._rng = rng if rng is not None else default_rng()
        self.period_ms = period_ms
        self._generator = generator

        self._handle: Optional[Handle] = None
        self._cancelled = False

        # Statistics
        self.tick_count = 0
        self.failure_count = 0

    @property
    def running(self) -> bool:
        return self._handle is not None and self._handle.active

    def start(self):
        """Populate immediately, then refresh every period_ms."""
        if self.running or self._cancelled:
            return
        self.tick()
        self._handle = self._host.set_interval(self.tick, self.period_ms)
        logger.info("Telemetry refresh started (every %.0f ms, %d satellites)",
                    self.period_ms, len(self._catalog))

    def tick(self) -> bool:
        """
        Generate and commit one satellite set

        Returns:
            True if a new set was committed
        """
        if self._cancelled:
            return False

        self.tick_count += 1
        now = self._clock.now_ms()
        try:
            satellites = self._generator(self._catalog, now, self._rng)
        except Exception:
            self.failure_count += 1
            logger.exception("Telemetry generation failed at t=%.0f ms; keeping previous set", now)
            return False

        return self._controller.commit_satellites(satellites)

    def cancel(self):
        """Stop for good; no tick runs afterwards."""
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        logger.info("Telemetry refresh cancelled after %d ticks (%d failed)",
                    self.tick_count, self.failure_count)
