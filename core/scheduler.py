"""
HostScheduler — cooperative timers and next-frame callbacks.

Single-threaded stand-in for a host event loop. The app's main loop calls
pump() once per iteration; nothing runs between pumps.

- set_interval(cb, ms): repeating timer, returns a Handle
- request_frame(cb): one-shot callback on the next pump
- handle.cancel(): cancelled callbacks never run

Within one pump, due timers fire first, then the frame callbacks that
were requested before the pump started. A frame callback that requests
another frame is scheduled for the next pump, so a self-rescheduling
loop runs exactly once per pump.

A timer that fires is re-armed at (fire time + period). Late pumps do not
trigger catch-up firings. Exceptions escaping a callback are logged and
never cancel the timer.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Handle:
    """Cancellation token for a scheduled callback."""
    callback: Callable[[], None]
    period_ms: float = 0.0     # 0 for frame requests
    due_ms: float = 0.0
    cancelled: bool = False
    done: bool = False         # frame request already ran

    def cancel(self):
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.done)


class HostScheduler:
    """
    Timer / animation-frame host driven by an explicit pump.

    Args:
        clock: Object with now_ms()
    """

    def __init__(self, clock):
        self._clock = clock
        self._timers: list[Handle] = []
        self._frames: list[Handle] = []

    # ── Scheduling ──────────────────────────────────────────────────────────

    def set_interval(self, callback: Callable[[], None], period_ms: float) -> Handle:
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        handle = Handle(callback, period_ms=float(period_ms),
                        due_ms=self._clock.now_ms() + period_ms)
        self._timers.append(handle)
        return handle

    def request_frame(self, callback: Callable[[], None]) -> Handle:
        handle = Handle(callback)
        self._frames.append(handle)
        return handle

    def cancel(self, handle: Handle | None):
        if handle is not None:
            handle.cancel()

    # ── Pump ────────────────────────────────────────────────────────────────

    def pump(self) -> int:
        """
        Run everything that is due now.

        Returns:
            Number of callbacks invoked
        """
        now = self._clock.now_ms()
        ran = 0

        for timer in list(self._timers):
            if timer.cancelled or now < timer.due_ms:
                continue
            timer.due_ms = now + timer.period_ms
            self._run(timer)
            ran += 1
        self._timers = [t for t in self._timers if not t.cancelled]

        frames, self._frames = self._frames, []
        for frame in frames:
            if frame.cancelled:
                continue
            frame.done = True
            self._run(frame)
            ran += 1

        return ran

    def _run(self, handle: Handle):
        try:
            handle.callback()
        except Exception:
            logger.exception("Scheduled callback %r raised", handle.callback)

    # ── Introspection ───────────────────────────────────────────────────────

    @property
    def active_timers(self) -> int:
        return sum(1 for t in self._timers if not t.cancelled)

    @property
    def pending_frames(self) -> int:
        return sum(1 for f in self._frames if not f.cancelled)

    def cancel_all(self):
        for handle in self._timers + self._frames:
            handle.cancel()
        self._timers.clear()
        self._frames.clear()
