"""
AnimationLoop — continuous redraw of the orbit view.

    IDLE ──(state has satellites)──▶ RUNNING ──(set emptied / cancel)──▶ STOPPED
                                       ▲                                  │
                                       └──────(satellites again)──────────┘

Every RUNNING step renders one frame from the latest state and asks the
host for the next frame straight away, so the cadence is the host's.
cancel() is teardown: the pending frame request is dropped and the loop
never draws again.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Optional

import pygame

from core.config import RenderConfig
from core.scheduler import Handle, HostScheduler
from simulation.state import SimulationController, SimulationState
from .pipeline import render

logger = logging.getLogger(__name__)


class LoopState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class AnimationLoop:
    """
    Frame driver

    Args:
        controller: State owner (read every frame)
        host: Frame scheduler
        clock: Time source (now_ms), passed to the pipeline as frame time
        canvas: Drawing surface with width, height and apply(ops)
        config: Render configuration
    """

    def __init__(self, controller: SimulationController, host: HostScheduler,
                 clock, canvas, config: Optional[RenderConfig] = None):
        self._controller = controller
        self._host = host
        self._clock = clock
        self._canvas = canvas
        self._config = config or RenderConfig()

        self.state = LoopState.IDLE
        self._pending: Optional[Handle] = None
        self._cancelled = False

        self.frame_count = 0
        self.dropped_frames = 0

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    def start(self):
        """Begin watching the state; runs as soon as satellites exist."""
        if self._cancelled:
            return
        self._controller.on_state_changed(self._on_state_changed)
        self._on_state_changed(self._controller.state)

    def cancel(self):
        """Teardown: stop and never restart."""
        self._cancelled = True
        self._stop()
        logger.info("Animation loop cancelled after %d frames (%d dropped)",
                    self.frame_count, self.dropped_frames)

    # ── Transitions ─────────────────────────────────────────────────────────

    def _on_state_changed(self, state: SimulationState):
        if self._cancelled:
            return
        if state.populated and self.state is not LoopState.RUNNING:
            self.state = LoopState.RUNNING
            logger.debug("Animation loop running")
            self._request()
        elif not state.populated and self.state is LoopState.RUNNING:
            self._stop()

    def _stop(self):
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        if self.state is LoopState.RUNNING:
            logger.debug("Animation loop stopped")
        self.state = LoopState.STOPPED

    def _request(self):
        self._pending = self._host.request_frame(self._frame)

    # ── Frame ───────────────────────────────────────────────────────────────

    def _frame(self):
        self._pending = None
        if self._cancelled or self.state is not LoopState.RUNNING:
            return

        state = self._controller.state
        if not state.populated:
            self._stop()
            return

        # Any failure loses this frame only; the next one is still requested
        try:
            ops = render(state, self._clock.now_ms(),
                         self._canvas.width, self._canvas.height, self._config)
            self._canvas.apply(ops)
            self.frame_count += 1
        except pygame.error as exc:
            self.dropped_frames += 1
            logger.warning("Frame dropped: %s", exc)
        except Exception:
            self.dropped_frames += 1
            logger.exception("Frame dropped")

        self._request()
