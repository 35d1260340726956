"""
Tracker Screen — orbit view + satellite side panel

Layout
------
  ┌──────────────── header: title + UTC clock ────────────────┐
  │ ORBIT VIEW (800×600 canvas, scaled)   │ ACTIVE SATELLITES │
  │                                       │ TELEMETRY DATA    │
  └──────────────── footer: tracking count ───────────────────┘

Mounting (on_enter) builds the simulation: state controller, 5 s telemetry
refresh, animation loop and the 1 s clock tick, all on the shared host
scheduler. on_exit cancels all three and closes the controller, after
which nothing mutates the state or draws on the canvas.

Controls
--------
  Click row / marker   Select satellite
  Up / Down            Previous / next satellite
  ESC                  Quit
"""

import logging
import math
import pygame
from typing import Optional

from core.catalog import CATALOG
from core.clock import format_utc
from core.telemetry import default_rng
from rendering.animation import AnimationLoop
from rendering.canvas import PygameCanvas
from rendering.pipeline import hit_test
from simulation.regeneration import RegenerationScheduler
from simulation.selection import SelectionController
from simulation.state import SimulationController, SimulationState
from .base_screen import BaseScreen
from .components import Label, SatelliteList, TelemetryPanel

logger = logging.getLogger(__name__)

HEADER_H = 90
FOOTER_H = 56
SIDE_W = 360


class TrackerScreen(BaseScreen):
    """Live satellite tracker view"""

    def __init__(self, screen_manager):
        super().__init__("TRACKER")
        self.screen_manager = screen_manager
        self.config = screen_manager.config
        self.host = screen_manager.host
        self.clock = screen_manager.clock

        # Built on mount, dropped on teardown
        self.controller: Optional[SimulationController] = None
        self.selection: Optional[SelectionController] = None
        self.canvas: Optional[PygameCanvas] = None
        self.regeneration: Optional[RegenerationScheduler] = None
        self.animation: Optional[AnimationLoop] = None
        self._clock_handle = None

        self.sat_list = SatelliteList(0, 0, SIDE_W - 2 * self.theme.margin,
                                      row_height=self.theme.row_height)
        self.telemetry = TelemetryPanel(0, 0, SIDE_W - 2 * self.theme.margin)
        self.title = Label(0, 18, "LIVE SATELLITE TRACKER", 'title',
                           self.theme.colors.ACCENT_BLUE, align='center')
        self.clock_label = Label(0, 56, "", 'small', self.theme.colors.FG_DIM, align='center')

        self._view_rect = pygame.Rect(0, 0, 0, 0)
        self._elapsed = 0.0

    # -----------------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------------

    def on_enter(self):
        super().on_enter()
        render_cfg = self.config.render
        sim_cfg = self.config.simulation

        self.controller = SimulationController()
        self.selection = SelectionController(self.controller)
        self.controller.on_state_changed(self._on_state_changed)
        self.controller.on_selection_changed(self._on_selection_changed)

        self.canvas = PygameCanvas(render_cfg.canvas_width, render_cfg.canvas_height,
                                   self.theme.colors.BG_CANVAS)
        self.animation = AnimationLoop(self.controller, self.host, self.clock,
                                       self.canvas, render_cfg)
        self.regeneration = RegenerationScheduler(
            self.controller, self.host, self.clock, CATALOG,
            rng=default_rng(sim_cfg.seed), period_ms=sim_cfg.regen_period_ms,
        )

        self._tick_clock()
        self._clock_handle = self.host.set_interval(self._tick_clock, sim_cfg.clock_period_ms)

        self.animation.start()
        self.regeneration.start()
        logger.info("Tracker mounted")

    def on_exit(self):
        super().on_exit()
        if self.regeneration is not None:
            self.regeneration.cancel()
        if self.animation is not None:
            self.animation.cancel()
        self.host.cancel(self._clock_handle)
        self._clock_handle = None
        if self.controller is not None:
            self.controller.close()
        logger.info("Tracker torn down")

    # -----------------------------------------------------------------------
    # State notifications
    # -----------------------------------------------------------------------

    def _on_state_changed(self, state: SimulationState):
        self.sat_list.set_items(state.satellites, state.selected_id)
        # Values refresh every tick even when the selection stays put
        self.telemetry.show(state.selected)

    def _on_selection_changed(self, state: SimulationState):
        sat = state.selected
        logger.info("Selected %s", sat.name if sat else f"id {state.selected_id} (not in set)")
        self.telemetry.show(sat)

    def _tick_clock(self):
        self.clock_label.set_text(format_utc(self.clock.utc))

    # -----------------------------------------------------------------------
    # Input
    # -----------------------------------------------------------------------

    def handle_input(self, events: list[pygame.event.Event]) -> Optional[str]:
        if self.selection is None:
            return None

        for event in events:
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.event.post(pygame.event.Event(pygame.QUIT))
                    return None
                elif event.key == pygame.K_UP:
                    self.selection.select_previous()
                elif event.key == pygame.K_DOWN:
                    self.selection.select_next()

            picked = self.sat_list.handle_event(event)
            if picked is not None:
                self.selection.select(picked)
                continue

            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                picked = self._pick_in_view(event.pos)
                if picked is not None:
                    self.selection.select(picked)

        return None

    def _pick_in_view(self, pos) -> Optional[int]:
        """Satellite id under a window point inside the orbit view"""
        if self.canvas is None or not self._view_rect.collidepoint(pos):
            return None
        sx = self.canvas.width / max(1, self._view_rect.width)
        sy = self.canvas.height / max(1, self._view_rect.height)
        canvas_pos = ((pos[0] - self._view_rect.x) * sx,
                      (pos[1] - self._view_rect.y) * sy)
        return hit_test(self.controller.state, canvas_pos,
                        self.canvas.width, self.canvas.height, self.config.render)

    # -----------------------------------------------------------------------
    # Update / render
    # -----------------------------------------------------------------------

    def update(self, dt: float):
        self._elapsed += dt

    def _layout(self, width: int, height: int):
        m = self.theme.margin
        area = pygame.Rect(m, HEADER_H, width - SIDE_W - 2 * m,
                           height - HEADER_H - FOOTER_H)

        cw, ch = self.config.render.canvas_width, self.config.render.canvas_height
        scale = min(area.width / cw, area.height / ch)
        view = pygame.Rect(0, 0, max(1, int(cw * scale)), max(1, int(ch * scale)))
        view.center = area.center
        self._view_rect = view

        side_x = width - SIDE_W + m // 2
        self.sat_list.rect.topleft = (side_x, HEADER_H)
        self.telemetry.rect.topleft = (side_x, self.sat_list.rect.bottom + m)
        return area

    def render(self, surface: pygame.Surface):
        colors = self.theme.colors
        width, height = surface.get_size()
        surface.fill(colors.BG_DARK)
        area = self._layout(width, height)

        # Header
        self.title.x = self.clock_label.x = width // 2
        self.title.draw(surface)
        self.clock_label.draw(surface)

        # Orbit view
        self.theme.draw_panel(surface, area.inflate(8, 8), fg_color=colors.FG_DARK)
        state = self.controller.state if self.controller else SimulationState()
        if state.populated and self.canvas is not None:
            frame = self.canvas.surface
            if frame.get_size() != self._view_rect.size:
                frame = pygame.transform.smoothscale(frame, self._view_rect.size)
            surface.blit(frame, self._view_rect.topleft)
        else:
            pulse = 0.5 + 0.5 * math.sin(self._elapsed * 4.0)
            self.theme.draw_text(surface, self.theme.fonts.large(),
                                 area.centerx, area.centery - 10, "ACQUIRING SIGNAL...",
                                 colors.lerp_color(colors.FG_DARK, colors.ACCENT_BLUE, pulse),
                                 align='center')

        # Side panel
        self.sat_list.draw(surface)
        self.telemetry.draw(surface)

        # Footer
        period_s = self.config.simulation.regen_period_ms / 1000.0
        self.theme.draw_text(surface, self.theme.fonts.small(), width // 2, height - FOOTER_H + 8,
                             f"Tracking {len(state.satellites)} satellites in real-time",
                             colors.FG_DIM, align='center')
        self.theme.draw_text(surface, self.theme.fonts.small(), width // 2, height - FOOTER_H + 28,
                             f"Data updates every {period_s:g} seconds",
                             colors.FG_DARK, align='center')
