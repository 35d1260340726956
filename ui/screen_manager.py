"""
Screen Manager

Screen registration, switching and lifecycle, plus the services shared by
all screens (clock, host scheduler, configuration).
"""

import logging
import pygame
from typing import Optional, Dict

from core.clock import SystemClock
from core.config import AppConfig
from core.scheduler import HostScheduler

logger = logging.getLogger(__name__)


class ScreenManager:
    """
    Manages screens and shared services

    Responsibilities:
    - Screen registration and lifecycle (on_enter = mount, on_exit = teardown)
    - Switching between screens
    - Owning the clock and the host scheduler that screens schedule on
    """

    def __init__(self, config: Optional[AppConfig] = None, clock=None,
                 host: Optional[HostScheduler] = None):
        self.config = config or AppConfig()
        self.clock = clock or SystemClock()
        self.host = host or HostScheduler(self.clock)
        self.screens: Dict[str, 'BaseScreen'] = {}
        self.current_screen: Optional[str] = None

    def register_screen(self, name: str, screen: 'BaseScreen'):
        self.screens[name] = screen
        logger.info("Registered screen: %s", name)

    def switch_to(self, screen_name: str):
        """
        Switch to a screen

        The current screen is torn down before the new one mounts.
        """
        if screen_name not in self.screens:
            logger.warning("Screen '%s' not registered", screen_name)
            return

        if self.current_screen:
            self.screens[self.current_screen].on_exit()

        self.current_screen = screen_name
        self.screens[screen_name].on_enter()
        logger.info("Switched to screen: %s", screen_name)

    def shutdown(self):
        """Tear down the current screen and drop any leftover timers"""
        if self.current_screen:
            self.screens[self.current_screen].on_exit()
            self.current_screen = None
        self.host.cancel_all()

    def pump(self) -> int:
        """Run due timers and frame callbacks"""
        return self.host.pump()

    def update(self, dt: float):
        if self.current_screen:
            self.screens[self.current_screen].update(dt)

    def render(self, surface: pygame.Surface):
        if self.current_screen:
            self.screens[self.current_screen].render(surface)

    def handle_input(self, events: list[pygame.event.Event]):
        if not self.current_screen:
            return

        next_screen = self.screens[self.current_screen].handle_input(events)
        if next_screen:
            self.switch_to(next_screen)
