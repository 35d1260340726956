"""
Live Satellite Tracker - Main Application

Window, main loop and screen coordination:
- ScreenManager (shared clock + host scheduler)
- Tracker screen (orbit view, satellite list, telemetry)

The host scheduler is pumped once per loop iteration, so timers and frame
callbacks run on the same thread as input handling and drawing.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import pygame

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from core.config import AppConfig, parse_args, configure_logging
from ui.theme import get_theme
from ui.screen_manager import ScreenManager
from ui.screen_tracker import TrackerScreen

logger = logging.getLogger(__name__)


class SatelliteTrackerApp:
    """
    Main application

    Manages the window, the loop, and screen coordination.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or AppConfig()

        pygame.init()

        # Window settings (can be changed with F11 or resized)
        self.fullscreen = False
        self.screen = pygame.display.set_mode((self.config.width, self.config.height),
                                              pygame.RESIZABLE)
        pygame.display.set_caption(self.config.title)
        self.clock = pygame.time.Clock()

        self.theme = get_theme()

        self.screen_manager = ScreenManager(self.config)
        self.screen_manager.register_screen('TRACKER', TrackerScreen(self.screen_manager))
        self.screen_manager.switch_to('TRACKER')

        self.running = True
        logger.info("%s initialized (%dx%d @ %d fps)", self.config.title,
                    self.config.width, self.config.height, self.config.fps)

    def run(self):
        """Main loop"""
        logger.info("Starting main loop, press ESC to quit")

        try:
            while self.running:
                dt = self.clock.tick(self.config.fps) / 1000.0

                events = pygame.event.get()
                for event in events:
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                        self.toggle_fullscreen()
                    elif event.type == pygame.VIDEORESIZE:
                        self.handle_resize(event.w, event.h)

                self.screen_manager.handle_input(events)

                # Timers (telemetry refresh, clock) then the animation frame
                self.screen_manager.pump()
                self.screen_manager.update(dt)

                self.screen_manager.render(self.screen)
                pygame.display.flip()
        finally:
            self.screen_manager.shutdown()

    def toggle_fullscreen(self):
        self.fullscreen = not self.fullscreen

        if self.fullscreen:
            info = pygame.display.Info()
            width, height = info.current_w, info.current_h
            self.screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
            logger.info("Switched to fullscreen: %dx%d", width, height)
        else:
            self.screen = pygame.display.set_mode((self.config.width, self.config.height),
                                                  pygame.RESIZABLE)
            logger.info("Switched to windowed: %dx%d", self.config.width, self.config.height)

    def handle_resize(self, width: int, height: int):
        if not self.fullscreen:
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
            logger.debug("Window resized to: %dx%d", width, height)


def main(argv: Optional[Sequence[str]] = None):
    """Entry point"""
    config = parse_args(argv)
    configure_logging(config.log_level)

    try:
        app = SatelliteTrackerApp(config)
        app.run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        pygame.quit()
        sys.exit(0)
    except Exception:
        logger.exception("Fatal error")
        pygame.quit()
        sys.exit(1)

    logger.info("Shutting down")
    pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
