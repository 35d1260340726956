"""
UI Theme - Night Console Style

Colors, fonts and panel drawing for the tracker window.
Slate background, blue/purple accents, green for the selected satellite
(matches the orbit view's selection colour).
"""

import pygame
from typing import Optional, Tuple
from dataclasses import dataclass


class Colors:
    """Palette shared by every panel"""

    # Backgrounds
    BG_DARK = (15, 23, 42)          # slate-900
    BG_PANEL = (30, 41, 59)         # slate-800
    BG_PANEL_LIGHT = (51, 65, 85)   # slate-700 (hover / rows)
    BG_SELECTED = (20, 60, 50)      # green-tinted row
    BG_CANVAS = (5, 8, 20)

    # Foreground
    FG_PRIMARY = (241, 245, 249)    # slate-100
    FG_DIM = (148, 163, 184)        # slate-400
    FG_DARK = (71, 85, 105)         # slate-600 (borders)

    # Accents
    ACCENT_BLUE = (96, 165, 250)    # blue-400
    ACCENT_PURPLE = (192, 132, 252) # purple-400
    ACCENT_GREEN = (74, 222, 128)   # green-400

    BORDER_NORMAL = FG_DARK
    BORDER_SELECTED = ACCENT_GREEN
    BORDER_TELEMETRY = (59, 130, 246)

    @staticmethod
    def lerp_color(color1: Tuple[int, int, int],
                   color2: Tuple[int, int, int],
                   t: float) -> Tuple[int, int, int]:
        """
        Linearly interpolate between two colors

        Args:
            color1: Start color (RGB)
            color2: End color (RGB)
            t: Interpolation factor (0-1)
        """
        t = max(0.0, min(1.0, t))
        return tuple(int(a + (b - a) * t) for a, b in zip(color1, color2))


@dataclass
class FontConfig:
    """Font configuration"""
    family: str = "DejaVu Sans Mono"
    size_title: int = 28
    size_large: int = 20
    size_normal: int = 16
    size_small: int = 13
    bold_title: bool = True


class Fonts:
    """
    Font manager

    Loads and caches fonts on first use.
    """

    _initialized = False
    _fonts: dict = {}
    _config = FontConfig()

    @classmethod
    def initialize(cls, config: Optional[FontConfig] = None):
        if config is not None:
            cls._config = config

        pygame.font.init()
        cfg = cls._config

        # SysFont falls back to the default font when the family is missing
        cls._fonts['title'] = pygame.font.SysFont(cfg.family, cfg.size_title, bold=cfg.bold_title)
        cls._fonts['large'] = pygame.font.SysFont(cfg.family, cfg.size_large, bold=True)
        cls._fonts['normal'] = pygame.font.SysFont(cfg.family, cfg.size_normal)
        cls._fonts['small'] = pygame.font.SysFont(cfg.family, cfg.size_small)
        cls._initialized = True

    @classmethod
    def get(cls, size: str = 'normal') -> pygame.font.Font:
        """
        Get font by size name

        Args:
            size: 'title', 'large', 'normal' or 'small'
        """
        if not cls._initialized:
            cls.initialize()
        return cls._fonts.get(size, cls._fonts['normal'])

    @classmethod
    def large(cls) -> pygame.font.Font:
        return cls.get('large')

    @classmethod
    def normal(cls) -> pygame.font.Font:
        return cls.get('normal')

    @classmethod
    def small(cls) -> pygame.font.Font:
        return cls.get('small')


class Theme:
    """Colors, fonts and spacing in one object"""

    def __init__(self):
        self.colors = Colors()
        self.fonts = Fonts()

        self.padding = 12
        self.margin = 16
        self.border_width = 1
        self.row_height = 56

    def draw_panel(self, surface: pygame.Surface, rect: pygame.Rect,
                   title: str = "",
                   fg_color: Optional[Tuple[int, int, int]] = None,
                   bg_color: Optional[Tuple[int, int, int]] = None,
                   title_color: Optional[Tuple[int, int, int]] = None):
        """
        Draw a bordered panel, optionally with a title line

        Args:
            surface: Target surface
            rect: Panel rectangle
            title: Optional title text
            fg_color: Border color (None = default)
            bg_color: Fill color (None = default)
            title_color: Title color (None = primary text)
        """
        fg_color = fg_color or self.colors.BORDER_NORMAL
        bg_color = bg_color or self.colors.BG_PANEL

        pygame.draw.rect(surface, bg_color, rect, border_radius=8)
        pygame.draw.rect(surface, fg_color, rect, self.border_width, border_radius=8)

        if title:
            self.draw_text(surface, self.fonts.large(),
                           rect.x + self.padding, rect.y + self.padding,
                           title, title_color or self.colors.FG_PRIMARY)

    def draw_text(self, surface: pygame.Surface, font: pygame.font.Font,
                  x: int, y: int, text: str, color: Tuple[int, int, int],
                  align: str = 'left'):
        """
        Draw text

        Args:
            align: 'left', 'center' or 'right' (relative to x)
        """
        rendered = font.render(text, True, color)

        if align == 'center':
            x -= rendered.get_width() // 2
        elif align == 'right':
            x -= rendered.get_width()

        surface.blit(rendered, (x, y))


# Global theme instance
_theme = None


def get_theme() -> Theme:
    """Get global theme instance"""
    global _theme
    if _theme is None:
        _theme = Theme()
        _theme.fonts.initialize()
    return _theme
