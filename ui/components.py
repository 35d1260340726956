"""
UI Components - side panel elements

- Label: Static text
- SatelliteList: Clickable list of the current satellites
- TelemetryPanel: Telemetry rows for the selected satellite
"""

import pygame
from typing import Optional, List, Tuple

from core.telemetry import format_telemetry
from core.types import Satellite
from .theme import get_theme


class Label:
    """
    Static text label

    Simple text display with configurable font and color.
    """

    def __init__(self, x: int, y: int, text: str = "",
                 font_size: str = 'normal',
                 color: Optional[Tuple[int, int, int]] = None,
                 align: str = 'left'):
        self.x = x
        self.y = y
        self.text = text
        self.font_size = font_size
        self.color = color
        self.align = align
        self.theme = get_theme()

    def draw(self, surface: pygame.Surface):
        color = self.color if self.color else self.theme.colors.FG_PRIMARY
        font = self.theme.fonts.get(self.font_size)
        self.theme.draw_text(surface, font, self.x, self.y, self.text, color, self.align)

    def set_text(self, text: str):
        self.text = text


class SatelliteList:
    """
    "Active Satellites" list

    Rows follow the satellite order of the state; the highlighted row is the
    one whose id matches the selection key. Clicking a row reports its id.
    """

    HEADER_HEIGHT = 44

    def __init__(self, x: int, y: int, width: int, row_height: int = 56):
        self.rect = pygame.Rect(x, y, width, self.HEADER_HEIGHT)
        self.row_height = row_height
        self.items: List[Satellite] = []
        self.selected_id: Optional[int] = None
        self.hover_index = -1
        self.theme = get_theme()

    def set_items(self, satellites, selected_id: Optional[int]):
        self.items = list(satellites)
        self.selected_id = selected_id
        self.rect.height = self.HEADER_HEIGHT + len(self.items) * self.row_height + 8

    def row_rect(self, index: int) -> pygame.Rect:
        pad = self.theme.padding
        return pygame.Rect(self.rect.x + pad,
                           self.rect.y + self.HEADER_HEIGHT + index * self.row_height,
                           self.rect.width - 2 * pad, self.row_height - 8)

    def index_at(self, pos: Tuple[int, int]) -> int:
        for i in range(len(self.items)):
            if self.row_rect(i).collidepoint(pos):
                return i
        return -1

    def handle_event(self, event: pygame.event.Event) -> Optional[int]:
        """
        Handle input event

        Returns:
            Id of the clicked satellite, or None
        """
        if event.type == pygame.MOUSEMOTION:
            self.hover_index = self.index_at(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            idx = self.index_at(event.pos)
            if idx >= 0:
                return self.items[idx].id
        return None

    def draw(self, surface: pygame.Surface):
        colors = self.theme.colors
        self.theme.draw_panel(surface, self.rect, "ACTIVE SATELLITES",
                              title_color=colors.ACCENT_PURPLE)

        for i, sat in enumerate(self.items):
            row = self.row_rect(i)
            selected = sat.id == self.selected_id
            if selected:
                bg, border = colors.BG_SELECTED, colors.BORDER_SELECTED
            elif i == self.hover_index:
                bg, border = colors.BG_PANEL_LIGHT, colors.FG_DARK
            else:
                bg, border = colors.BG_DARK, colors.FG_DARK
            pygame.draw.rect(surface, bg, row, border_radius=6)
            pygame.draw.rect(surface, border, row, 2 if selected else 1, border_radius=6)

            self.theme.draw_text(surface, self.theme.fonts.normal(),
                                 row.x + 10, row.y + 6, sat.name[:28], colors.FG_PRIMARY)
            self.theme.draw_text(surface, self.theme.fonts.small(),
                                 row.x + 10, row.y + 28, f"ID: {sat.id}", colors.FG_DIM)

            # Orbit marker dot, green when selected
            dot = colors.ACCENT_GREEN if selected else colors.FG_DIM
            pygame.draw.circle(surface, dot, (row.right - 18, row.centery), 6, 2)


class TelemetryPanel:
    """
    "Telemetry Data" panel

    Shows the rows from format_telemetry for one satellite; hidden when
    there is none.
    """

    def __init__(self, x: int, y: int, width: int):
        self.rect = pygame.Rect(x, y, width, 44 + 4 * 34 + 8)
        self.satellite: Optional[Satellite] = None
        self.theme = get_theme()

    @property
    def visible(self) -> bool:
        return self.satellite is not None

    def show(self, satellite: Optional[Satellite]):
        self.satellite = satellite

    def rows(self) -> List[Tuple[str, str]]:
        if self.satellite is None:
            return []
        return format_telemetry(self.satellite)

    def draw(self, surface: pygame.Surface):
        if self.satellite is None:
            return
        colors = self.theme.colors
        self.theme.draw_panel(surface, self.rect, "TELEMETRY DATA",
                              fg_color=colors.BORDER_TELEMETRY,
                              title_color=colors.ACCENT_BLUE)

        pad = self.theme.padding
        y = self.rect.y + 44
        for label, value in self.rows():
            row = pygame.Rect(self.rect.x + pad, y, self.rect.width - 2 * pad, 28)
            pygame.draw.rect(surface, colors.BG_DARK, row, border_radius=4)
            self.theme.draw_text(surface, self.theme.fonts.small(),
                                 row.x + 8, row.y + 6, label, colors.FG_DIM)
            self.theme.draw_text(surface, self.theme.fonts.normal(),
                                 row.right - 8, row.y + 5, value, colors.FG_PRIMARY,
                                 align='right')
            y += 34
