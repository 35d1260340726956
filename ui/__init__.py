"""
UI Module - window screens and side-panel components
"""
from .theme import get_theme, Colors, Fonts
from .base_screen import BaseScreen
from .components import Label, SatelliteList, TelemetryPanel
from .screen_manager import ScreenManager
from .screen_tracker import TrackerScreen

__all__ = [
    "get_theme", "Colors", "Fonts",
    "BaseScreen",
    "Label", "SatelliteList", "TelemetryPanel",
    "ScreenManager",
    "TrackerScreen",
]
