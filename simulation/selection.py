"""
Selection Controller

select() stores any id without checking it against the current set.
Whether something is selected is decided at read time by lookup, so an
id that disappears simply reads as "no selection" and comes back if the
id is regenerated.
"""

from __future__ import annotations
from typing import Optional

from core.types import Satellite
from .state import SimulationController


class SelectionController:
    """Applies selection requests to a SimulationController"""

    def __init__(self, controller: SimulationController):
        self._controller = controller

    def select(self, sat_id: Optional[int]) -> None:
        self._controller.set_selected_id(sat_id)

    def selected(self) -> Optional[Satellite]:
        """Currently selected satellite, resolved against the live set"""
        return self._controller.state.selected

    def select_next(self) -> None:
        self._step(+1)

    def select_previous(self) -> None:
        self._step(-1)

    def _step(self, direction: int):
        """
        Move selection through the set in catalog order, wrapping at the ends

        With no resolvable selection, lands on the first (forward) or last
        (backward) satellite.
        """
        state = self._controller.state
        sats = state.satellites
        if not sats:
            return

        current = state.selected
        if current is None:
            target = sats[0] if direction > 0 else sats[-1]
        else:
            idx = next(i for i, s in enumerate(sats) if s.id == current.id)
            target = sats[(idx + direction) % len(sats)]

        self.select(target.id)
