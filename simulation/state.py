"""
Simulation State

Shared view state: the current satellite set and the selected id.
The state object is immutable; every change produces a new one and is
committed with a single assignment, so a reader between two updates
sees either the old or the new set, never a mix.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional

from core.types import Satellite

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationState:
    """Satellite set + selection key"""
    satellites: tuple[Satellite, ...] = ()
    # Lookup key, not a reference: resolved against `satellites` on every read
    selected_id: Optional[int] = None

    def find(self, sat_id: Optional[int]) -> Optional[Satellite]:
        if sat_id is None:
            return None
        for sat in self.satellites:
            if sat.id == sat_id:
                return sat
        return None

    @property
    def selected(self) -> Optional[Satellite]:
        return self.find(self.selected_id)

    def is_selected(self, sat: Satellite) -> bool:
        return self.selected_id is not None and sat.id == self.selected_id

    @property
    def populated(self) -> bool:
        return len(self.satellites) > 0


Listener = Callable[[SimulationState], None]


class SimulationController:
    """
    Owns the SimulationState

    Responsibilities:
    - Atomic replacement of the satellite set
    - Selection key updates
    - Change notifications (state changed / selection changed)
    - Refusing mutation after teardown
    """

    def __init__(self):
        self._state = SimulationState()
        self._closed = False
        self._state_listeners: list[Listener] = []
        self._selection_listeners: list[Listener] = []

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    # ── Listeners ───────────────────────────────────────────────────────────

    def on_state_changed(self, listener: Listener):
        """Called after every committed change (satellites or selection)."""
        self._state_listeners.append(listener)

    def on_selection_changed(self, listener: Listener):
        """Called when selected_id changes value."""
        self._selection_listeners.append(listener)

    # ── Mutation ────────────────────────────────────────────────────────────

    def commit_satellites(self, satellites: tuple[Satellite, ...]) -> bool:
        """
        Replace the whole satellite set

        Defaults the selection to the first satellite when none is set.

        Args:
            satellites: New set, catalog order

        Returns:
            True if committed, False if the controller is closed
        """
        if self._closed:
            logger.debug("Ignoring satellite commit after teardown")
            return False

        satellites = tuple(satellites)
        selected_id = self._state.selected_id
        if selected_id is None and satellites:
            selected_id = satellites[0].id

        self._set(replace(self._state, satellites=satellites, selected_id=selected_id))
        return True

    def set_selected_id(self, sat_id: Optional[int]) -> bool:
        if self._closed:
            logger.debug("Ignoring selection of %s after teardown", sat_id)
            return False
        self._set(replace(self._state, selected_id=sat_id))
        return True

    def close(self):
        """Teardown: no mutation is accepted afterwards."""
        self._closed = True
        self._state_listeners.clear()
        self._selection_listeners.clear()

    def _set(self, new_state: SimulationState):
        old = self._state
        self._state = new_state

        for listener in list(self._state_listeners):
            listener(new_state)
        if old.selected_id != new_state.selected_id:
            logger.debug("Selection changed: %s -> %s", old.selected_id, new_state.selected_id)
            for listener in list(self._selection_listeners):
                listener(new_state)
