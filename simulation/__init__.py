"""
Simulation package - shared view state and its periodic refresh.

Main exports:
- SimulationState: immutable satellite set + selection key
- SimulationController: owns the state, atomic commits, notifications
- SelectionController: selection requests, lookup-at-read resolution
- RegenerationScheduler: 5 s telemetry refresh on the host scheduler
"""
from .state import SimulationState, SimulationController
from .selection import SelectionController
from .regeneration import RegenerationScheduler

__all__ = [
    "SimulationState",
    "SimulationController",
    "SelectionController",
    "RegenerationScheduler",
]
