import os

# Headless pygame: no window, no audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from core.clock import ManualClock
from core.scheduler import HostScheduler
from core.types import Satellite
from simulation.state import SimulationController

T0 = 1_700_000_000_000.0


class FixedRandom:
    """uniform() always returns the same fraction of the range"""

    def __init__(self, fraction: float = 0.5):
        self.fraction = fraction
        self.calls = 0

    def uniform(self, low, high):
        self.calls += 1
        return low + (high - low) * self.fraction


def make_sat(sat_id, altitude=400.0, orbit_angle=0.0, name=None):
    return Satellite(
        id=sat_id,
        name=name or f"SAT-{sat_id}",
        latitude=0.0,
        longitude=0.0,
        altitude=altitude,
        velocity=7.75,
        orbit_angle=orbit_angle,
    )


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def clock():
    return ManualClock(T0)


@pytest.fixture
def host(clock):
    return HostScheduler(clock)


@pytest.fixture
def controller():
    return SimulationController()


@pytest.fixture
def fixed_rng():
    return FixedRandom()
