import math
from dataclasses import replace

import numpy as np
import pytest

from core.catalog import CATALOG
from core.telemetry import (
    _wrap, default_rng, format_telemetry, generate, generate_all,
)
from conftest import FixedRandom, make_sat


def test_catalog_contents():
    assert [e.id for e in CATALOG] == [25544, 20580, 43226, 28654]
    assert CATALOG[0].name == "ISS (ZARYA)"
    assert CATALOG[1].name == "HUBBLE SPACE TELESCOPE"


def test_first_entry_at_epoch():
    sat = generate(CATALOG[0], 0, 0.0, FixedRandom(0.0))
    assert sat.id == 25544
    assert sat.latitude == 0.0
    assert sat.longitude == -180.0
    assert sat.orbit_angle == 0.0
    assert sat.altitude == 400.0
    assert sat.velocity == 7.5


def test_phase_offset_per_index():
    sat = generate(CATALOG[1], 1, 0.0, FixedRandom())
    assert sat.latitude == pytest.approx(math.sin(1.0) * 60.0)
    assert sat.longitude == pytest.approx(-90.0)
    assert sat.orbit_angle == pytest.approx(90.0)
    assert sat.altitude == 500.0


def test_values_follow_time():
    now = 12_345_678.0
    sat = generate(CATALOG[2], 2, now, FixedRandom())
    assert sat.latitude == pytest.approx(math.sin(now / 10000.0 + 2) * 60.0)
    assert sat.longitude == pytest.approx((now / 5000.0 + 180.0) % 360.0 - 180.0)
    assert sat.orbit_angle == pytest.approx((now / 1000.0 + 180.0) % 360.0)


def test_ranges_hold_over_time():
    rng = default_rng(3)
    for now in np.linspace(0.0, 4.0e12, 257):
        for sat in generate_all(CATALOG, float(now), rng):
            assert -60.0 <= sat.latitude <= 60.0
            assert -180.0 <= sat.longitude < 180.0
            assert 0.0 <= sat.orbit_angle < 360.0
            assert 7.5 <= sat.velocity < 8.0


def test_wrap_is_floored():
    assert _wrap(-1.0, 360.0) == 359.0
    assert _wrap(720.0, 360.0) == 0.0
    assert 0.0 <= _wrap(-1e-18, 360.0) < 360.0


def test_negative_time_stays_in_range():
    sat = generate(CATALOG[0], 0, -5000.0, FixedRandom())
    assert sat.longitude == pytest.approx(179.0)
    assert 0.0 <= sat.orbit_angle < 360.0


def test_generate_all_keeps_catalog_order():
    sats = generate_all(CATALOG, 1_000.0, FixedRandom())
    assert [s.id for s in sats] == [e.id for e in CATALOG]
    assert [s.altitude for s in sats] == [400.0, 500.0, 600.0, 700.0]


def test_velocity_redrawn_each_call():
    rng = FixedRandom()
    generate_all(CATALOG, 0.0, rng)
    generate_all(CATALOG, 0.0, rng)
    assert rng.calls == 8


def test_seeded_source_is_reproducible():
    a = [s.velocity for s in generate_all(CATALOG, 0.0, default_rng(42))]
    b = [s.velocity for s in generate_all(CATALOG, 0.0, default_rng(42))]
    assert a == b


def test_format_telemetry():
    sat = replace(make_sat(1, altitude=512.25), latitude=12.3456789, longitude=-45.5)
    rows = dict(format_telemetry(sat))
    assert rows["Latitude"] == "12.3457°"
    assert rows["Longitude"] == "-45.5000°"
    assert rows["Altitude"] == "512.25 km"
    assert rows["Velocity"] == "7.75 km/s"
