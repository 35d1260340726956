import dataclasses

import pytest

from core.config import AppConfig, RenderConfig, parse_args


def test_defaults():
    config = parse_args([])
    assert config == AppConfig()
    assert config.render.canvas_width == 800
    assert config.render.canvas_height == 600
    assert config.render.earth_radius == 120.0
    assert config.simulation.regen_period_ms == 5000.0
    assert config.simulation.clock_period_ms == 1000.0
    assert config.simulation.seed is None


def test_overrides():
    config = parse_args(["--width", "1600", "--height", "900", "--fps", "30",
                         "--seed", "11", "--regen-ms", "2500", "--log-level", "DEBUG"])
    assert (config.width, config.height, config.fps) == (1600, 900, 30)
    assert config.simulation.seed == 11
    assert config.simulation.regen_period_ms == 2500.0
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("argv", [["--regen-ms", "0"], ["--fps", "-1"], ["--log-level", "LOUD"]])
def test_invalid_arguments(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_render_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        RenderConfig().earth_radius = 10.0
