import pygame
import pytest

from core.catalog import CATALOG
from core.config import AppConfig, SimulationConfig
from rendering.animation import LoopState
from ui.screen_manager import ScreenManager
from ui.screen_tracker import TrackerScreen


@pytest.fixture
def manager(clock, host):
    config = AppConfig(simulation=SimulationConfig(seed=1))
    mgr = ScreenManager(config, clock=clock, host=host)
    mgr.register_screen("TRACKER", TrackerScreen(mgr))
    mgr.switch_to("TRACKER")
    yield mgr
    mgr.shutdown()


@pytest.fixture
def screen(manager):
    return manager.screens["TRACKER"]


@pytest.fixture
def window():
    return pygame.Surface((1280, 720), 0, 32)


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k, mod=0, unicode="", scancode=0)


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


def test_mount_populates_and_animates(screen, host):
    assert screen.is_active()
    state = screen.controller.state
    assert [s.id for s in state.satellites] == [e.id for e in CATALOG]
    assert state.selected_id == CATALOG[0].id
    assert screen.animation.state is LoopState.RUNNING
    # refresh timer + clock timer
    assert host.active_timers == 2

    host.pump()
    assert screen.animation.frame_count == 1


def test_side_panels_follow_state(screen, clock, host):
    assert [s.id for s in screen.sat_list.items] == [e.id for e in CATALOG]
    assert screen.telemetry.satellite.id == CATALOG[0].id

    before = screen.telemetry.satellite
    clock.advance(5000)
    host.pump()
    assert screen.telemetry.satellite is not before
    assert screen.telemetry.satellite.id == CATALOG[0].id


def test_clock_label_ticks(screen, clock, host):
    first = screen.clock_label.text
    assert first.endswith("GMT")
    clock.advance(1000)
    host.pump()
    assert screen.clock_label.text != first


def test_arrow_keys_step_selection(screen):
    screen.handle_input([key(pygame.K_DOWN)])
    assert screen.controller.state.selected_id == CATALOG[1].id
    screen.handle_input([key(pygame.K_UP), key(pygame.K_UP)])
    assert screen.controller.state.selected_id == CATALOG[-1].id
    assert screen.telemetry.satellite.id == CATALOG[-1].id


def test_escape_posts_quit(screen):
    pygame.event.clear()
    screen.handle_input([key(pygame.K_ESCAPE)])
    assert any(e.type == pygame.QUIT for e in pygame.event.get())


def test_click_list_row_selects(screen, window):
    screen.render(window)
    screen.handle_input([click(screen.sat_list.row_rect(2).center)])
    assert screen.controller.state.selected_id == CATALOG[2].id


def test_click_marker_selects(screen, host, window):
    from rendering.pipeline import satellite_position

    screen.render(window)
    sat = screen.controller.state.satellites[3]
    cx, cy = screen.canvas.width / 2.0, screen.canvas.height / 2.0
    x, y = satellite_position(sat, (cx, cy), screen.config.render)
    view = screen._view_rect
    pos = (int(view.x + x * view.width / screen.canvas.width),
           int(view.y + y * view.height / screen.canvas.height))
    screen.handle_input([click(pos)])
    assert screen.controller.state.selected_id == sat.id


def test_render_smoke(screen, host, window):
    host.pump()
    screen.update(0.016)
    screen.render(window)
    assert screen._view_rect.width > 0


def test_teardown_stops_everything(manager, screen, clock, host):
    host.pump()
    frames = screen.animation.frame_count
    state = screen.controller.state

    manager.shutdown()
    assert not screen.is_active()
    assert screen.controller.closed
    assert screen.animation.state is LoopState.STOPPED
    assert not screen.regeneration.running
    assert host.active_timers == 0

    clock.advance(10000)
    host.pump()
    assert screen.animation.frame_count == frames
    assert screen.controller.state is state


def test_list_rows_use_theme_row_height(screen):
    assert screen.sat_list.row_height == screen.theme.row_height
    first, second = screen.sat_list.row_rect(0), screen.sat_list.row_rect(1)
    assert second.y - first.y == screen.theme.row_height
