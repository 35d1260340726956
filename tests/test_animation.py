import pygame
import pytest

from rendering.animation import AnimationLoop, LoopState
from conftest import make_sat


class FakeCanvas:
    width = 800
    height = 600

    def __init__(self, fail_on=(), error=pygame.error):
        self.frames = []
        self.fail_on = set(fail_on)
        self.error = error

    def apply(self, ops):
        index = len(self.frames)
        self.frames.append(ops)
        if index in self.fail_on:
            raise self.error("surface lost")
        return len(ops)


@pytest.fixture
def canvas():
    return FakeCanvas()


@pytest.fixture
def loop(controller, host, clock, canvas):
    return AnimationLoop(controller, host, clock, canvas)


def test_idle_until_satellites(loop, controller, host, canvas):
    loop.start()
    assert loop.state is LoopState.IDLE
    host.pump()
    assert canvas.frames == []

    controller.commit_satellites((make_sat(1),))
    assert loop.state is LoopState.RUNNING


def test_starts_immediately_when_already_populated(loop, controller, host):
    controller.commit_satellites((make_sat(1),))
    loop.start()
    assert loop.running
    assert host.pending_frames == 1


def test_one_frame_per_pump(loop, controller, host, canvas):
    loop.start()
    controller.commit_satellites((make_sat(1), make_sat(2)))
    for _ in range(3):
        host.pump()
    assert loop.frame_count == 3
    assert len(canvas.frames) == 3
    assert host.pending_frames == 1


def test_frame_uses_latest_state_and_time(loop, controller, host, clock, canvas):
    loop.start()
    controller.commit_satellites((make_sat(1),))
    host.pump()
    controller.commit_satellites((make_sat(1), make_sat(2)))
    clock.advance(250)
    host.pump()
    assert len(canvas.frames[1]) == len(canvas.frames[0]) + 3


def test_stops_when_emptied_and_restarts(loop, controller, host, canvas):
    loop.start()
    controller.commit_satellites((make_sat(1),))
    host.pump()

    controller.commit_satellites(())
    assert loop.state is LoopState.STOPPED
    host.pump()
    host.pump()
    assert loop.frame_count == 1

    controller.commit_satellites((make_sat(1),))
    assert loop.state is LoopState.RUNNING
    host.pump()
    assert loop.frame_count == 2


def test_cancel_is_final(loop, controller, host, canvas):
    loop.start()
    controller.commit_satellites((make_sat(1),))
    loop.cancel()

    assert loop.state is LoopState.STOPPED
    host.pump()
    controller.commit_satellites((make_sat(2),))
    host.pump()
    assert canvas.frames == []
    assert host.pending_frames == 0


def test_canvas_error_drops_frame_only(controller, host, clock):
    canvas = FakeCanvas(fail_on={1})
    loop = AnimationLoop(controller, host, clock, canvas)
    loop.start()
    controller.commit_satellites((make_sat(1),))
    for _ in range(3):
        host.pump()
    assert loop.dropped_frames == 1
    assert loop.frame_count == 2
    assert loop.running


def test_unexpected_error_drops_frame_only(controller, host, clock, caplog):
    canvas = FakeCanvas(fail_on={0}, error=ValueError)
    loop = AnimationLoop(controller, host, clock, canvas)
    loop.start()
    controller.commit_satellites((make_sat(1),))
    for _ in range(5):
        host.pump()
    assert len(canvas.frames) == 5
    assert loop.dropped_frames == 1
    assert loop.frame_count == 4
    assert loop.running
    assert host.pending_frames == 1
    assert "Frame dropped" in caplog.text


def test_render_failure_drops_frame_only(controller, host, clock, canvas, monkeypatch):
    import rendering.animation as animation

    real_render = animation.render
    calls = {"n": 0}

    def flaky_render(*args):
        calls["n"] += 1
        if calls["n"] == 1:
            raise ZeroDivisionError("bad geometry")
        return real_render(*args)

    monkeypatch.setattr(animation, "render", flaky_render)
    loop = AnimationLoop(controller, host, clock, canvas)
    loop.start()
    controller.commit_satellites((make_sat(1),))
    for _ in range(3):
        host.pump()
    assert loop.dropped_frames == 1
    assert len(canvas.frames) == 2
    assert loop.running
