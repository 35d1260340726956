import logging

import pytest


def test_interval_fires_each_period(clock, host):
    calls = []
    host.set_interval(lambda: calls.append(clock.now_ms()), 1000)

    assert host.pump() == 0
    clock.advance(999)
    host.pump()
    assert calls == []

    clock.advance(1)
    host.pump()
    clock.advance(1000)
    host.pump()
    assert len(calls) == 2


def test_late_pump_does_not_catch_up(clock, host):
    calls = []
    host.set_interval(lambda: calls.append(1), 1000)
    clock.advance(5500)
    host.pump()
    assert len(calls) == 1
    clock.advance(999)
    host.pump()
    assert len(calls) == 1
    clock.advance(1)
    host.pump()
    assert len(calls) == 2


def test_invalid_period(host):
    with pytest.raises(ValueError):
        host.set_interval(lambda: None, 0)


def test_cancelled_timer_never_runs(clock, host):
    calls = []
    handle = host.set_interval(lambda: calls.append(1), 100)
    handle.cancel()
    clock.advance(1000)
    host.pump()
    assert calls == []
    assert host.active_timers == 0


def test_frame_runs_once(host):
    calls = []
    handle = host.request_frame(lambda: calls.append(1))
    assert host.pending_frames == 1
    host.pump()
    host.pump()
    assert calls == [1]
    assert not handle.active


def test_frame_requested_in_frame_waits_for_next_pump(host):
    calls = []

    def frame():
        calls.append(1)
        host.request_frame(frame)

    host.request_frame(frame)
    host.pump()
    assert len(calls) == 1
    host.pump()
    host.pump()
    assert len(calls) == 3


def test_timers_run_before_frames(clock, host):
    order = []
    host.request_frame(lambda: order.append("frame"))
    host.set_interval(lambda: order.append("timer"), 10)
    clock.advance(10)
    host.pump()
    assert order == ["timer", "frame"]


def test_raising_callback_is_logged_and_timer_survives(clock, host, caplog):
    calls = []

    def boom():
        calls.append(1)
        raise RuntimeError("boom")

    host.set_interval(boom, 100)
    with caplog.at_level(logging.ERROR, logger="core.scheduler"):
        clock.advance(100)
        host.pump()
        clock.advance(100)
        host.pump()
    assert len(calls) == 2
    assert "boom" in caplog.text
    assert host.active_timers == 1


def test_cancel_all(clock, host):
    calls = []
    host.set_interval(lambda: calls.append(1), 10)
    host.request_frame(lambda: calls.append(2))
    host.cancel_all()
    clock.advance(100)
    assert host.pump() == 0
    assert calls == []


def test_cancel_none_is_noop(host):
    host.cancel(None)
