import asyncio
import pytest

from game.timer import TurnTimer


def make_timer(loop, duration=5, expired=None, ticks=None):
    return TurnTimer(
        duration=duration,
        on_expire=(lambda: expired.append(True)) if expired is not None else None,
        on_tick=ticks.append if ticks is not None else None,
        loop=loop,
        tick_seconds=1,
    )


def test_counts_down_once_per_second(loop):
    ticks = []
    timer = make_timer(loop, duration=5, ticks=ticks)
    timer.start_timer()
    assert timer.is_running
    loop.advance(3)
    assert timer.time_remaining == 2
    assert ticks == [4, 3, 2]


def test_expires_once_at_zero(loop):
    expired = []
    timer = make_timer(loop, duration=3, expired=expired)
    timer.start_timer()
    loop.advance(10)
    assert expired == [True]
    assert timer.time_remaining == 0
    assert not timer.is_running
    assert loop.pending == []


def test_stop_cancels_pending_tick(loop):
    expired = []
    timer = make_timer(loop, duration=3, expired=expired)
    timer.start_timer()
    loop.advance(1)
    timer.stop_timer()
    timer.stop_timer()
    loop.advance(10)
    assert timer.time_remaining == 2
    assert expired == []
    assert not timer.is_running


def test_restart_resumes_from_remaining(loop):
    timer = make_timer(loop, duration=5)
    timer.start_timer()
    loop.advance(2)
    timer.stop_timer()
    timer.start_timer()
    loop.advance(1)
    assert timer.time_remaining == 2


def test_repeated_start_does_not_double_tick(loop):
    timer = make_timer(loop, duration=10)
    timer.start_timer()
    timer.start_timer()
    timer.start_timer()
    loop.advance(3)
    assert timer.time_remaining == 7
    assert len(loop.pending) == 1


def test_reset_restores_duration_and_stops(loop):
    expired = []
    timer = make_timer(loop, duration=4, expired=expired)
    timer.start_timer()
    loop.advance(2)
    timer.reset_timer()
    loop.advance(10)
    assert timer.time_remaining == 4
    assert not timer.is_running
    assert expired == []


def test_update_duration_while_idle_resets_remaining(loop):
    timer = make_timer(loop, duration=60)
    timer.update_duration(30)
    assert timer.duration == 30
    assert timer.time_remaining == 30


def test_update_duration_while_running_keeps_remaining(loop):
    timer = make_timer(loop, duration=60)
    timer.start_timer()
    loop.advance(5)
    timer.update_duration(90)
    assert timer.duration == 90
    assert timer.time_remaining == 55
    timer.reset_timer()
    assert timer.time_remaining == 90


def test_zero_duration_expires_immediately_on_start(loop):
    expired = []
    timer = make_timer(loop, duration=0, expired=expired)
    timer.start_timer()
    assert expired == []
    loop.advance(0)
    assert expired == [True]


def test_negative_duration_expires_immediately_on_start(loop):
    expired = []
    timer = make_timer(loop, duration=-5, expired=expired)
    timer.start_timer()
    loop.advance(0)
    assert expired == [True]
    assert timer.time_remaining == -5


def test_expire_callback_can_restart_timer(loop):
    expired = []
    timer = make_timer(loop, duration=2)

    def on_expire():
        expired.append(True)
        timer.reset_timer()
        if len(expired) < 2:
            timer.start_timer()

    timer.on_expire = on_expire
    timer.start_timer()
    loop.advance(10)
    assert expired == [True, True]


def test_progress():
    timer = TurnTimer(duration=60, loop=object())
    assert timer.progress == 1.0
    timer.time_remaining = 15
    assert timer.progress == 0.25
    timer.update_duration(0)
    assert timer.progress == 0.0


def test_runs_on_real_event_loop():
    async def run():
        done = asyncio.Event()
        timer = TurnTimer(duration=2, on_expire=done.set, tick_seconds=0.01)
        timer.start_timer()
        await asyncio.wait_for(done.wait(), timeout=2)
        return timer

    timer = asyncio.run(run())
    assert timer.time_remaining == 0
    assert not timer.is_running


def test_start_without_loop_outside_asyncio_raises():
    timer = TurnTimer(duration=5)
    with pytest.raises(RuntimeError):
        timer.start_timer()
    assert not timer.is_running
    assert timer.time_remaining == 5
