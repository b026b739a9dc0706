import os
import random
import sys

import pytest

# Ensure the repo root (containing the `game` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from game.coordinator import GameCoordinator  # noqa: E402


class ManualClock:
    """Monotonic clock the tests move forward by hand."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeHandle:
    def __init__(self, when, callback, args):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeLoop:
    """
    Just enough of an asyncio loop for TurnTimer: `call_later` queues a
    callback, and `advance` runs everything that falls due. When a clock is
    attached it moves with the loop so turn timings line up.
    """

    def __init__(self, clock=None):
        self.time = 0.0
        self.clock = clock
        self.handles = []

    def call_later(self, delay, callback, *args):
        handle = FakeHandle(self.time + delay, callback, args)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]

    def advance(self, seconds):
        target = self.time + seconds
        while True:
            due = [h for h in self.pending if h.when <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.handles.remove(handle)
            self._move_to(handle.when)
            handle.callback(*handle.args)
        self._move_to(target)

    def _move_to(self, when):
        if self.clock is not None:
            self.clock.advance(when - self.time)
        self.time = when


@pytest.fixture()
def clock():
    return ManualClock()


@pytest.fixture()
def loop(clock):
    return FakeLoop(clock)


@pytest.fixture()
def events():
    return {'phases': [], 'snapshots': []}


@pytest.fixture()
def coordinator(loop, clock, events):
    return GameCoordinator(
        timer_duration=60,
        on_phase_changed=events['phases'].append,
        on_state_changed=events['snapshots'].append,
        loop=loop,
        clock=clock,
        rng=random.Random(7),
    )


@pytest.fixture()
def playing(coordinator):
    """A coordinator mid-turn in round 1 with words A, B, C."""
    for text in ('A', 'B', 'C'):
        coordinator.add_word(text)
    coordinator.start_game()
    coordinator.begin_round()
    return coordinator
