"""Turn countdown driven by asyncio scheduled callbacks."""

import asyncio
import logging
from typing import Any, Callable, Optional

import config

logger = logging.getLogger(__name__)


class TurnTimer:
    """
    Countdown clock for a single turn.

    While running, one tick is scheduled at a time with `loop.call_later`.
    Each start/stop bumps a cycle counter, and ticks from an older cycle are
    dropped, so nothing fires after `stop_timer` or `reset_timer`. Expiry is
    reported once per start through `on_expire`.

    Pass `loop` when starting the timer from synchronous code. Otherwise the
    running loop is looked up on the first `start_timer`, which raises
    RuntimeError if no asyncio loop is running.
    """

    def __init__(
        self,
        duration: int = config.DEFAULT_TURN_DURATION,
        on_expire: Optional[Callable[[], None]] = None,
        on_tick: Optional[Callable[[int], None]] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        tick_seconds: float = config.TIMER_TICK_SECONDS,
    ):
        self.duration: int = duration
        self.time_remaining: int = duration
        self.is_running: bool = False
        self.on_expire = on_expire
        self.on_tick = on_tick
        self.tick_seconds = tick_seconds

        self._loop = loop
        self._handle: Optional[Any] = None
        self._cycle: int = 0

    def start_timer(self):
        """Start counting down from the current remaining time."""
        if self.is_running:
            return

        # Resolve the loop first so a missing loop leaves the timer idle
        self._get_loop()
        self.is_running = True
        self._cycle += 1
        logger.info("[timer-start] remaining=%ss duration=%ss", self.time_remaining, self.duration)

        # Nothing left on the clock: expire on the next loop iteration
        delay = self.tick_seconds if self.time_remaining > 0 else 0
        self._schedule(delay)

    def stop_timer(self):
        """Cancel any pending tick. Safe to call when already stopped."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self.is_running:
            logger.debug("[timer-stop] remaining=%ss", self.time_remaining)
        self.is_running = False
        self._cycle += 1

    def update_duration(self, duration: int):
        """Change the turn length. A running countdown keeps its remaining time."""
        self.duration = duration
        if not self.is_running:
            self.time_remaining = duration

    def reset_timer(self):
        self.stop_timer()
        self.time_remaining = self.duration

    @property
    def progress(self) -> float:
        """Fraction of the turn remaining, 0.0 to 1.0."""
        if self.duration <= 0:
            return 0.0
        return max(0.0, min(1.0, self.time_remaining / self.duration))

    # Internals
    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def _schedule(self, delay: float):
        cycle = self._cycle
        self._handle = self._get_loop().call_later(delay, self._tick, cycle)

    def _tick(self, cycle: int):
        if cycle != self._cycle or not self.is_running:
            return
        self._handle = None

        if self.time_remaining > 0:
            self.time_remaining -= 1
            if self.on_tick:
                self.on_tick(self.time_remaining)
            if cycle != self._cycle:
                return

        if self.time_remaining <= 0:
            self._expire()
        else:
            self._schedule(self.tick_seconds)

    def _expire(self):
        self.stop_timer()
        logger.info("[timer-fire] turn time expired")
        if self.on_expire:
            self.on_expire()
