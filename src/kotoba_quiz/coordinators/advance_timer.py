"""Advance Timer - countdown that moves the session to the next card."""

import logging
from typing import Callable, Optional

from .scheduler import Scheduler

logger = logging.getLogger(__name__)


class AdvanceTimer:
    """Counts down once per second, then fires an expiry callback.

    Holds at most one live scheduler handle; starting a new countdown or
    calling cancel() drops the previous one, so a countdown started for one
    card can never fire after the session has moved on.
    """

    TICK_SECONDS = 1

    def __init__(self, scheduler: Scheduler):
        if scheduler is None:
            raise ValueError("Scheduler must not be None")
        self._scheduler = scheduler
        self._handle: Optional[object] = None
        self._generation = 0
        self._remaining: Optional[int] = None
        self._on_tick: Optional[Callable[[int], None]] = None
        self._on_expire: Optional[Callable[[], None]] = None

    @property
    def remaining(self) -> Optional[int]:
        """Seconds left, or None when no countdown is running."""
        return self._remaining

    @property
    def is_active(self) -> bool:
        return self._handle is not None

    def start(
        self,
        delay_seconds: int,
        on_tick: Callable[[int], None],
        on_expire: Callable[[], None],
    ) -> None:
        """Start a countdown, replacing any running one.

        on_tick receives the remaining seconds, first with delay_seconds
        immediately, then after every tick that does not reach zero.
        on_expire runs once when the countdown reaches zero.

        Raises:
            ValueError: If delay_seconds is less than one tick.
        """
        if delay_seconds < self.TICK_SECONDS:
            raise ValueError(f"delay_seconds must be at least {self.TICK_SECONDS}")
        self.cancel()
        self._remaining = delay_seconds
        self._on_tick = on_tick
        self._on_expire = on_expire
        on_tick(delay_seconds)
        self._schedule_tick()

    def cancel(self) -> bool:
        """Stop the countdown. Returns True if one was running."""
        was_active = self._handle is not None
        if self._handle is not None:
            self._scheduler.cancel(self._handle)
            self._handle = None
        self._generation += 1
        self._remaining = None
        self._on_tick = None
        self._on_expire = None
        if was_active:
            logger.debug("Countdown cancelled")
        return was_active

    def _schedule_tick(self) -> None:
        generation = self._generation
        self._handle = self._scheduler.schedule(
            self.TICK_SECONDS, lambda: self._tick(generation)
        )

    def _tick(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._handle = None
        self._remaining -= self.TICK_SECONDS

        if self._remaining > 0:
            self._on_tick(self._remaining)
            self._schedule_tick()
            return

        on_expire = self._on_expire
        self._generation += 1
        self._remaining = None
        self._on_tick = None
        self._on_expire = None
        on_expire()
