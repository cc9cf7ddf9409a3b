"""Deferred actions counted in ticks."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class Timer:
    """One-shot countdown. Fires when remaining reaches 0."""

    name: str
    remaining: int


class TimerSlot:
    """Holds at most one pending Timer and its callback.

    Scheduling while a timer is pending cancels it first, so a stale callback
    can never fire after it has been replaced.
    """

    def __init__(self) -> None:
        self._timer: Timer | None = None
        self._action: Callable[[Timer], None] | None = None

    @property
    def pending(self) -> Timer | None:
        return self._timer

    def schedule(self, name: str, ticks: int, action: Callable[[Timer], None]) -> Timer:
        self.cancel()
        timer = Timer(name=name, remaining=ticks)
        self._timer = timer
        self._action = action
        return timer

    def cancel(self) -> bool:
        """Drop the pending timer. Returns True if one was pending."""
        had_timer = self._timer is not None
        self._timer = None
        self._action = None
        return had_timer

    def advance(self) -> Timer | None:
        """Count the pending timer down one tick. Returns it if it fired."""
        timer = self._timer
        if timer is None:
            return None
        timer.remaining -= 1
        if timer.remaining > 0:
            return None
        action = self._action
        # Detach before firing so the action may schedule a successor.
        self._timer = None
        self._action = None
        if action is not None:
            action(timer)
        return timer
