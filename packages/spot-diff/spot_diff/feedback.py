"""FeedbackChannel - short-lived status messages for click outcomes."""
from __future__ import annotations

import logging
from enum import Enum

from spot_diff.clock import Clock
from spot_diff.config import GameConfig
from spot_diff.timer import Timer, TimerSlot
from spot_diff.types import FeedbackKind, FeedbackMessage, Hit, MatchResult

log = logging.getLogger(__name__)

_CLEAR_TIMER = "feedback.clear"


class FeedbackState(Enum):
    IDLE = "idle"
    ACTIVE = "active"


class FeedbackChannel:
    """One active message at a time, expiring after ``config.feedback_ticks``.

    Hit and miss messages expire on their own. A win message stays until
    ``release()`` or ``clear()`` is called. Every new message cancels the
    previous message's pending clear.
    """

    def __init__(self, clock: Clock, config: GameConfig | None = None) -> None:
        self._clock = clock
        self._config = config if config is not None else GameConfig()
        self._message: FeedbackMessage | None = None
        self._expiry = TimerSlot()

    @property
    def message(self) -> FeedbackMessage | None:
        return self._message

    @property
    def state(self) -> FeedbackState:
        return FeedbackState.IDLE if self._message is None else FeedbackState.ACTIVE

    @property
    def expiry(self) -> Timer | None:
        """The pending auto-clear, if any."""
        return self._expiry.pending

    def report(self, result: MatchResult, completed: bool = False) -> FeedbackMessage:
        """Emit the message for a judged click."""
        if isinstance(result, Hit):
            if completed:
                return self._emit(FeedbackKind.WIN, self._config.win_text, expires=False)
            return self._emit(FeedbackKind.HIT, self._config.hit_text, expires=True)
        return self._emit(FeedbackKind.MISS, self._config.miss_text, expires=True)

    def release(self) -> None:
        """Let a persisted message expire like any other."""
        if self._message is None or self._expiry.pending is not None:
            return
        self._expiry.schedule(_CLEAR_TIMER, self._config.feedback_ticks, self._on_expire)

    def clear(self) -> None:
        self._expiry.cancel()
        self._message = None

    def advance(self) -> None:
        """Count the pending clear down by one tick."""
        self._expiry.advance()

    def _emit(self, kind: FeedbackKind, text: str, expires: bool) -> FeedbackMessage:
        message = FeedbackMessage(kind=kind, text=text, created_at=self._clock.elapsed)
        self._message = message
        if expires:
            self._expiry.schedule(_CLEAR_TIMER, self._config.feedback_ticks, self._on_expire)
        else:
            self._expiry.cancel()
        log.debug("feedback %s at tick %d", kind.value, self._clock.tick_number)
        return message

    def _on_expire(self, timer: Timer) -> None:
        self._message = None
