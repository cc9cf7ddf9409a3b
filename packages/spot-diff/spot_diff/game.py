"""SpotTheDifference - one round of clicks, progress, and feedback."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from spot_diff.clock import Clock
from spot_diff.commands import Click, CommandQueue, DismissWin, NewRound, Restart
from spot_diff.config import GameConfig
from spot_diff.feedback import FeedbackChannel
from spot_diff.matching import attempt_match
from spot_diff.normalize import normalize_click
from spot_diff.state import GameState
from spot_diff.targets import TargetSet
from spot_diff.types import (
    FeedbackMessage,
    Hit,
    InvalidSurfaceError,
    MatchResult,
    NormalizedClick,
    SurfaceRect,
    TargetPoint,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClickOutcome:
    click: NormalizedClick
    result: MatchResult
    completed: bool
    message: FeedbackMessage


class SpotTheDifference:
    """Round controller the presentation layer talks to.

    Clicks can be applied directly with ``click()`` or queued with
    ``enqueue()`` and applied on the next ``step()``. Each ``step()`` is one
    clock tick: pending feedback clears count down, then queued commands run
    in order.
    """

    def __init__(
        self,
        targets: TargetSet | None = None,
        config: GameConfig | None = None,
    ) -> None:
        self._config = config if config is not None else GameConfig()
        self._clock = Clock(self._config.tps)
        self._state = GameState(targets if targets is not None else TargetSet.demo())
        self._feedback = FeedbackChannel(self._clock, self._config)
        self._win_visible = False

        self._queue = CommandQueue()
        self._queue.handle(Click, self._handle_click)
        self._queue.handle(Restart, self._handle_restart)
        self._queue.handle(NewRound, self._handle_new_round)
        self._queue.handle(DismissWin, self._handle_dismiss)

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def targets(self) -> TargetSet:
        return self._state.targets

    @property
    def feedback(self) -> FeedbackMessage | None:
        return self._feedback.message

    @property
    def feedback_channel(self) -> FeedbackChannel:
        return self._feedback

    @property
    def is_complete(self) -> bool:
        return self._state.is_complete

    @property
    def win_visible(self) -> bool:
        return self._win_visible

    def remaining(self) -> int:
        return self._state.remaining()

    def progress(self) -> float:
        return self._state.progress()

    def found_points(self) -> list[TargetPoint]:
        return self._state.found_points()

    def click(self, raw_x: float, raw_y: float, surface: SurfaceRect) -> ClickOutcome | None:
        """Judge a pointer press on *surface* and apply the result.

        Returns None, touching nothing, once the round is complete. Raises
        ``InvalidSurfaceError`` for a zero-sized surface before any state
        changes.
        """
        if self._state.is_complete:
            return None

        point = normalize_click(raw_x, raw_y, surface)
        result = attempt_match(
            point,
            self._state.targets,
            self._state.found_ids,
            surface.width,
            surface.height,
            self._config.radius_for(surface.width),
        )

        completed = False
        if isinstance(result, Hit):
            completed = self._state.record_hit(result.target_id)
            log.debug(
                "hit target %d at %.1fpx, %d remaining",
                result.target_id, result.distance, self._state.remaining(),
            )
            if completed:
                self._win_visible = True
                log.info("all %d differences found", len(self._state.targets))
        else:
            log.debug("miss at (%.3f, %.3f)", point.x, point.y)

        message = self._feedback.report(result, completed)
        return ClickOutcome(click=point, result=result, completed=completed, message=message)

    def restart(self) -> None:
        self._state.reset()
        self._feedback.clear()
        self._win_visible = False
        log.info("round restarted")

    def new_round(self, targets: TargetSet | None = None) -> None:
        if targets is not None:
            self._state = GameState(targets)
        self.restart()

    def dismiss_win(self) -> None:
        """Hide the win indicator. Found differences and completion stay."""
        if not self._win_visible:
            return
        self._win_visible = False
        self._feedback.release()

    def enqueue(self, cmd: Any) -> None:
        self._queue.enqueue(cmd)

    def step(self) -> list[tuple[Any, bool]]:
        """Advance one tick. Returns ``[(cmd, accepted), ...]`` for queued commands."""
        self._clock.advance()
        self._feedback.advance()
        return self._queue.drain()

    def _handle_click(self, cmd: Click) -> bool:
        try:
            outcome = self.click(cmd.x, cmd.y, cmd.surface)
        except InvalidSurfaceError as exc:
            log.warning("click at (%s, %s) discarded: %s", cmd.x, cmd.y, exc)
            return False
        return outcome is not None

    def _handle_restart(self, cmd: Restart) -> bool:
        self.restart()
        return True

    def _handle_new_round(self, cmd: NewRound) -> bool:
        self.new_round(cmd.targets)
        return True

    def _handle_dismiss(self, cmd: DismissWin) -> bool:
        was_visible = self._win_visible
        self.dismiss_win()
        return was_visible
