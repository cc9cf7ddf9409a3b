"""spot-diff - Difference matching and round state for spot-the-difference games."""
from __future__ import annotations

from spot_diff.clock import Clock
from spot_diff.commands import Click, CommandQueue, DismissWin, NewRound, Restart
from spot_diff.config import GameConfig
from spot_diff.feedback import FeedbackChannel, FeedbackState
from spot_diff.game import ClickOutcome, SpotTheDifference
from spot_diff.matching import attempt_match, nearest_unfound, pixel_distance
from spot_diff.normalize import normalize, normalize_click
from spot_diff.state import GameState
from spot_diff.targets import DEMO_DIFFERENCES, TargetSet, load_targets, parse_targets
from spot_diff.timer import Timer, TimerSlot
from spot_diff.types import (
    AlreadyFoundError,
    FeedbackKind,
    FeedbackMessage,
    Hit,
    InvalidSurfaceError,
    MatchResult,
    Miss,
    NormalizedClick,
    SurfaceRect,
    TargetPoint,
    TargetSetError,
    UnknownTargetError,
)

__all__ = [
    "SpotTheDifference",
    "ClickOutcome",
    "GameConfig",
    "GameState",
    "TargetSet",
    "TargetPoint",
    "DEMO_DIFFERENCES",
    "load_targets",
    "parse_targets",
    "normalize",
    "normalize_click",
    "attempt_match",
    "nearest_unfound",
    "pixel_distance",
    "FeedbackChannel",
    "FeedbackState",
    "FeedbackKind",
    "FeedbackMessage",
    "Clock",
    "Timer",
    "TimerSlot",
    "CommandQueue",
    "Click",
    "Restart",
    "NewRound",
    "DismissWin",
    "Hit",
    "Miss",
    "MatchResult",
    "NormalizedClick",
    "SurfaceRect",
    "InvalidSurfaceError",
    "AlreadyFoundError",
    "UnknownTargetError",
    "TargetSetError",
]
