"""Shared value types and errors for spot-diff."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

TargetId = int


@dataclass(frozen=True, slots=True)
class TargetPoint:
    """One difference location, in normalized surface coordinates."""

    id: TargetId
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class NormalizedClick:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class SurfaceRect:
    """On-screen bounding box of the clickable reference surface."""

    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Hit:
    target_id: TargetId
    distance: float


@dataclass(frozen=True, slots=True)
class Miss:
    """No unfound target inside the radius.

    ``nearest_id``/``distance`` describe the closest unfound target, or are
    None when every target has already been found.
    """

    nearest_id: TargetId | None = None
    distance: float | None = None


MatchResult = Union[Hit, Miss]


class FeedbackKind(Enum):
    HIT = "hit"
    MISS = "miss"
    WIN = "win"


@dataclass(frozen=True, slots=True)
class FeedbackMessage:
    kind: FeedbackKind
    text: str
    created_at: float


class InvalidSurfaceError(ValueError):
    """Raised when a click is mapped onto a surface with no area."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Surface must have positive size, got {width}x{height}"
        )


class AlreadyFoundError(KeyError):
    """Raised when recording a hit on a target that is already found."""

    def __init__(self, target_id: TargetId, message: str) -> None:
        self.target_id = target_id
        super().__init__(message)


class UnknownTargetError(KeyError):
    """Raised when a target id is not part of the current target set."""

    def __init__(self, target_id: TargetId, message: str) -> None:
        self.target_id = target_id
        super().__init__(message)


class TargetSetError(ValueError):
    """Raised on malformed target set configuration."""
