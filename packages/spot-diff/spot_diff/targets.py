"""TargetSet - the immutable catalogue of difference locations for a round."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Iterator

from spot_diff.types import TargetId, TargetPoint, TargetSetError, UnknownTargetError

DEMO_DIFFERENCES: tuple[tuple[float, float], ...] = (
    (0.12, 0.28),
    (0.25, 0.61),
    (0.32, 0.15),
    (0.39, 0.72),
    (0.48, 0.54),
    (0.57, 0.38),
    (0.66, 0.13),
    (0.73, 0.76),
    (0.81, 0.42),
    (0.93, 0.23),
)


class TargetSet:
    """Ordered, fixed-size sequence of TargetPoints.

    Ids are positions in the sequence and stay stable for the round.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[TargetPoint]) -> None:
        pts = tuple(points)
        if not pts:
            raise TargetSetError("A target set needs at least one point")
        for index, point in enumerate(pts):
            if point.id != index:
                raise TargetSetError(
                    f"Target at position {index} has id {point.id}, expected {index}"
                )
            _check_unit(point.x, point.y, index)
        self._points = pts

    @classmethod
    def from_pairs(cls, pairs: Iterable[Iterable[float]]) -> TargetSet:
        """Build a set from ``(x, y)`` pairs, assigning ids by position."""
        points: list[TargetPoint] = []
        for index, pair in enumerate(pairs):
            coords = tuple(pair)
            if len(coords) != 2:
                raise TargetSetError(
                    f"Target {index} must be an (x, y) pair, got {coords!r}"
                )
            x, y = float(coords[0]), float(coords[1])
            points.append(TargetPoint(id=index, x=x, y=y))
        return cls(points)

    @classmethod
    def demo(cls) -> TargetSet:
        return cls.from_pairs(DEMO_DIFFERENCES)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[TargetPoint]:
        return iter(self._points)

    def __getitem__(self, target_id: TargetId) -> TargetPoint:
        if target_id not in self:
            raise UnknownTargetError(
                target_id, f"No target {target_id} in a set of {len(self._points)}"
            )
        return self._points[target_id]

    def __contains__(self, target_id: object) -> bool:
        if isinstance(target_id, bool) or not isinstance(target_id, int):
            return False
        return 0 <= target_id < len(self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TargetSet):
            return NotImplemented
        return self._points == other._points

    def __repr__(self) -> str:
        return f"TargetSet({len(self._points)} points)"

    def ids(self) -> range:
        return range(len(self._points))


def _check_unit(x: float, y: float, index: int) -> None:
    if not (0.0 <= x <= 1.0 and 0.0 <= y <= 1.0):
        raise TargetSetError(
            f"Target {index} at ({x}, {y}) is outside the unit square"
        )


def parse_targets(data: Any) -> TargetSet:
    """Build a TargetSet from decoded JSON.

    Accepts ``[[x, y], ...]`` or ``[{"x": .., "y": ..}, ...]``.
    """
    if not isinstance(data, list):
        raise TargetSetError(f"Expected a list of targets, got {type(data).__name__}")
    pairs: list[tuple[Any, Any]] = []
    for index, item in enumerate(data):
        if isinstance(item, dict):
            if "x" not in item or "y" not in item:
                raise TargetSetError(f"Target {index} is missing 'x' or 'y'")
            pairs.append((item["x"], item["y"]))
        elif isinstance(item, (list, tuple)):
            pairs.append(tuple(item))
        else:
            raise TargetSetError(f"Target {index} has unsupported form {item!r}")
    try:
        return TargetSet.from_pairs(pairs)
    except TargetSetError:
        raise
    except (TypeError, ValueError) as exc:
        raise TargetSetError(f"Invalid target coordinates: {exc}") from exc


def load_targets(path: str | Path) -> TargetSet:
    """Read a TargetSet from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise TargetSetError(f"{path} is not valid JSON: {exc}") from exc
    return parse_targets(data)
