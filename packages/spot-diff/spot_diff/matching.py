"""Matching engine - nearest unfound target within a tolerance radius."""
from __future__ import annotations

import math
from typing import Collection, Iterable

from spot_diff.types import Hit, MatchResult, Miss, NormalizedClick, TargetId, TargetPoint


def pixel_distance(
    ax: float, ay: float, bx: float, by: float, width: float, height: float,
) -> float:
    """Euclidean distance between two normalized points on a *width* x *height* surface."""
    return math.hypot((ax - bx) * width, (ay - by) * height)


def nearest_unfound(
    click: NormalizedClick,
    targets: Iterable[TargetPoint],
    found_ids: Collection[TargetId],
    width: float,
    height: float,
) -> tuple[TargetPoint, float] | None:
    """Return the closest target not in *found_ids* and its pixel distance.

    Ties go to the lowest id. Returns None when every target is found.
    """
    best: TargetPoint | None = None
    best_dist = math.inf
    for point in sorted(targets, key=lambda p: p.id):
        if point.id in found_ids:
            continue
        dist = pixel_distance(click.x, click.y, point.x, point.y, width, height)
        if dist < best_dist:
            best = point
            best_dist = dist
    if best is None:
        return None
    return best, best_dist


def attempt_match(
    click: NormalizedClick,
    targets: Iterable[TargetPoint],
    found_ids: Collection[TargetId],
    width: float,
    height: float,
    radius: float,
) -> MatchResult:
    """Judge a click against the unfound targets.

    Both the click and the targets are scaled to the surface's pixel size
    before measuring, so non-square surfaces compare correctly. A click
    exactly *radius* pixels away still counts. Never mutates *found_ids*.
    """
    nearest = nearest_unfound(click, targets, found_ids, width, height)
    if nearest is None:
        return Miss()
    point, dist = nearest
    if dist > radius:
        return Miss(nearest_id=point.id, distance=dist)
    return Hit(target_id=point.id, distance=dist)
