"""Pointer-to-surface coordinate mapping."""
from __future__ import annotations

from spot_diff.types import InvalidSurfaceError, NormalizedClick, SurfaceRect


def _clamp01(value: float) -> float:
    return max(0.0, min(value, 1.0))


def normalize(
    raw_x: float,
    raw_y: float,
    left: float,
    top: float,
    width: float,
    height: float,
) -> tuple[float, float]:
    """Map a raw pointer position into ``[0, 1] x [0, 1]`` of a surface.

    Positions slightly outside the surface (edge rounding) are clamped to the
    boundary rather than rejected. Raises ``InvalidSurfaceError`` if *width*
    or *height* is not positive.

    >>> normalize(340, 160, 100, 100, 480, 240)
    (0.5, 0.25)
    """
    if width <= 0 or height <= 0:
        raise InvalidSurfaceError(width, height)
    x = (raw_x - left) / width
    y = (raw_y - top) / height
    return _clamp01(x), _clamp01(y)


def normalize_click(raw_x: float, raw_y: float, surface: SurfaceRect) -> NormalizedClick:
    x, y = normalize(raw_x, raw_y, surface.left, surface.top, surface.width, surface.height)
    return NormalizedClick(x=x, y=y)
