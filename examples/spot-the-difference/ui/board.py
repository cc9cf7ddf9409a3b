"""Image panels and found-difference markers."""
from __future__ import annotations

import pygame

from spot_diff import TargetPoint
from ui.constants import MARKER_BORDER, MARKER_SIZE


def draw_panel(
    surface: pygame.Surface,
    image: pygame.Surface,
    rect: pygame.Rect,
    border: tuple[int, int, int],
) -> None:
    surface.blit(image, rect.topleft)
    pygame.draw.rect(surface, border, rect.inflate(6, 6), 3, border_radius=10)


def draw_markers(
    surface: pygame.Surface,
    rect: pygame.Rect,
    points: list[TargetPoint],
    color: tuple[int, int, int],
) -> None:
    """Ring every found point. Positions are normalized, so any panel works."""
    half = MARKER_SIZE // 2
    fill = pygame.Surface((MARKER_SIZE, MARKER_SIZE), pygame.SRCALPHA)
    pygame.draw.circle(fill, (*color, 51), (half, half), half)
    for point in points:
        cx = rect.left + round(point.x * rect.width)
        cy = rect.top + round(point.y * rect.height)
        surface.blit(fill, (cx - half, cy - half))
        pygame.draw.circle(surface, color, (cx, cy), half, MARKER_BORDER)
        pygame.draw.lines(
            surface, color, False,
            [(cx - 7, cy), (cx - 2, cy + 6), (cx + 8, cy - 6)], 3,
        )
