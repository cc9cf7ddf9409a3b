"""Panel images - loaded from disk or painted procedurally."""
from __future__ import annotations

import random

import pygame

from spot_diff import TargetSet
from ui.constants import IMAGE_SIZE

_PALETTE = [
    (230, 90, 70),
    (70, 160, 220),
    (120, 190, 90),
    (250, 200, 60),
    (160, 100, 200),
    (240, 140, 180),
]


def load_panel(path: str) -> pygame.Surface:
    """Load an image file scaled to the canonical panel size."""
    image = pygame.image.load(path).convert()
    return pygame.transform.smoothscale(image, (IMAGE_SIZE, IMAGE_SIZE))


def paint_pair(targets: TargetSet, seed: int) -> tuple[pygame.Surface, pygame.Surface]:
    """Paint an original panel and a copy altered at every target."""
    rng = random.Random(seed)
    original = pygame.Surface((IMAGE_SIZE, IMAGE_SIZE))
    original.fill((210, 230, 245))
    pygame.draw.rect(original, (150, 200, 120), (0, IMAGE_SIZE * 2 // 3, IMAGE_SIZE, IMAGE_SIZE // 3))

    for _ in range(40):
        color = rng.choice(_PALETTE)
        x = rng.randrange(IMAGE_SIZE)
        y = rng.randrange(IMAGE_SIZE)
        r = rng.randrange(8, 30)
        if rng.random() < 0.5:
            pygame.draw.circle(original, color, (x, y), r)
        else:
            pygame.draw.rect(original, color, (x - r, y - r, r * 2, r * 2))

    modified = original.copy()
    for point in targets:
        cx = int(point.x * IMAGE_SIZE)
        cy = int(point.y * IMAGE_SIZE)
        color = rng.choice(_PALETTE)
        if point.id % 2:
            pygame.draw.circle(modified, color, (cx, cy), 12)
        else:
            pygame.draw.polygon(modified, color, [(cx, cy - 14), (cx - 13, cy + 10), (cx + 13, cy + 10)])
    return original, modified
