"""Header bar, progress, buttons, and the feedback strip."""
from __future__ import annotations

import pygame

from spot_diff import FeedbackMessage
from ui.constants import (
    COLOR_ACCENT,
    COLOR_FEEDBACK_BG,
    COLOR_PRIMARY,
    COLOR_PROGRESS_BG,
    COLOR_SECONDARY,
    COLOR_TEXT,
    COLOR_TEXT_LIGHT,
    FEEDBACK_H,
    FOOTER_H,
    HEADER_H,
    IMAGE_SIZE,
    PROGRESS_H,
    PROGRESS_W,
    SCREEN_H,
    SCREEN_W,
)


class Button:
    """Clickable labelled rectangle."""

    def __init__(self, label: str, rect: pygame.Rect, color: tuple[int, int, int]) -> None:
        self.label = label
        self.rect = rect
        self.color = color

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        pygame.draw.rect(surface, self.color, self.rect, border_radius=6)
        text = font.render(self.label, True, COLOR_TEXT_LIGHT)
        surface.blit(text, text.get_rect(center=self.rect.center))


def make_header_buttons() -> tuple[Button, Button]:
    cy = 58
    restart = Button("Restart", pygame.Rect(SCREEN_W // 2 + 40, cy, 96, 28), COLOR_ACCENT)
    new_game = Button("New Game", pygame.Rect(SCREEN_W // 2 + 146, cy, 110, 28), COLOR_SECONDARY)
    return restart, new_game


def draw_header(
    surface: pygame.Surface,
    title_font: pygame.font.Font,
    font: pygame.font.Font,
    remaining: int,
    progress: float,
    buttons: tuple[Button, ...],
) -> None:
    pygame.draw.rect(surface, COLOR_PRIMARY, (0, 0, SCREEN_W, HEADER_H - 16))
    pygame.draw.line(surface, COLOR_ACCENT, (0, HEADER_H - 16), (SCREEN_W, HEADER_H - 16), 2)

    title = title_font.render("Spot the Difference", True, COLOR_TEXT_LIGHT)
    surface.blit(title, title.get_rect(midtop=(SCREEN_W // 2, 10)))

    counter = font.render(f"{remaining} differences remaining", True, COLOR_TEXT_LIGHT)
    surface.blit(counter, counter.get_rect(midright=(SCREEN_W // 2 + 24, 72)))
    for button in buttons:
        button.draw(surface, font)

    bar = pygame.Rect(0, 0, PROGRESS_W, PROGRESS_H)
    bar.midtop = (SCREEN_W // 2, HEADER_H - 30)
    track = pygame.Surface(bar.size, pygame.SRCALPHA)
    track.fill(COLOR_PROGRESS_BG)
    surface.blit(track, bar.topleft)
    filled = bar.copy()
    filled.width = round(bar.width * progress)
    if filled.width:
        pygame.draw.rect(surface, COLOR_ACCENT, filled, border_radius=4)


def draw_feedback(
    surface: pygame.Surface,
    font: pygame.font.Font,
    message: FeedbackMessage | None,
) -> None:
    if message is None:
        return
    text = font.render(message.text, True, COLOR_TEXT)
    box = text.get_rect().inflate(56, 24)
    box.center = (SCREEN_W // 2, HEADER_H + IMAGE_SIZE + FEEDBACK_H // 2 + 4)
    backdrop = pygame.Surface(box.size, pygame.SRCALPHA)
    pygame.draw.rect(backdrop, COLOR_FEEDBACK_BG, backdrop.get_rect(), border_radius=7)
    surface.blit(backdrop, box.topleft)
    surface.blit(text, text.get_rect(center=box.center))


def draw_footer(surface: pygame.Surface, font: pygame.font.Font) -> None:
    text = font.render("Difference Detective | Made with Spot the Difference", True, COLOR_SECONDARY)
    surface.blit(text, text.get_rect(center=(SCREEN_W // 2, SCREEN_H - FOOTER_H // 2)))
