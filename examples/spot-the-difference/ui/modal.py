"""Win modal with Play Again / Dismiss."""
from __future__ import annotations

import pygame

from ui.constants import (
    COLOR_BUTTON_MUTED,
    COLOR_MODAL_BG,
    COLOR_OVERLAY,
    COLOR_PRIMARY,
    COLOR_TEXT_DIM,
    SCREEN_H,
    SCREEN_W,
)
from ui.hud import Button


class WinModal:
    def __init__(self) -> None:
        self.box = pygame.Rect(0, 0, 380, 200)
        self.box.center = (SCREEN_W // 2, SCREEN_H // 2)
        bx = self.box.centerx
        by = self.box.bottom - 52
        self.play_again = Button("Play Again", pygame.Rect(bx - 130, by, 120, 32), COLOR_PRIMARY)
        self.dismiss = Button("Dismiss", pygame.Rect(bx + 10, by, 120, 32), COLOR_BUTTON_MUTED)

    def draw(
        self,
        surface: pygame.Surface,
        title_font: pygame.font.Font,
        font: pygame.font.Font,
        total: int,
    ) -> None:
        overlay = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        surface.blit(overlay, (0, 0))

        pygame.draw.rect(surface, COLOR_MODAL_BG, self.box, border_radius=11)
        title = title_font.render("You won!", True, COLOR_PRIMARY)
        surface.blit(title, title.get_rect(midtop=(self.box.centerx, self.box.top + 24)))
        lines = [f"You found all {total} differences.", "Great job!"]
        for i, line in enumerate(lines):
            text = font.render(line, True, COLOR_TEXT_DIM)
            surface.blit(text, text.get_rect(midtop=(self.box.centerx, self.box.top + 72 + i * 22)))
        self.play_again.draw(surface, font)
        self.dismiss.draw(surface, font)
