"""Spot the Difference - pygame front-end for the spot-diff round engine.

Click the left panel where it differs from the right one. Found differences
are ringed on both panels.

Controls:
  Left-click  Mark a difference (left panel) / press a button
  R           Restart
  N           New game
  Escape      Dismiss the win dialog, or quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from spot_diff import (
    Click,
    DismissWin,
    GameConfig,
    NewRound,
    Restart,
    SpotTheDifference,
    SurfaceRect,
    TargetSet,
    TargetSetError,
    load_targets,
)
from ui.board import draw_markers, draw_panel
from ui.constants import (
    COLOR_ACCENT,
    COLOR_BG,
    COLOR_PRIMARY,
    COLOR_SECONDARY,
    FPS,
    IMAGE_SIZE,
    LEFT_PANEL,
    RIGHT_PANEL,
    SCREEN_H,
    SCREEN_W,
    TPS,
)
from ui.hud import draw_feedback, draw_footer, draw_header, make_header_buttons
from ui.modal import WinModal
from ui.scene import load_panel, paint_pair

log = logging.getLogger("spot_the_difference")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Spot the Difference - spot-diff visual demo")
    p.add_argument("--targets", type=str, default=None, metavar="FILE",
                   help="JSON list of normalized [x, y] difference points")
    p.add_argument("--left", type=str, default=None, metavar="IMAGE", help="Original image")
    p.add_argument("--right", type=str, default=None, metavar="IMAGE", help="Modified image")
    p.add_argument("--seed", type=int, default=42, help="Seed for painted panels (default: 42)")
    p.add_argument("--tps", type=int, default=TPS, help=f"Ticks per second (default: {TPS})")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args()
    if (args.left is None) != (args.right is None):
        p.error("--left and --right must be given together")
    return args


class Panels:
    """The two panel images, repainted on each new game unless loaded from disk."""

    def __init__(self, args: argparse.Namespace, targets: TargetSet) -> None:
        self._args = args
        self._seed = args.seed
        if args.left is not None:
            self.left = load_panel(args.left)
            self.right = load_panel(args.right)
        else:
            self.left, self.right = paint_pair(targets, self._seed)

    def next_round(self, targets: TargetSet) -> None:
        if self._args.left is not None:
            return
        self._seed += 1
        self.left, self.right = paint_pair(targets, self._seed)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        targets = load_targets(args.targets) if args.targets else TargetSet.demo()
    except (OSError, TargetSetError) as exc:
        log.error("cannot load targets: %s", exc)
        sys.exit(2)
    game = SpotTheDifference(targets, GameConfig(canonical_size=IMAGE_SIZE, tps=args.tps))

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Spot the Difference")
    clock = pygame.time.Clock()
    title_font = pygame.font.SysFont("sans", 30, bold=True)
    font = pygame.font.SysFont("sans", 18)

    panels = Panels(args, targets)
    left_rect = pygame.Rect(LEFT_PANEL)
    right_rect = pygame.Rect(RIGHT_PANEL)
    surface_rect = SurfaceRect(*LEFT_PANEL)
    restart_btn, new_game_btn = make_header_buttons()
    modal = WinModal()

    tick_interval = 1.0 / args.tps
    accumulator = 0.0

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    if game.win_visible:
                        game.enqueue(DismissWin())
                    else:
                        running = False
                elif event.key == pygame.K_r:
                    game.enqueue(Restart())
                elif event.key == pygame.K_n:
                    game.enqueue(NewRound())
                    panels.next_round(game.targets)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if game.win_visible:
                    if modal.play_again.hit(event.pos):
                        game.enqueue(NewRound())
                        panels.next_round(game.targets)
                    elif modal.dismiss.hit(event.pos):
                        game.enqueue(DismissWin())
                elif restart_btn.hit(event.pos):
                    game.enqueue(Restart())
                elif new_game_btn.hit(event.pos):
                    game.enqueue(NewRound())
                    panels.next_round(game.targets)
                elif left_rect.inflate(4, 4).collidepoint(event.pos):
                    game.enqueue(Click(x=event.pos[0], y=event.pos[1], surface=surface_rect))

        # --- Tick engine at fixed rate ---
        while accumulator >= tick_interval:
            for cmd, accepted in game.step():
                log.debug("%s %s", type(cmd).__name__, "accepted" if accepted else "rejected")
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(COLOR_BG)
        draw_header(
            screen, title_font, font,
            game.remaining(), game.progress(), (restart_btn, new_game_btn),
        )

        found = game.found_points()
        draw_panel(screen, panels.left, left_rect, COLOR_PRIMARY)
        draw_markers(screen, left_rect, found, COLOR_ACCENT)
        draw_panel(screen, panels.right, right_rect, COLOR_SECONDARY)
        draw_markers(screen, right_rect, found, COLOR_ACCENT)

        draw_feedback(screen, font, game.feedback)
        draw_footer(screen, font)

        if game.win_visible:
            modal.draw(screen, title_font, font, len(game.targets))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
