"""Layout, theme, and rendering constants."""
from __future__ import annotations

# Panels
IMAGE_SIZE = 480
PANEL_GAP = 20
MARGIN = 24
HEADER_H = 110
FEEDBACK_H = 56
FOOTER_H = 36

SCREEN_W = MARGIN * 2 + IMAGE_SIZE * 2 + PANEL_GAP
SCREEN_H = HEADER_H + IMAGE_SIZE + FEEDBACK_H + FOOTER_H + MARGIN

LEFT_PANEL = (MARGIN, HEADER_H, IMAGE_SIZE, IMAGE_SIZE)
RIGHT_PANEL = (MARGIN + IMAGE_SIZE + PANEL_GAP, HEADER_H, IMAGE_SIZE, IMAGE_SIZE)

FPS = 60
TPS = 20

# Theme, applied once at startup
COLOR_PRIMARY = (0x1E, 0x40, 0xAF)
COLOR_SECONDARY = (0x6B, 0x72, 0x80)
COLOR_ACCENT = (0xFB, 0xBF, 0x24)

COLOR_BG = (245, 246, 250)
COLOR_TEXT = (32, 32, 32)
COLOR_TEXT_LIGHT = (255, 255, 255)
COLOR_TEXT_DIM = (136, 136, 136)
COLOR_PROGRESS_BG = (255, 255, 255, 68)
COLOR_FEEDBACK_BG = (0xFB, 0xBF, 0x24, 119)
COLOR_OVERLAY = (0, 0, 0, 77)
COLOR_MODAL_BG = (255, 255, 255)
COLOR_BUTTON_MUTED = (170, 170, 170)

MARKER_SIZE = 32
MARKER_BORDER = 3

PROGRESS_W = 180
PROGRESS_H = 8
