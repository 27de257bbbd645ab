"""Global settings and helper functions for the multiplication quiz."""

from __future__ import annotations

from pathlib import Path

import pygame

SCREEN_WIDTH = 960
SCREEN_HEIGHT = 720
SCREEN_SIZE = (SCREEN_WIDTH, SCREEN_HEIGHT)
FPS = 60
SCREEN_MARGIN = 64

# Warm palette: the play screen fades from yellow into red.
COLOR_TEXT_PRIMARY = (35, 46, 67)
COLOR_TEXT_DIM = (102, 92, 92)
COLOR_TEXT_LIGHT = (255, 255, 255)
COLOR_CORRECT = (40, 158, 66)
COLOR_WRONG = (200, 40, 40)
COLOR_CARD_BASE = (255, 244, 232)
COLOR_CARD_BORDER = (254, 191, 76)
COLOR_FORM_BACKGROUND = (242, 242, 247)

GRADIENT_TOP = (255, 230, 128)
GRADIENT_BOTTOM = (255, 128, 128)

PACKAGE_DIR = Path(__file__).resolve().parent
ASSETS_DIR = PACKAGE_DIR / "assets"
LOCALE_DIR = ASSETS_DIR / "locale"
FONT_PREFERRED = "Avenir Next"
BODY_FALLBACK = "Verdana"


def load_font(size: int, bold: bool = False) -> pygame.font.Font:
    """Return a font object, falling back to the default if preferred not found."""

    pygame.font.init()
    font_path = pygame.font.match_font(FONT_PREFERRED, bold=bold, italic=False)
    if not font_path:
        font_path = pygame.font.match_font(BODY_FALLBACK, bold=bold, italic=False)
    font = pygame.font.Font(font_path, size) if font_path else pygame.font.Font(None, size)
    if bold and not font_path:
        font.set_bold(True)
    return font
