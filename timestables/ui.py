"""Widgets drawn with pygame primitives: buttons, a stepper and a segmented picker."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence

import pygame

Palette = Dict[str, tuple[int, int, int]]

PRIMARY_PALETTE: Palette = {
    "top": (255, 96, 96),
    "bottom": (214, 40, 40),
    "border": (160, 28, 28),
    "shadow": (120, 20, 20),
}
NEUTRAL_PALETTE: Palette = {
    "top": (242, 236, 228),
    "bottom": (209, 197, 184),
    "border": (168, 156, 145),
    "shadow": (150, 140, 130),
}
SELECTED_PALETTE: Palette = {
    "top": (116, 227, 128),
    "bottom": (63, 186, 94),
    "border": (36, 140, 67),
    "shadow": (45, 122, 59),
}


def _blend(color_a: tuple[int, int, int], color_b: tuple[int, int, int], factor: float) -> tuple[int, int, int]:
    factor = max(0.0, min(1.0, factor))
    return tuple(int(color_a[i] + (color_b[i] - color_a[i]) * factor) for i in range(3))


def draw_glossy_button(
    surface: pygame.Surface,
    rect: pygame.Rect,
    palette: Palette,
    *,
    pressed: bool = False,
    hover: bool = False,
    corner_radius: int | None = None,
) -> pygame.Rect:
    """Draw a raised button with a shadow lip and return the face rect."""

    lift = 2 if pressed else 4 if hover else 6
    radius = corner_radius if corner_radius is not None else rect.height // 2
    radius = max(6, min(radius, rect.width // 2, rect.height // 2))

    shadow_rect = rect.move(0, 2)
    pygame.draw.rect(surface, palette["shadow"], shadow_rect, border_radius=radius)

    face_rect = pygame.Rect(rect.x, rect.y - lift + 2, rect.width, rect.height - 2)
    face = pygame.Surface(face_rect.size, pygame.SRCALPHA)
    for y in range(face.get_height()):
        ratio = y / max(face.get_height() - 1, 1)
        pygame.draw.line(face, _blend(palette["top"], palette["bottom"], ratio), (0, y), (face.get_width(), y))
    mask = pygame.Surface(face_rect.size, pygame.SRCALPHA)
    pygame.draw.rect(mask, (255, 255, 255, 255), mask.get_rect(), border_radius=radius)
    face.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
    surface.blit(face, face_rect.topleft)
    pygame.draw.rect(surface, palette["border"], face_rect, width=3, border_radius=radius)
    return face_rect


class Button:
    """Clickable label drawn with ``draw_glossy_button``."""

    def __init__(
        self,
        rect: pygame.Rect,
        label: str,
        font: pygame.font.Font,
        palette: Palette = PRIMARY_PALETTE,
        *,
        text_color: tuple[int, int, int] = (255, 255, 255),
        callback: Optional[Callable[[], None]] = None,
    ) -> None:
        self.rect = rect
        self.label = label
        self.font = font
        self.palette = palette
        self.text_color = text_color
        self._callback = callback

    def render(self, surface: pygame.Surface, *, pressed: bool = False) -> pygame.Rect:
        hover = self.rect.collidepoint(pygame.mouse.get_pos())
        face_rect = draw_glossy_button(surface, self.rect, self.palette, pressed=pressed, hover=hover)
        text_surface = self.font.render(self.label, True, self.text_color)
        surface.blit(text_surface, text_surface.get_rect(center=face_rect.center))
        return face_rect

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.trigger()
                return True
        return False

    def trigger(self) -> None:
        if self._callback:
            self._callback()


class Stepper:
    """A value label with minus and plus buttons."""

    BUTTON_SIZE = 56

    def __init__(self, rect: pygame.Rect, font: pygame.font.Font, on_step: Callable[[int], None]) -> None:
        self.rect = rect
        self.font = font
        self._on_step = on_step
        size = self.BUTTON_SIZE
        self.minus_rect = pygame.Rect(0, 0, size, size)
        self.plus_rect = pygame.Rect(0, 0, size, size)
        self._layout()

    def _layout(self) -> None:
        self.plus_rect.midright = self.rect.midright
        self.minus_rect.midright = (self.plus_rect.left - 12, self.rect.centery)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
            return False
        if self.minus_rect.collidepoint(event.pos):
            self._on_step(-1)
            return True
        if self.plus_rect.collidepoint(event.pos):
            self._on_step(1)
            return True
        return False

    def render(self, surface: pygame.Surface, label: str, color: tuple[int, int, int]) -> None:
        text = self.font.render(label, True, color)
        surface.blit(text, text.get_rect(midleft=(self.rect.left, self.rect.centery)))
        for rect, sign in ((self.minus_rect, "-"), (self.plus_rect, "+")):
            face = draw_glossy_button(surface, rect, NEUTRAL_PALETTE, hover=rect.collidepoint(pygame.mouse.get_pos()), corner_radius=14)
            glyph = self.font.render(sign, True, color)
            surface.blit(glyph, glyph.get_rect(center=face.center))


class SegmentedPicker:
    """Row of mutually exclusive options; one segment is always selected."""

    def __init__(
        self,
        rect: pygame.Rect,
        options: Sequence[int],
        font: pygame.font.Font,
        on_select: Callable[[int], None],
    ) -> None:
        self.rect = rect
        self.options = list(options)
        self.font = font
        self._on_select = on_select
        self.segment_rects: List[pygame.Rect] = []
        self._layout()

    def _layout(self) -> None:
        spacing = 10
        count = len(self.options)
        width = (self.rect.width - spacing * (count - 1)) // count
        self.segment_rects = [
            pygame.Rect(self.rect.left + index * (width + spacing), self.rect.top, width, self.rect.height)
            for index in range(count)
        ]

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
            return False
        for rect, value in zip(self.segment_rects, self.options):
            if rect.collidepoint(event.pos):
                self._on_select(value)
                return True
        return False

    def render(self, surface: pygame.Surface, selected: int, color: tuple[int, int, int]) -> None:
        mouse_pos = pygame.mouse.get_pos()
        for rect, value in zip(self.segment_rects, self.options):
            is_selected = value == selected
            palette = SELECTED_PALETTE if is_selected else NEUTRAL_PALETTE
            face = draw_glossy_button(
                surface,
                rect,
                palette,
                pressed=is_selected,
                hover=rect.collidepoint(mouse_pos),
                corner_radius=16,
            )
            label = self.font.render(str(value), True, color)
            surface.blit(label, label.get_rect(center=face.center))


__all__ = [
    "Button",
    "NEUTRAL_PALETTE",
    "PRIMARY_PALETTE",
    "SELECTED_PALETTE",
    "SegmentedPicker",
    "Stepper",
    "draw_glossy_button",
]
