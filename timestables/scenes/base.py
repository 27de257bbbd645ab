"""Scene base class and utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import pygame

if TYPE_CHECKING:  # pragma: no cover - for type hints only
    from ..app import App
    from ..session import GameSession


class Scene:
    """Base class for all scenes."""

    def __init__(self, app: "App") -> None:
        self.app = app

    @property
    def session(self) -> "GameSession":
        return self.app.session

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        """React to incoming events. Child classes override as needed."""

    def update(self, delta_time: float) -> None:
        """Update internal state. Child classes override as needed."""

    def render(self, surface: pygame.Surface) -> None:
        raise NotImplementedError

    def after_transition(self) -> None:
        """Show the scene that belongs to the session's new phase."""

        self.app.sync_scene()

    # Utility helpers -------------------------------------------------
    @staticmethod
    def draw_vertical_gradient(surface: pygame.Surface, top_color: tuple[int, int, int], bottom_color: tuple[int, int, int]) -> None:
        height = surface.get_height()
        width = surface.get_width()
        for y in range(height):
            ratio = y / max(height - 1, 1)
            color = tuple(
                int(top_color[i] + (bottom_color[i] - top_color[i]) * ratio)
                for i in range(3)
            )
            pygame.draw.line(surface, color, (0, y), (width, y))

    def tr(self, key: str, default: str | None = None, **kwargs: object) -> str:
        translator = getattr(self.app, "translator", None)
        if translator is not None:
            return translator.gettext(key, default, **kwargs)
        template = default if default is not None else key
        try:
            return template.format(**kwargs)
        except (KeyError, ValueError):
            return template


__all__ = ["Scene"]
