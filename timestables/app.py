"""Main application loop for the multiplication quiz."""

from __future__ import annotations

import logging
import random
from typing import Dict, Type

import pygame

from . import settings
from .config import AppConfig
from .locale import Translator
from .models import GamePhase
from .scenes import ConfigureScene, PlayScene, ScoreScene
from .scenes.base import Scene
from .session import GameSession

logger = logging.getLogger(__name__)

PHASE_SCENES: Dict[GamePhase, Type[Scene]] = {
    GamePhase.CONFIGURING: ConfigureScene,
    GamePhase.PLAYING: PlayScene,
    GamePhase.SCORED: ScoreScene,
}


class App:
    """Owns the window, the main loop, the game session and the current scene."""

    def __init__(self, config: AppConfig | None = None, session: GameSession | None = None) -> None:
        self.config = config or AppConfig.from_env()
        pygame.init()
        if self.config.fullscreen:
            display_info = pygame.display.Info()
            screen_size = (display_info.current_w, display_info.current_h)
        else:
            screen_size = settings.SCREEN_SIZE
        self.screen = pygame.display.set_mode(screen_size)
        settings.SCREEN_WIDTH, settings.SCREEN_HEIGHT = screen_size
        settings.SCREEN_SIZE = screen_size
        self.clock = pygame.time.Clock()
        self.running = True

        self.translator = Translator(settings.LOCALE_DIR, self.config.language)
        pygame.display.set_caption(self.translator.gettext("configure.title", "Multiplication Tables"))

        if session is None:
            rng = random.Random(self.config.seed) if self.config.seed is not None else None
            session = GameSession(rng=rng)
        self.session = session

        self._scene: Scene = PHASE_SCENES[self.session.phase](self)
        logger.info("Scene: %s", type(self._scene).__name__)

    @property
    def scene(self) -> Scene:
        return self._scene

    def change_scene(self, new_scene_cls: Type[Scene], **kwargs: object) -> None:
        """Replace the active scene with a new one."""

        self._scene = new_scene_cls(self, **kwargs)
        logger.info("Scene: %s", new_scene_cls.__name__)

    def sync_scene(self) -> None:
        """Switch to the scene for the session's phase if it is not already shown."""

        scene_cls = PHASE_SCENES[self.session.phase]
        if type(self._scene) is not scene_cls:
            self.change_scene(scene_cls)

    def run(self) -> None:
        """Main loop of the application."""

        while self.running:
            dt = self.clock.tick(settings.FPS) / 1000.0
            events = pygame.event.get()

            for event in events:
                if event.type == pygame.QUIT:
                    self.running = False

            self._scene.handle_events(events)
            self._scene.update(dt)
            self._scene.render(self.screen)
            pygame.display.flip()

        pygame.quit()


__all__ = ["App", "PHASE_SCENES"]
