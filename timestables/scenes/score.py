"""Final score screen."""

from __future__ import annotations

from typing import Iterable

import pygame

from .. import settings
from ..ui import Button, NEUTRAL_PALETTE
from .base import Scene

REVIEW_ROWS = 10


class ScoreScene(Scene):
    """Shows the score and a review of every answer, then restart or quit."""

    def __init__(self, app: "App") -> None:
        super().__init__(app)
        self.title_font = settings.load_font(30, bold=True)
        self.score_font = settings.load_font(56, bold=True)
        self.review_font = settings.load_font(22)
        self.button_font = settings.load_font(28, bold=True)

        screen = self.app.screen.get_rect()
        bottom = screen.bottom - settings.SCREEN_MARGIN
        restart_rect = pygame.Rect(0, 0, 220, 72)
        restart_rect.bottomright = (screen.centerx - 12, bottom)
        quit_rect = pygame.Rect(0, 0, 220, 72)
        quit_rect.bottomleft = (screen.centerx + 12, bottom)
        self.restart_button = Button(
            restart_rect,
            self.tr("score.restart", default="Restart"),
            self.button_font,
            callback=self._restart_game,
        )
        self.quit_button = Button(
            quit_rect,
            self.tr("score.quit", default="Quit"),
            self.button_font,
            NEUTRAL_PALETTE,
            text_color=settings.COLOR_WRONG,
            callback=self._quit_game,
        )

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
                    self._restart_game()
                    return
                if event.key == pygame.K_ESCAPE:
                    self._quit_game()
                    return
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.restart_button.handle_event(event) or self.quit_button.handle_event(event):
                    return

    def render(self, surface: pygame.Surface) -> None:
        surface.fill(settings.COLOR_FORM_BACKGROUND)
        width = surface.get_width()
        margin = settings.SCREEN_MARGIN

        title = self.title_font.render(self.tr("score.title", default="Final Score"), True, settings.COLOR_TEXT_DIM)
        surface.blit(title, title.get_rect(midtop=(width // 2, margin // 2 + 12)))

        result = self.score_font.render(
            self.tr(
                "score.result",
                default="Your score is {score}/{total}!",
                score=self.session.score,
                total=self.session.question_count,
            ),
            True,
            settings.COLOR_TEXT_PRIMARY,
        )
        surface.blit(result, result.get_rect(midtop=(width // 2, margin + 50)))

        self._draw_review(surface, top=margin + 150)

        self.restart_button.label = self.tr("score.restart", default="Restart")
        self.quit_button.label = self.tr("score.quit", default="Quit")
        self.restart_button.render(surface)
        self.quit_button.render(surface)

    def _draw_review(self, surface: pygame.Surface, top: int) -> None:
        history = self.session.history
        columns = max(1, (len(history) + REVIEW_ROWS - 1) // REVIEW_ROWS)
        column_width = 200
        left = surface.get_width() // 2 - columns * column_width // 2
        line_height = self.review_font.get_linesize() + 4
        for index, record in enumerate(history):
            column, row = divmod(index, REVIEW_ROWS)
            question = record.question
            mark = "+" if record.correct else "-"
            text = f"{mark} {question.as_text()} = {record.given}"
            color = settings.COLOR_CORRECT if record.correct else settings.COLOR_WRONG
            line = self.review_font.render(text, True, color)
            surface.blit(line, (left + column * column_width, top + row * line_height))

    def _restart_game(self) -> None:
        self.session.restart()
        self.after_transition()

    def _quit_game(self) -> None:
        self.session.quit()
        self.after_transition()
