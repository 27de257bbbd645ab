"""Question screen: shows one multiplication at a time and takes the answer."""

from __future__ import annotations

from typing import Iterable, List

import pygame

from .. import settings
from ..models import GamePhase
from ..ui import Button, NEUTRAL_PALETTE
from .base import Scene

FADE_SECONDS = 0.3
FEEDBACK_SECONDS = 1.2
KEYPAD_LAYOUT = ("7", "8", "9", "4", "5", "6", "1", "2", "3", "C", "0", "<")


class PlayScene(Scene):
    """Runs through the generated questions one by one."""

    def __init__(self, app: "App") -> None:
        super().__init__(app)
        self.title_font = settings.load_font(30, bold=True)
        self.question_font = settings.load_font(60, bold=True)
        self.answer_font = settings.load_font(48)
        self.button_font = settings.load_font(30, bold=True)
        self.helper_font = settings.load_font(22)

        self.feedback_message = ""
        self.feedback_color = settings.COLOR_TEXT_PRIMARY
        self.feedback_timer = 0.0
        self._shown_index = -1
        self._question_age = 0.0

        screen = self.app.screen.get_rect()
        margin = settings.SCREEN_MARGIN
        self.content_x = int(screen.width * 0.38)

        quit_rect = pygame.Rect(0, 0, 140, 56)
        quit_rect.topright = (screen.right - margin // 2, margin // 2)
        self.quit_button = Button(
            quit_rect,
            self.tr("play.quit", default="Quit"),
            self.helper_font,
            NEUTRAL_PALETTE,
            text_color=settings.COLOR_TEXT_PRIMARY,
            callback=self._quit_game,
        )

        self.answer_rect = pygame.Rect(0, 0, 280, 80)
        self.answer_rect.center = (self.content_x, screen.centery + 10)
        validate_rect = pygame.Rect(0, 0, 260, 76)
        validate_rect.midtop = (self.content_x, self.answer_rect.bottom + 40)
        self.validate_button = Button(
            validate_rect,
            self.tr("play.validate", default="VALIDATE"),
            self.button_font,
            callback=self._submit_answer,
        )

        self.keypad: List[Button] = []
        key_size = 72
        spacing = 10
        pad_left = screen.right - margin - 3 * key_size - 2 * spacing
        pad_top = screen.centery - 2 * key_size - spacing
        for index, label in enumerate(KEYPAD_LAYOUT):
            rect = pygame.Rect(
                pad_left + (index % 3) * (key_size + spacing),
                pad_top + (index // 3) * (key_size + spacing),
                key_size,
                key_size,
            )
            self.keypad.append(
                Button(
                    rect,
                    label,
                    self.button_font,
                    NEUTRAL_PALETTE,
                    text_color=settings.COLOR_TEXT_PRIMARY,
                    callback=lambda key=label: self._press_key(key),
                )
            )

    # Event handling -------------------------------------------------
    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._quit_game()
                    return
                if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    self._submit_answer()
                    return
                if event.key in (pygame.K_BACKSPACE, pygame.K_DELETE):
                    self.session.erase_digit()
                elif len(event.unicode) == 1 and event.unicode.isdecimal():
                    self.session.enter_digit(int(event.unicode))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.quit_button.handle_event(event) or self.validate_button.handle_event(event):
                    return
                for button in self.keypad:
                    if button.handle_event(event):
                        break

    # Update ---------------------------------------------------------
    def update(self, delta_time: float) -> None:
        if self.session.current_index != self._shown_index:
            self._shown_index = self.session.current_index
            self._question_age = 0.0
        else:
            self._question_age += delta_time

        if self.feedback_timer > 0:
            self.feedback_timer = max(self.feedback_timer - delta_time, 0)
            if self.feedback_timer == 0:
                self.feedback_message = ""

    # Rendering ------------------------------------------------------
    def render(self, surface: pygame.Surface) -> None:
        Scene.draw_vertical_gradient(surface, settings.GRADIENT_TOP, settings.GRADIENT_BOTTOM)
        self._draw_header(surface)
        self._draw_question(surface)
        self._draw_answer(surface)
        self._draw_feedback(surface)
        self.validate_button.label = self.tr("play.validate", default="VALIDATE")
        self.validate_button.render(surface)
        for button in self.keypad:
            button.render(surface)

    def _draw_header(self, surface: pygame.Surface) -> None:
        title = self.title_font.render(
            self.tr(
                "play.title",
                default="Question {number}/{total}",
                number=self.session.question_number,
                total=self.session.question_count,
            ),
            True,
            settings.COLOR_TEXT_PRIMARY,
        )
        surface.blit(title, title.get_rect(midtop=(surface.get_width() // 2, settings.SCREEN_MARGIN // 2 + 12)))
        self.quit_button.label = self.tr("play.quit", default="Quit")
        self.quit_button.render(surface)

    def _draw_question(self, surface: pygame.Surface) -> None:
        question = self.session.current_question
        if question is None:
            return
        text = self.tr("play.prompt", default="What is {left} x {right}?", left=question.left, right=question.right)
        question_surface = self.question_font.render(text, True, settings.COLOR_TEXT_PRIMARY)
        progress = min(self._question_age / FADE_SECONDS, 1.0)
        question_surface.set_alpha(int(255 * progress))
        offset = int((1 - progress) * 30)
        center = (self.content_x, self.answer_rect.top - 90 + offset)
        surface.blit(question_surface, question_surface.get_rect(center=center))

    def _draw_answer(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, settings.COLOR_CARD_BASE, self.answer_rect, border_radius=22)
        pygame.draw.rect(surface, settings.COLOR_CARD_BORDER, self.answer_rect, width=3, border_radius=22)
        answer = self.answer_font.render(str(self.session.pending_answer), True, settings.COLOR_TEXT_PRIMARY)
        surface.blit(answer, answer.get_rect(center=self.answer_rect.center))
        hint = self.helper_font.render(
            self.tr("play.hint", default="Type the answer and press ENTER"), True, settings.COLOR_TEXT_DIM
        )
        surface.blit(hint, hint.get_rect(center=(self.content_x, surface.get_height() - settings.SCREEN_MARGIN)))

    def _draw_feedback(self, surface: pygame.Surface) -> None:
        if not self.feedback_message:
            return
        alpha = 255 if self.feedback_timer > 0.5 else int(255 * self.feedback_timer / 0.5)
        text_surface = self.title_font.render(self.feedback_message, True, self.feedback_color)
        text_surface.set_alpha(alpha)
        center = (self.content_x, self.validate_button.rect.bottom + 50)
        surface.blit(text_surface, text_surface.get_rect(center=center))

    # Actions --------------------------------------------------------
    def _press_key(self, key: str) -> None:
        if key == "C":
            self.session.clear_answer()
        elif key == "<":
            self.session.erase_digit()
        else:
            self.session.enter_digit(int(key))

    def _submit_answer(self) -> None:
        record = self.session.submit_answer()
        if record is None:
            return
        if self.session.phase is not GamePhase.PLAYING:
            # The score screen reviews the last answer.
            self.after_transition()
            return
        question = record.question
        if record.correct:
            self.feedback_message = self.tr("play.feedback.correct", default="Correct!")
            self.feedback_color = settings.COLOR_CORRECT
        else:
            self.feedback_message = self.tr(
                "play.feedback.wrong",
                default="{left} x {right} = {answer}",
                left=question.left,
                right=question.right,
                answer=question.answer,
            )
            self.feedback_color = settings.COLOR_WRONG
        self.feedback_timer = FEEDBACK_SECONDS
        self.after_transition()

    def _quit_game(self) -> None:
        self.session.quit()
        self.after_transition()
