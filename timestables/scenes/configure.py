"""Configuration screen: table limit and number of questions."""

from __future__ import annotations

from typing import Iterable

import pygame

from .. import settings
from ..models import QUESTION_AMOUNTS
from ..ui import Button, SegmentedPicker, Stepper
from .base import Scene


class ConfigureScene(Scene):
    """Lets the player pick the highest table and how many questions to answer."""

    FORM_WIDTH = 560

    def __init__(self, app: "App") -> None:
        super().__init__(app)
        self.title_font = settings.load_font(48, bold=True)
        self.section_font = settings.load_font(22)
        self.option_font = settings.load_font(30)
        self.helper_font = settings.load_font(20)

        screen = self.app.screen.get_rect()
        left = screen.centerx - self.FORM_WIDTH // 2
        top = settings.SCREEN_MARGIN + 110
        self.tables_card = pygame.Rect(left, top, self.FORM_WIDTH, 120)
        self.amount_card = pygame.Rect(left, self.tables_card.bottom + 30, self.FORM_WIDTH, 130)

        self.stepper = Stepper(
            pygame.Rect(left + 24, self.tables_card.top + 46, self.FORM_WIDTH - 48, 60),
            self.option_font,
            on_step=self._step_table,
        )
        self.picker = SegmentedPicker(
            pygame.Rect(left + 24, self.amount_card.top + 50, self.FORM_WIDTH - 48, 60),
            QUESTION_AMOUNTS,
            self.option_font,
            on_select=self._select_amount,
        )
        start_rect = pygame.Rect(0, 0, 220, 76)
        start_rect.midtop = (screen.centerx, self.amount_card.bottom + 50)
        self.start_button = Button(
            start_rect,
            self.tr("configure.start", default="Start"),
            self.title_font,
            callback=self._start_game,
        )

    # Event handling -------------------------------------------------
    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.app.running = False
                    return
                if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    self._start_game()
                    return
                if event.key == pygame.K_UP:
                    self._step_table(1)
                elif event.key == pygame.K_DOWN:
                    self._step_table(-1)
                elif event.key == pygame.K_RIGHT:
                    self.session.config.cycle_amount(1)
                elif event.key == pygame.K_LEFT:
                    self.session.config.cycle_amount(-1)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.start_button.handle_event(event):
                    return
                if self.stepper.handle_event(event):
                    continue
                self.picker.handle_event(event)

    # Rendering ------------------------------------------------------
    def render(self, surface: pygame.Surface) -> None:
        surface.fill(settings.COLOR_FORM_BACKGROUND)
        config = self.session.config

        title = self.title_font.render(
            self.tr("configure.title", default="Multiplication Tables"), True, settings.COLOR_TEXT_PRIMARY
        )
        surface.blit(title, title.get_rect(midtop=(surface.get_width() // 2, settings.SCREEN_MARGIN)))

        self._draw_card(surface, self.tables_card, self.tr("configure.tables_header", default="Multiplication tables"))
        self.stepper.render(
            surface,
            self.tr("configure.up_to", default="Up to {value}", value=config.max_table_unit),
            settings.COLOR_TEXT_PRIMARY,
        )

        self._draw_card(surface, self.amount_card, self.tr("configure.amount_header", default="How many questions?"))
        self.picker.render(surface, config.questions_amount, settings.COLOR_TEXT_PRIMARY)

        self.start_button.label = self.tr("configure.start", default="Start")
        self.start_button.render(surface)

        hint = self.helper_font.render(
            self.tr("configure.hint", default="Arrows change the settings, ENTER starts"), True, settings.COLOR_TEXT_DIM
        )
        surface.blit(hint, hint.get_rect(midtop=(surface.get_width() // 2, self.start_button.rect.bottom + 24)))

    def _draw_card(self, surface: pygame.Surface, rect: pygame.Rect, header: str) -> None:
        pygame.draw.rect(surface, settings.COLOR_TEXT_LIGHT, rect, border_radius=14)
        text = self.section_font.render(header.upper(), True, settings.COLOR_TEXT_DIM)
        surface.blit(text, (rect.left + 24, rect.top + 14))

    # Actions --------------------------------------------------------
    def _step_table(self, delta: int) -> None:
        self.session.config.step_table(delta)

    def _select_amount(self, amount: int) -> None:
        self.session.config.select_amount(amount)

    def _start_game(self) -> None:
        self.session.start()
        self.after_transition()
