"""
Scene tests driven by synthetic pygame events on a headless display.
"""

import pygame

from timestables.models import GamePhase, Question
from timestables.scenes import ConfigureScene, PlayScene, ScoreScene


def key_event(key, unicode=""):
    return pygame.event.Event(pygame.KEYDOWN, key=key, unicode=unicode, mod=0)


def click_event(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def type_answer(app, value):
    app.scene.handle_events([key_event(pygame.K_0 + int(ch), ch) for ch in str(value)])


class TestConfigureScene:
    def test_app_starts_on_configuration(self, app):
        assert isinstance(app.scene, ConfigureScene)
        assert app.session.phase is GamePhase.CONFIGURING

    def test_arrow_keys_change_config(self, app):
        app.scene.handle_events(
            [
                key_event(pygame.K_UP),
                key_event(pygame.K_UP),
                key_event(pygame.K_DOWN),
                key_event(pygame.K_RIGHT),
            ]
        )

        assert app.session.config.max_table_unit == 3
        assert app.session.config.questions_amount == 10

    def test_stepper_buttons_clamp(self, app):
        scene = app.scene
        scene.handle_events([click_event(scene.stepper.minus_rect.center)])

        assert app.session.config.max_table_unit == 2

        for _ in range(15):
            scene.handle_events([click_event(scene.stepper.plus_rect.center)])

        assert app.session.config.max_table_unit == 12

    def test_picker_click_selects_amount(self, app):
        scene = app.scene

        scene.handle_events([click_event(scene.picker.segment_rects[2].center)])

        assert app.session.config.questions_amount == 20

    def test_start_button_switches_to_play(self, app):
        scene = app.scene

        scene.handle_events([click_event(scene.start_button.rect.center)])

        assert app.session.phase is GamePhase.PLAYING
        assert isinstance(app.scene, PlayScene)
        assert app.session.question_count == 5

    def test_escape_stops_app(self, app):
        app.scene.handle_events([key_event(pygame.K_ESCAPE)])

        assert app.running is False

    def test_render(self, app):
        app.scene.render(app.screen)


class TestPlayScene:
    def test_typing_and_enter_submits(self, app):
        # Arrange
        app.session.start(questions=[Question(2, 3), Question(4, 5)])
        app.sync_scene()

        # Act
        type_answer(app, 6)
        app.scene.handle_events([key_event(pygame.K_RETURN, "\r")])

        # Assert
        assert app.session.score == 1
        assert app.session.current_index == 1
        assert app.scene.feedback_message == "Correct!"

    def test_last_answer_shows_score_scene(self, app):
        app.session.start(questions=[Question(2, 3)])
        app.sync_scene()

        type_answer(app, 6)
        app.scene.handle_events([key_event(pygame.K_RETURN, "\r")])

        assert app.session.phase is GamePhase.SCORED
        assert isinstance(app.scene, ScoreScene)

    def test_last_answer_leaves_no_stale_feedback(self, app):
        app.session.start(questions=[Question(3, 4)])
        app.sync_scene()
        play_scene = app.scene

        type_answer(app, 11)
        play_scene.handle_events([key_event(pygame.K_RETURN, "\r")])

        assert isinstance(app.scene, ScoreScene)
        assert play_scene.feedback_message == ""
        assert app.session.history[-1].given == 11
        assert not app.session.history[-1].correct

    def test_backspace_erases(self, app):
        app.session.start(questions=[Question(7, 8)])
        app.sync_scene()

        type_answer(app, 57)
        app.scene.handle_events([key_event(pygame.K_BACKSPACE, "\b")])

        assert app.session.pending_answer == 5

    def test_keypad_buttons_edit_answer(self, app):
        app.session.start(questions=[Question(7, 8)])
        app.sync_scene()
        keys = {button.label: button for button in app.scene.keypad}

        for label in ("5", "6"):
            app.scene.handle_events([click_event(keys[label].rect.center)])
        assert app.session.pending_answer == 56

        app.scene.handle_events([click_event(keys["<"].rect.center)])
        assert app.session.pending_answer == 5

        app.scene.handle_events([click_event(keys["C"].rect.center)])
        assert app.session.pending_answer == 0

    def test_validate_button_with_wrong_answer(self, app):
        app.session.start(questions=[Question(3, 4), Question(2, 2)])
        app.sync_scene()

        type_answer(app, 11)
        app.scene.handle_events([click_event(app.scene.validate_button.rect.center)])

        assert app.session.score == 0
        assert app.scene.feedback_message == "3 x 4 = 12"

    def test_escape_quits_to_configuration(self, app):
        app.session.start()
        app.sync_scene()

        app.scene.handle_events([key_event(pygame.K_ESCAPE)])

        assert app.session.phase is GamePhase.CONFIGURING
        assert isinstance(app.scene, ConfigureScene)
        assert app.session.questions == []

    def test_update_and_render(self, app):
        app.session.start()
        app.sync_scene()

        app.scene.update(0.1)
        app.scene.render(app.screen)


class TestScoreScene:
    def _finish(self, app):
        app.session.start(questions=[Question(2, 2), Question(3, 3)])
        app.session.submit_answer(4)
        app.session.submit_answer(8)
        app.sync_scene()

    def test_shows_score(self, app):
        self._finish(app)

        assert isinstance(app.scene, ScoreScene)
        assert app.session.score == 1
        app.scene.render(app.screen)

    def test_restart_starts_new_game(self, app):
        self._finish(app)

        app.scene.handle_events([key_event(pygame.K_RETURN, "\r")])

        assert app.session.phase is GamePhase.PLAYING
        assert app.session.score == 0
        assert app.session.question_count == app.session.config.questions_amount
        assert isinstance(app.scene, PlayScene)

    def test_quit_button_returns_to_configuration(self, app):
        self._finish(app)

        app.scene.handle_events([click_event(app.scene.quit_button.rect.center)])

        assert app.session.phase is GamePhase.CONFIGURING
        assert isinstance(app.scene, ConfigureScene)
        assert app.session.score == 0
