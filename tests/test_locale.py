"""Unit tests for timestables.locale."""

import json

import pytest

from timestables import settings
from timestables.locale import Translator


@pytest.fixture
def locale_dir(tmp_path):
    (tmp_path / "en.json").write_text(
        json.dumps({"play": {"quit": "Quit", "title": "Question {number}/{total}"}}),
        encoding="utf-8",
    )
    (tmp_path / "nl.json").write_text(json.dumps({"play": {"quit": "Stoppen"}}), encoding="utf-8")
    return tmp_path


class TestTranslator:
    def test_gettext_formats_placeholders(self, locale_dir):
        translator = Translator(locale_dir, "en")

        assert translator.gettext("play.title", number=2, total=5) == "Question 2/5"

    def test_selected_language_overrides_default(self, locale_dir):
        translator = Translator(locale_dir, "nl")

        assert translator("play.quit") == "Stoppen"

    def test_missing_key_in_selected_language_uses_default_language(self, locale_dir):
        translator = Translator(locale_dir, "nl")

        assert translator.gettext("play.title", number=1, total=10) == "Question 1/10"

    def test_missing_key_uses_call_site_default(self, locale_dir):
        translator = Translator(locale_dir, "en")

        assert translator.gettext("score.result", "Your score is {score}!", score=3) == "Your score is 3!"

    def test_missing_key_without_default_returns_key(self, locale_dir):
        translator = Translator(locale_dir, "en")

        assert translator.gettext("nope.nothing") == "nope.nothing"

    def test_unknown_language_falls_back(self, locale_dir, caplog):
        translator = Translator(locale_dir, "fr")

        assert translator("play.quit") == "Quit"
        assert "fr" in caplog.text

    def test_corrupt_file_is_ignored(self, locale_dir):
        (locale_dir / "nl.json").write_text("{not json", encoding="utf-8")

        translator = Translator(locale_dir, "nl")

        assert translator("play.quit") == "Quit"

    def test_file_that_is_not_utf8_is_ignored(self, locale_dir, caplog):
        (locale_dir / "nl.json").write_bytes(b'{"play": {"quit": "\xff\xfe"}}')

        translator = Translator(locale_dir, "nl")

        assert translator("play.quit") == "Quit"
        assert "nl.json" in caplog.text

    def test_bad_placeholder_returns_template(self, locale_dir):
        translator = Translator(locale_dir, "en")

        assert translator.gettext("play.title", number=1) == "Question {number}/{total}"


class TestShippedLocales:
    """The packaged locale files define the same keys."""

    @staticmethod
    def _keys(node, prefix=""):
        keys = set()
        for key, value in node.items():
            path = f"{prefix}{key}"
            if isinstance(value, dict):
                keys |= TestShippedLocales._keys(value, path + ".")
            else:
                keys.add(path)
        return keys

    def test_dutch_matches_english(self):
        english = json.loads((settings.LOCALE_DIR / "en.json").read_text(encoding="utf-8"))
        dutch = json.loads((settings.LOCALE_DIR / "nl.json").read_text(encoding="utf-8"))

        assert self._keys(english) == self._keys(dutch)

    def test_english_score_line(self):
        translator = Translator(settings.LOCALE_DIR, "en")

        assert translator.gettext("score.result", score=4, total=5) == "Your score is 4/5!"
