"""Locale loading and translation helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = _merge(current, value)
        else:
            result[key] = value
    return result


class Translator:
    """Looks up dotted keys such as ``play.validate`` in JSON locale files."""

    def __init__(self, base_path: Path, language: str, default_language: str = "en") -> None:
        self.base_path = base_path
        self.default_language = default_language
        self.language = default_language
        self._data: Dict[str, Any] = {}
        self.set_language(language)

    def set_language(self, language: str) -> None:
        data = self._load_file(self.default_language)
        if language != self.default_language:
            selected = self._load_file(language)
            if not selected:
                logger.warning("No strings for language %r, using %r", language, self.default_language)
            data = _merge(data, selected)
        self.language = language
        self._data = data

    def gettext(self, key: str, default: str | None = None, **kwargs: Any) -> str:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                node = None
                break
            node = node[part]
        template = node if isinstance(node, str) else (default if default is not None else key)
        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, ValueError):
            return template

    __call__ = gettext

    def _load_file(self, language: str) -> Dict[str, Any]:
        path = self.base_path / f"{language}.json"
        if not path.exists():
            return {}
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            logger.warning("Skipping unreadable locale file %s", path)
            return {}
        return payload if isinstance(payload, dict) else {}


__all__ = ["Translator"]
