"""Runtime options read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "TIMESTABLES_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class AppConfig:
    language: str = "en"
    fullscreen: bool = False
    seed: Optional[int] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppConfig":
        env = os.environ if environ is None else environ
        config = cls()

        language = env.get(ENV_PREFIX + "LANGUAGE", "").strip().lower()
        if language:
            config.language = language

        config.fullscreen = env.get(ENV_PREFIX + "FULLSCREEN", "").strip().lower() in TRUE_VALUES

        raw_seed = env.get(ENV_PREFIX + "SEED", "").strip()
        if raw_seed:
            try:
                config.seed = int(raw_seed)
            except ValueError:
                logger.warning("Ignoring non-integer %sSEED=%r", ENV_PREFIX, raw_seed)

        level = env.get(ENV_PREFIX + "LOG_LEVEL", "").strip().upper()
        if level:
            if level in LOG_LEVELS:
                config.log_level = level
            else:
                logger.warning("Unknown log level %r, keeping %s", level, config.log_level)

        return config


__all__ = ["AppConfig"]
