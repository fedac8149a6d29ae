"""
Runtime configuration.

Everything has a sensible default, and can be overridden by environment variables (and after that by CLI options).
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

SAVE_FILE_NAME = ".chess_game.json"
DEFAULT_SAVE_FILE = Path.home() / SAVE_FILE_NAME
DEFAULT_LOG_LEVEL = "WARNING"

SAVE_FILE_ENV = "CHESS_TRACKER_SAVE_FILE"
LOG_LEVEL_ENV = "CHESS_TRACKER_LOG_LEVEL"
NO_COLOR_ENV = "NO_COLOR"


@dataclass(frozen=True)
class Settings:
    save_file: Path
    log_level: str
    use_color: bool


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Collect settings from the environment (os.environ unless another mapping is given)."""
    env = os.environ if environ is None else environ

    save_file = (
        Path(env[SAVE_FILE_ENV]).expanduser()
        if env.get(SAVE_FILE_ENV)
        else DEFAULT_SAVE_FILE
    )
    # NOTE: https://no-color.org -> any non-empty value disables colors
    use_color = not env.get(NO_COLOR_ENV)
    log_level = env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    if log_level not in logging.getLevelNamesMapping():
        log_level = DEFAULT_LOG_LEVEL

    return Settings(save_file=save_file, log_level=log_level, use_color=use_color)
