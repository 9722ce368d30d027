"""Configuration management for confirm-cli."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import tomlkit
from tomlkit.exceptions import TOMLKitError

from confirm_cli.logging import DEFAULT_LOG_LEVEL, LOG_LEVELS
from confirm_cli.schemas import MAX_ASK_COUNT, Answer

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "confirm-cli" / "config.toml"
DEFAULT_ASK_COUNT = 3


@dataclass
class Config:
    ask_count: int = DEFAULT_ASK_COUNT
    default: Answer = Answer.RETRY
    full_words: bool = False
    no_enter: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def config_path() -> Path:
    override = os.environ.get("CONFIRM_CONFIG")
    return Path(override).expanduser() if override else DEFAULT_CONFIG_PATH


def load_config(
    ask_count_flag: Optional[int] = None,
    default_flag: Optional[Answer] = None,
    full_words_flag: bool = False,
    no_enter_flag: bool = False,
    log_level_flag: Optional[str] = None,
) -> Config:
    """Load config with priority: file < CLI flags.

    CONFIRM_* environment variables reach this function as flag values,
    resolved by the command options.
    """
    cfg = Config()

    path = config_path()
    if path.exists():
        try:
            doc = tomlkit.parse(path.read_text())
            core = doc.get("core", {})
            defaults = doc.get("defaults", {})
            if defaults.get("ask_count") is not None:
                cfg.ask_count = int(defaults["ask_count"])
            if defaults.get("default"):
                cfg.default = _coerce_answer(str(defaults["default"]))
            if isinstance(defaults.get("full_words"), bool):
                cfg.full_words = defaults["full_words"]
            if isinstance(defaults.get("no_enter"), bool):
                cfg.no_enter = defaults["no_enter"]
            if core.get("log_level"):
                cfg.log_level = str(core["log_level"])
        except (OSError, TypeError, ValueError, TOMLKitError):
            pass

    if ask_count_flag is not None:
        cfg.ask_count = ask_count_flag
    if default_flag is not None:
        cfg.default = default_flag
    if full_words_flag:
        cfg.full_words = True
    if no_enter_flag:
        cfg.no_enter = True
    if log_level_flag is not None:
        cfg.log_level = log_level_flag

    if not 0 <= cfg.ask_count <= MAX_ASK_COUNT:
        cfg.ask_count = DEFAULT_ASK_COUNT
    cfg.log_level = cfg.log_level.upper()
    if cfg.log_level not in LOG_LEVELS:
        cfg.log_level = DEFAULT_LOG_LEVEL

    return cfg


def _coerce_answer(value: str) -> Answer:
    try:
        return Answer(value.strip().lower())
    except ValueError:
        return Answer.RETRY
