"""CLI configuration helpers."""
from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_DEFAULT_TEXT_MODE = "typewriter"
_DEFAULT_TYPING_DELAY_MS = 50
_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(slots=True)
class CliConfig:
    """Presentation settings for a terminal session."""

    text_display_mode: str = _DEFAULT_TEXT_MODE
    typing_delay_ms: int = _DEFAULT_TYPING_DELAY_MS
    sound_cues: bool = False


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Libris"
        return Path.home() / "Libris"
    return Path.home() / ".config" / "libris"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_text_mode(value: object) -> str:
    return "instant" if value == "instant" else _DEFAULT_TEXT_MODE


def _normalize_delay(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return _DEFAULT_TYPING_DELAY_MS
    return value


def load_config(path: Path | str | None = None) -> CliConfig:
    """Load config from disk or return defaults."""
    config_path = Path(path) if path is not None else get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return CliConfig()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return CliConfig()
    if not isinstance(raw, dict):
        logger.warning("Ignoring config %s: expected a JSON object.", config_path)
        return CliConfig()
    return CliConfig(
        text_display_mode=_normalize_text_mode(raw.get("text_display_mode")),
        typing_delay_ms=_normalize_delay(raw.get("typing_delay_ms")),
        sound_cues=raw.get("sound_cues") is True,
    )


def configure_logging(level: str | None = None) -> None:
    """Send log records to stderr at the level named by LIBRIS_LOG_LEVEL."""
    name = (level or os.getenv("LIBRIS_LOG_LEVEL") or _DEFAULT_LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=_LOG_FORMAT, stream=sys.stderr)
