"""Playback configuration for gif-braille."""

from __future__ import annotations

from dataclasses import dataclass, replace
import json
import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

# 96 ms is about 10 fps, not the "~60 fps / ~16 ms" it was once documented as.
DEFAULT_FRAME_INTERVAL_MS = 96
MIN_FRAME_INTERVAL_MS = 1
MAX_FRAME_INTERVAL_MS = 10_000
DEFAULT_QUIT_KEY = "q"
DEFAULT_TITLE = "GIF - Braille (Hi-Qual)"


@dataclass(frozen=True)
class PlayerConfig:
    """Immutable playback configuration."""

    frame_interval_ms: int = DEFAULT_FRAME_INTERVAL_MS
    quit_key: str = DEFAULT_QUIT_KEY
    title: str = DEFAULT_TITLE

    @property
    def frame_interval(self) -> float:
        return self.frame_interval_ms / 1000.0

    def with_overrides(
        self, *, frame_interval_ms: Optional[int] = None
    ) -> PlayerConfig:
        if frame_interval_ms is None:
            return self
        return replace(self, frame_interval_ms=_clamp_interval(frame_interval_ms))


def load_config(path: Optional[Path] = None) -> PlayerConfig:
    """Load configuration from a JSON file, falling back to defaults on error."""
    if path is None:
        return PlayerConfig()
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        logger.exception("Failed to load config from %s", path)
        return PlayerConfig()
    if not isinstance(raw, dict):
        logger.warning("Ignoring config %s: top level is not an object", path)
        return PlayerConfig()
    return _config_from_mapping(raw)


def _clamp_interval(value: int) -> int:
    return max(MIN_FRAME_INTERVAL_MS, min(MAX_FRAME_INTERVAL_MS, value))


def _get_int(raw: dict[str, Any], key: str, default: int) -> int:
    value = raw.get(key, default)
    # JSON true/false arrive as bool, which is an int subclass.
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


def _get_str(raw: dict[str, Any], key: str, default: str) -> str:
    value = raw.get(key, default)
    return value if isinstance(value, str) else default


def _config_from_mapping(raw: dict[str, Any]) -> PlayerConfig:
    """Normalize raw JSON data into a PlayerConfig.

    Wrong types fall back to the default. The interval is clamped to
    MIN_FRAME_INTERVAL_MS..MAX_FRAME_INTERVAL_MS, and the quit key must be a
    single character. An empty title is kept and draws a bare border.
    """
    interval = _get_int(raw, "frame_interval_ms", DEFAULT_FRAME_INTERVAL_MS)
    quit_key = _get_str(raw, "quit_key", DEFAULT_QUIT_KEY)
    if len(quit_key) != 1:
        quit_key = DEFAULT_QUIT_KEY
    return PlayerConfig(
        frame_interval_ms=_clamp_interval(interval),
        quit_key=quit_key,
        title=_get_str(raw, "title", DEFAULT_TITLE),
    )
