"""Command-line interface for gif-braille."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import shutil
import sys
from typing import Iterable, Optional

from gif_braille.config import PlayerConfig, load_config
from gif_braille.decoder import decode_gif
from gif_braille.errors import DecodeError, EmptyResultError, UsageError
from gif_braille.frame_store import FrameStore, build_frame_store
from gif_braille.logging_setup import init_logging

logger = logging.getLogger(__name__)

USAGE = "Usage: gif-braille <path_to_gif>"
FALLBACK_TERMINAL_SIZE = (80, 24)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="gif-braille",
        description="Play an animated GIF as colored braille in the terminal",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="",
        help="Path to a GIF file",
    )
    parser.add_argument(
        "--interval-ms",
        type=int,
        default=None,
        help="Fixed delay between frames in milliseconds (default: 96)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional JSON file with playback settings",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def terminal_size() -> tuple[int, int]:
    """Sample the terminal size once as (columns, rows)."""
    size = shutil.get_terminal_size(fallback=FALLBACK_TERMINAL_SIZE)
    return (size.columns, size.lines)


def prepare_frames(path: str) -> FrameStore:
    """Decode and rasterize the GIF at `path` for the current terminal."""
    if not path:
        raise UsageError(USAGE)
    raw_frames = decode_gif(path)
    cols, rows = terminal_size()
    store = build_frame_store(raw_frames, cols, rows)
    logger.info(
        "Prepared %s of %s frame(s) from %s", len(store), store.source_count, path
    )
    return store


def _run_tui(store: FrameStore, config: PlayerConfig) -> int:
    try:
        from gif_braille.tui import run_tui
    except RuntimeError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return run_tui(store, config)


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if not args.path:
        # Nothing has been opened yet, not even the log file.
        print(USAGE, file=sys.stderr)
        return 1
    init_logging(args.log_level)
    logger.info("App start")

    config = load_config(args.config).with_overrides(frame_interval_ms=args.interval_ms)
    try:
        store = prepare_frames(args.path)
    except DecodeError as exc:
        logger.error("Decode failed: %s", exc)
        print(str(exc), file=sys.stderr)
        return 1
    except EmptyResultError as exc:
        logger.error("Empty frame store for %s", args.path)
        print(str(exc), file=sys.stderr)
        return 1

    exit_code = _run_tui(store, config)
    logger.info("App exit code=%s", exit_code)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
