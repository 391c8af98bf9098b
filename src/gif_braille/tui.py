"""Textual-based player for braille frames."""

from __future__ import annotations

import logging
import sys
from typing import Optional

try:
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except Exception as exc:  # pragma: no cover - depends on environment
    raise RuntimeError(
        "Textual is required for the TUI. Install the 'textual' dependency."
    ) from exc

from gif_braille.config import PlayerConfig
from gif_braille.errors import SurfaceError
from gif_braille.frame_store import FrameStore
from gif_braille.logging_setup import set_console_level
from gif_braille.playback import (
    DrawSurface,
    KeySource,
    PlaybackScheduler,
    QueueKeySource,
    run_playback,
)
from gif_braille.ui.frame_view import FrameSurface

logger = logging.getLogger(__name__)


class GifBrailleApp(App[int]):
    """Plays a frame store until the quit key is pressed."""

    CSS = """
    Screen {
        background: black;
    }

    #frame {
        width: 100%;
        height: 100%;
        border: solid $accent;
        border-title-align: left;
        padding: 0;
    }
    """

    def __init__(self, store: FrameStore, config: PlayerConfig) -> None:
        super().__init__()
        self.store = store
        self.player_config = config
        self.playback_error: Optional[SurfaceError] = None
        self.final_index: Optional[int] = None
        self._keys: Optional[QueueKeySource] = None

    def compose(self) -> ComposeResult:
        yield Static(id="frame")

    def on_mount(self) -> None:
        frame_view = self.query_one("#frame", Static)
        frame_view.border_title = self.player_config.title
        self._keys = QueueKeySource()
        self.run_worker(
            self._play(FrameSurface(frame_view), self._keys),
            name="playback",
            exclusive=True,
        )
        logger.info("TUI mounted")

    def on_key(self, event: events.Key) -> None:
        if self._keys is not None and event.character:
            self._keys.push(event.character)

    async def _play(self, surface: DrawSurface, keys: KeySource) -> None:
        scheduler = PlaybackScheduler(
            len(self.store),
            self.player_config.frame_interval,
            quit_key=self.player_config.quit_key,
        )
        try:
            state = await run_playback(self.store, surface, keys, scheduler)
        except SurfaceError as exc:
            logger.exception("Playback aborted")
            self.playback_error = exc
            self.exit(1)
            return
        self.final_index = state.index
        self.exit(0)


# Public entrypoints
def run_tui(store: FrameStore, config: PlayerConfig) -> int:
    """Run the TUI and return an exit code."""
    logger.info(
        "TUI start frames=%s interval_ms=%s", len(store), config.frame_interval_ms
    )
    try:
        set_console_level(logging.WARNING)
    except Exception:
        logger.exception("Failed to set console log level for TUI")
    app = GifBrailleApp(store, config)
    result = app.run()
    # Textual has restored the terminal by the time run() returns.
    if app.playback_error is not None:
        print(f"Error: {app.playback_error}", file=sys.stderr)
        return 1
    logger.info("TUI exit")
    return result if result is not None else 0
