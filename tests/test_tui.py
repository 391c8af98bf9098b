"""Tests for the Textual player."""

from __future__ import annotations

import asyncio

import pytest
from textual.widgets import Static

from gif_braille import tui
from gif_braille.braille import Cell, RasterizedFrame
from gif_braille.config import PlayerConfig
from gif_braille.errors import SurfaceError
from gif_braille.frame_store import FrameStore
from gif_braille.playback import QueueKeySource


def _store() -> FrameStore:
    return FrameStore(
        [
            RasterizedFrame(rows=((Cell("\u28ff", (255, 255, 255)),),)),
            RasterizedFrame(rows=((Cell("\u2800", (0, 0, 0)),),)),
        ]
    )


class _Surface:
    def __init__(self) -> None:
        self.frames: list[RasterizedFrame] = []

    def draw(self, frame: RasterizedFrame) -> None:
        self.frames.append(frame)


class _BrokenSurface:
    def draw(self, frame: RasterizedFrame) -> None:
        raise OSError("write failed")


def _capture_exit(app: tui.GifBrailleApp) -> list[object]:
    exits: list[object] = []

    def fake_exit(result: object = None, *args: object, **kwargs: object) -> None:
        exits.append(result)

    app.exit = fake_exit  # type: ignore[method-assign]
    return exits


def test_play_exits_zero_on_quit_key() -> None:
    app = tui.GifBrailleApp(_store(), PlayerConfig())
    exits = _capture_exit(app)
    surface = _Surface()

    async def runner() -> None:
        keys = QueueKeySource()
        keys.push("q")
        await app._play(surface, keys)

    asyncio.run(runner())

    assert exits == [0]
    assert app.playback_error is None
    assert app.final_index == 0
    assert surface.frames == [app.store[0]]


def test_play_honors_configured_quit_key() -> None:
    app = tui.GifBrailleApp(_store(), PlayerConfig(quit_key="x"))
    exits = _capture_exit(app)

    async def runner() -> None:
        keys = QueueKeySource()
        keys.push("q")
        keys.push("x")
        await app._play(_Surface(), keys)

    asyncio.run(runner())

    assert exits == [0]


def test_play_records_surface_error() -> None:
    app = tui.GifBrailleApp(_store(), PlayerConfig())
    exits = _capture_exit(app)

    asyncio.run(app._play(_BrokenSurface(), QueueKeySource()))

    assert exits == [1]
    assert isinstance(app.playback_error, SurfaceError)
    assert app.final_index is None


def test_app_mounts_titled_frame_and_quits_on_q() -> None:
    config = PlayerConfig(title="demo", frame_interval_ms=10_000)
    app = tui.GifBrailleApp(_store(), config)

    async def runner() -> None:
        async with app.run_test(size=(40, 12)) as pilot:
            await pilot.pause()
            frame_view = app.query_one("#frame", Static)
            assert frame_view.border_title == "demo"
            await pilot.press("q")
            for _ in range(100):
                if app.final_index is not None:
                    break
                await asyncio.sleep(0.01)

    asyncio.run(runner())

    assert app.final_index == 0
    assert app.return_value == 0


def test_run_tui_returns_app_result(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(tui.GifBrailleApp, "run", lambda self: 0)
    assert tui.run_tui(_store(), PlayerConfig()) == 0


def test_run_tui_reports_error_after_exit(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def fake_run(self: tui.GifBrailleApp) -> int:
        self.playback_error = SurfaceError("Failed to draw frame 0: boom")
        return 1

    monkeypatch.setattr(tui.GifBrailleApp, "run", fake_run)

    assert tui.run_tui(_store(), PlayerConfig()) == 1
    assert "Failed to draw frame 0: boom" in capsys.readouterr().err
