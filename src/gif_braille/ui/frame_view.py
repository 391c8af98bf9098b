"""Rich rendering of braille frames and the Textual draw surface."""

from __future__ import annotations

from typing import Protocol

from rich.color import Color
from rich.style import Style
from rich.text import Text

from gif_braille.braille import RasterizedFrame, Rgb


class _Updatable(Protocol):
    def update(self, content: Text) -> None: ...


def cell_style(color: Rgb) -> Style:
    return Style(color=Color.from_rgb(*color), bold=True)


def frame_to_text(frame: RasterizedFrame) -> Text:
    """Render a frame as one styled line per cell row."""
    text = Text(no_wrap=True, overflow="crop")
    for row_index, row in enumerate(frame.rows):
        if row_index:
            text.append("\n")
        for cell in row:
            text.append(cell.glyph, style=cell_style(cell.color))
    return text


class FrameSurface:
    """Draw surface that replaces a widget's content with a whole frame."""

    def __init__(self, widget: _Updatable) -> None:
        self._widget = widget
        self._cache: dict[int, tuple[RasterizedFrame, Text]] = {}

    def draw(self, frame: RasterizedFrame) -> None:
        cached = self._cache.get(id(frame))
        if cached is None or cached[0] is not frame:
            cached = (frame, frame_to_text(frame))
            self._cache[id(frame)] = cached
        self._widget.update(cached[1])
