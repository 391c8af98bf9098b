"""Pre-rasterized frame store built once before playback."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from gif_braille.braille import (
    CELL_HEIGHT,
    CELL_WIDTH,
    RasterizedFrame,
    RawFrame,
    rasterize,
)
from gif_braille.decoder import placeholder_frame, resample
from gif_braille.errors import EmptyResultError
from gif_braille.fit import fit_dimensions

logger = logging.getLogger(__name__)

BORDER_CELLS = 2


class FrameStore:
    """Immutable ordered sequence of rasterized frames."""

    def __init__(
        self, frames: Iterable[RasterizedFrame], *, source_count: int | None = None
    ) -> None:
        self._frames: tuple[RasterizedFrame, ...] = tuple(frames)
        if not self._frames:
            raise EmptyResultError("No frames found or failed to decode GIF.")
        self.source_count = (
            source_count if source_count is not None else len(self._frames)
        )

    def __len__(self) -> int:
        return len(self._frames)

    def __getitem__(self, index: int) -> RasterizedFrame:
        return self._frames[index]

    def __iter__(self) -> Iterator[RasterizedFrame]:
        return iter(self._frames)

    def __repr__(self) -> str:
        return f"FrameStore({len(self)} frames, source_count={self.source_count})"


def pixel_budget(cols: int, rows: int) -> tuple[int, int]:
    """Return the (width, height) pixel budget for a terminal of cols x rows.

    One cell on each side is reserved for the border.
    """
    return (
        CELL_WIDTH * max(0, cols - BORDER_CELLS),
        CELL_HEIGHT * max(0, rows - BORDER_CELLS),
    )


def convert_frame(raw: RawFrame, max_w: int, max_h: int) -> RasterizedFrame:
    new_w, new_h = fit_dimensions(raw.width, raw.height, max_w, max_h)
    if new_w > 0 and new_h > 0:
        scaled = resample(raw, new_w, new_h)
    else:
        scaled = placeholder_frame()
    return rasterize(scaled)


def build_frame_store(
    raw_frames: Sequence[RawFrame], cols: int, rows: int
) -> FrameStore:
    """Fit, resample and rasterize every decoded frame.

    `cols` and `rows` are the terminal size sampled once at startup. Frames
    whose buffers do not match their dimensions are skipped; zero-sized frames
    become a 1x1 transparent placeholder.
    """
    max_w, max_h = pixel_budget(cols, rows)
    logger.info(
        "Building frame store: %s frame(s), terminal %sx%s, budget %sx%s px",
        len(raw_frames),
        cols,
        rows,
        max_w,
        max_h,
    )
    converted: list[RasterizedFrame] = []
    for index, raw in enumerate(raw_frames):
        if not raw.is_usable():
            logger.warning(
                "Skipping frame %s: %sx%s with %s byte(s)",
                index,
                raw.width,
                raw.height,
                len(raw.pixels),
            )
            continue
        converted.append(convert_frame(raw, max_w, max_h))
    return FrameStore(converted, source_count=len(raw_frames))
