"""Braille rasterization of RGBA frames.

Each terminal cell covers a block of 2x4 source pixels. Every pixel of the
block maps to one dot of a Unicode braille pattern (U+2800..U+28FF); the cell
also carries the mean RGB of the pixels it covers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from typing_extensions import TypeAlias

Rgb: TypeAlias = tuple[int, int, int]

BRAILLE_BASE = 0x2800
CELL_WIDTH = 2
CELL_HEIGHT = 4
ALPHA_THRESHOLD = 50
LUMINANCE_THRESHOLD = 20.0

# DOT_BITS[sub_col][sub_row] -> bit index in the dot mask.
DOT_BITS: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3),
    (4, 5, 6, 7),
)

BLACK: Rgb = (0, 0, 0)


@dataclass(frozen=True)
class RawFrame:
    """An RGBA8 raster, row-major, four bytes per pixel."""

    width: int
    height: int
    pixels: bytes

    def is_usable(self) -> bool:
        if self.width < 0 or self.height < 0:
            return False
        return len(self.pixels) == self.width * self.height * 4

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        offset = (y * self.width + x) * 4
        r, g, b, a = self.pixels[offset : offset + 4]
        return (r, g, b, a)


@dataclass(frozen=True)
class Cell:
    glyph: str
    color: Rgb

    @property
    def dots(self) -> int:
        return ord(self.glyph) - BRAILLE_BASE


@dataclass(frozen=True)
class RasterizedFrame:
    """Rows of braille cells for one frame. Never mutated after creation."""

    rows: tuple[tuple[Cell, ...], ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def columns(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def __iter__(self) -> Iterator[tuple[Cell, ...]]:
        return iter(self.rows)


def luminance(r: int, g: int, b: int) -> float:
    """Return BT.709 luma for an 8-bit RGB triple."""
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def braille_glyph(mask: int) -> str:
    return chr(BRAILLE_BASE + (mask & 0xFF))


def _rasterize_cell(frame: RawFrame, col: int, row: int) -> Cell:
    r_sum = g_sum = b_sum = 0
    count = 0
    mask = 0
    for sub_row in range(CELL_HEIGHT):
        y = row * CELL_HEIGHT + sub_row
        if y >= frame.height:
            break
        for sub_col in range(CELL_WIDTH):
            x = col * CELL_WIDTH + sub_col
            if x >= frame.width:
                continue
            r, g, b, a = frame.pixel(x, y)
            if a > ALPHA_THRESHOLD and luminance(r, g, b) > LUMINANCE_THRESHOLD:
                mask |= 1 << DOT_BITS[sub_col][sub_row]
            r_sum += r
            g_sum += g
            b_sum += b
            count += 1
    if count:
        color = (r_sum // count, g_sum // count, b_sum // count)
    else:
        color = BLACK
    return Cell(glyph=braille_glyph(mask), color=color)


def rasterize(frame: RawFrame) -> RasterizedFrame:
    """Convert an RGBA raster into a grid of braille cells.

    The grid is ceil(width / 2) columns by ceil(height / 4) rows. Blocks on the
    right and bottom edges may be partial; only in-bounds pixels contribute
    dots and color samples.
    """
    columns = (frame.width + CELL_WIDTH - 1) // CELL_WIDTH
    rows = (frame.height + CELL_HEIGHT - 1) // CELL_HEIGHT
    return RasterizedFrame(
        rows=tuple(
            tuple(_rasterize_cell(frame, col, row) for col in range(columns))
            for row in range(rows)
        )
    )
