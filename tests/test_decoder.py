"""Tests for GIF decoding and resampling."""

from __future__ import annotations

from pathlib import Path
import struct

import pytest
from PIL import Image

from gif_braille.braille import RawFrame
from gif_braille.decoder import decode_gif, placeholder_frame, resample
from gif_braille.errors import DecodeError


def test_decode_returns_composited_rgba_frames(make_gif) -> None:
    path = make_gif([(0, 0, 0), (255, 255, 255)])

    frames = decode_gif(path)

    assert len(frames) == 2
    assert all((f.width, f.height) == (4, 8) for f in frames)
    assert all(f.is_usable() for f in frames)
    assert frames[0].pixel(0, 0) == (0, 0, 0, 255)
    assert frames[1].pixel(3, 7) == (255, 255, 255, 255)


def test_decode_accepts_string_path(make_gif) -> None:
    path = make_gif([(10, 200, 30)])
    assert len(decode_gif(str(path))) == 1


def test_decode_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DecodeError):
        decode_gif(tmp_path / "missing.gif")


def test_decode_rejects_garbage(tmp_path: Path) -> None:
    path = tmp_path / "garbage.gif"
    path.write_bytes(b"definitely not an image")
    with pytest.raises(DecodeError):
        decode_gif(path)


def test_decode_rejects_other_formats(tmp_path: Path) -> None:
    path = tmp_path / "still.png"
    Image.new("RGB", (4, 4), (255, 0, 0)).save(path)
    with pytest.raises(DecodeError, match="Not a GIF"):
        decode_gif(path)


def test_resample_same_size_returns_input() -> None:
    frame = RawFrame(2, 2, bytes(16))
    assert resample(frame, 2, 2) is frame


def test_resample_changes_dimensions() -> None:
    frame = RawFrame(8, 8, bytes((255, 255, 255, 255)) * 64)

    resized = resample(frame, 4, 2)

    assert (resized.width, resized.height) == (4, 2)
    assert resized.is_usable()
    r, g, b, a = resized.pixel(1, 1)
    assert min(r, g, b) >= 250
    assert a == 255


def test_placeholder_is_transparent_single_pixel() -> None:
    frame = placeholder_frame()
    assert (frame.width, frame.height) == (1, 1)
    assert frame.pixel(0, 0) == (0, 0, 0, 0)


def test_decode_rejects_oversized_canvas(tmp_path: Path) -> None:
    # Header, 65535x65535 logical screen, one full-canvas image, empty data.
    data = (
        b"GIF89a"
        + struct.pack("<HHBBB", 65535, 65535, 0, 0, 0)
        + b","
        + struct.pack("<HHHHB", 0, 0, 65535, 65535, 0)
        + b"\x02\x00"
        + b";"
    )
    path = tmp_path / "huge.gif"
    path.write_bytes(data)

    with pytest.raises(DecodeError) as excinfo:
        decode_gif(path)

    assert isinstance(excinfo.value.__cause__, Image.DecompressionBombError)
