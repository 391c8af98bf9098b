"""GIF decoding and resampling via Pillow."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, ImageSequence, UnidentifiedImageError

from gif_braille.braille import RawFrame
from gif_braille.errors import DecodeError

logger = logging.getLogger(__name__)


def decode_gif(path: Path | str) -> list[RawFrame]:
    """Decode every frame of a GIF into fully composited RGBA frames.

    Per-frame delays are not kept; playback runs at a fixed cadence.
    """
    path = Path(path)
    try:
        with Image.open(path) as image:
            if image.format != "GIF":
                raise DecodeError(f"Not a GIF file: {path} ({image.format})")
            frames = [
                _to_raw_frame(frame.convert("RGBA"))
                for frame in ImageSequence.Iterator(image)
            ]
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Failed to decode {path}: {exc}") from exc
    logger.info("Decoded %s frame(s) from %s", len(frames), path)
    return frames


def resample(frame: RawFrame, width: int, height: int) -> RawFrame:
    """Resize a frame with a Lanczos filter."""
    if (frame.width, frame.height) == (width, height):
        return frame
    image = Image.frombytes("RGBA", (frame.width, frame.height), frame.pixels)
    resized = image.resize((width, height), Image.Resampling.LANCZOS)
    return _to_raw_frame(resized)


def placeholder_frame() -> RawFrame:
    """Return a 1x1 fully transparent frame."""
    return RawFrame(width=1, height=1, pixels=bytes(4))


def _to_raw_frame(image: Image.Image) -> RawFrame:
    return RawFrame(width=image.width, height=image.height, pixels=image.tobytes())
