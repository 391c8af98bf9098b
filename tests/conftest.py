"""Pytest configuration for gif-braille."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

Color = tuple[int, int, int]


@pytest.fixture
def make_gif(tmp_path: Path) -> Callable[..., Path]:
    """Write an animated GIF of solid-color frames and return its path."""

    def _make(
        colors: list[Color], size: tuple[int, int] = (4, 8), name: str = "anim.gif"
    ) -> Path:
        frames = [Image.new("RGB", size, color) for color in colors]
        path = tmp_path / name
        frames[0].save(
            path,
            save_all=True,
            append_images=frames[1:],
            duration=100,
            loop=0,
        )
        return path

    return _make
