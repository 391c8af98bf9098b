"""Aspect-preserving fit of an image into a pixel budget."""

from __future__ import annotations

import math


def _round_half_away(value: float) -> int:
    # Inputs are never negative, so floor(x + 0.5) rounds halves away from zero.
    return int(math.floor(value + 0.5))


def fit_dimensions(orig_w: int, orig_h: int, max_w: int, max_h: int) -> tuple[int, int]:
    """Scale (orig_w, orig_h) to fit inside (max_w, max_h) without upscaling.

    Returns (0, 0) when any dimension is zero; callers treat that as
    "not renderable" and substitute a placeholder.
    """
    if max_w == 0 or max_h == 0 or orig_w == 0 or orig_h == 0:
        return (0, 0)
    scale = min(max_w / orig_w, max_h / orig_h, 1.0)
    new_w = max(1, _round_half_away(orig_w * scale))
    new_h = max(1, _round_half_away(orig_h * scale))
    return (new_w, new_h)
