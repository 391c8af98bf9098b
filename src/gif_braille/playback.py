"""Fixed-cadence playback of a frame store."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
import time
from typing import Callable, Optional, Protocol

from gif_braille.braille import RasterizedFrame
from gif_braille.errors import SurfaceError
from gif_braille.frame_store import FrameStore

logger = logging.getLogger(__name__)

DEFAULT_QUIT_KEY = "q"


class DrawSurface(Protocol):
    def draw(self, frame: RasterizedFrame) -> None: ...


class KeySource(Protocol):
    async def next_key(self, timeout: float) -> Optional[str]: ...


@dataclass
class PlaybackState:
    """Mutable state of one playback loop."""

    index: int = 0
    last_advance: float = 0.0
    terminated: bool = False


class PlaybackScheduler:
    """Decides when to advance frames and when to stop.

    All methods take the current time explicitly so the scheduler can be
    driven by a fake clock.
    """

    def __init__(
        self, frame_count: int, interval: float, *, quit_key: str = DEFAULT_QUIT_KEY
    ) -> None:
        if frame_count <= 0:
            raise ValueError("frame_count must be positive")
        self.frame_count = frame_count
        self.interval = interval
        self.quit_key = quit_key

    def start(self, now: float) -> PlaybackState:
        return PlaybackState(index=0, last_advance=now)

    def time_left(self, state: PlaybackState, now: float) -> float:
        return max(0.0, self.interval - (now - state.last_advance))

    def handle_key(self, state: PlaybackState, key: Optional[str]) -> bool:
        """Apply a key press; return True when playback should stop."""
        if key is not None and key == self.quit_key:
            state.terminated = True
        return state.terminated

    def advance_if_due(self, state: PlaybackState, now: float) -> bool:
        if now - state.last_advance < self.interval:
            return False
        state.index = (state.index + 1) % self.frame_count
        state.last_advance = now
        return True


class QueueKeySource:
    """Key source backed by an asyncio queue of key characters."""

    def __init__(self, queue: Optional[asyncio.Queue[Optional[str]]] = None) -> None:
        self.queue: asyncio.Queue[Optional[str]] = (
            queue if queue is not None else asyncio.Queue()
        )

    def push(self, key: Optional[str]) -> None:
        self.queue.put_nowait(key)

    async def next_key(self, timeout: float) -> Optional[str]:
        if not self.queue.empty():
            return self.queue.get_nowait()
        if timeout <= 0:
            await asyncio.sleep(0)
            return None
        try:
            return await asyncio.wait_for(self.queue.get(), timeout=timeout)
        except asyncio.TimeoutError:
            return None


async def run_playback(
    store: FrameStore,
    surface: DrawSurface,
    keys: KeySource,
    scheduler: PlaybackScheduler,
    *,
    clock: Callable[[], float] = time.monotonic,
) -> PlaybackState:
    """Draw, wait for a key, advance; repeat until the quit key arrives.

    The key wait is bounded by the time left in the current interval, so held
    keys never stall the frame cadence. Failures of the surface or the key
    source end the loop as `SurfaceError`.
    """
    state = scheduler.start(clock())
    logger.info(
        "Playback start frames=%s interval=%.3fs", len(store), scheduler.interval
    )
    while True:
        try:
            surface.draw(store[state.index])
        except SurfaceError:
            raise
        except Exception as exc:
            raise SurfaceError(f"Failed to draw frame {state.index}: {exc}") from exc
        try:
            key = await keys.next_key(scheduler.time_left(state, clock()))
        except SurfaceError:
            raise
        except Exception as exc:
            raise SurfaceError(f"Failed to read input: {exc}") from exc
        if scheduler.handle_key(state, key):
            logger.info("Playback stopped at frame %s", state.index)
            return state
        scheduler.advance_if_due(state, clock())
