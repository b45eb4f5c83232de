"""A frame loop that runs at a fixed rate, or as fast as it can."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from itertools import cycle, islice
from typing import Callable, ClassVar, Deque, Optional

__all__ = ["Timing", "Loop", "frame_time"]

_HISTORY = 300


@dataclass(frozen=True)
class Timing:
    """What a frame knows about time: recent frame rate and its own length."""

    BILLION: ClassVar[int] = 1_000_000_000

    fps: int
    delta: int
    time: float


def frame_time(fps: int) -> int:
    """Return the length of one frame in nanoseconds."""
    if fps <= 0:
        raise ValueError("fps must be positive")
    return Timing.BILLION // fps


class Loop:
    """Calls a frame function repeatedly.

    With ``fps`` given, frames are paced to that rate and a frame that runs
    late resets the schedule; without it the loop runs without waiting.
    Times are monotonic nanoseconds.
    """

    def __init__(self, fps: Optional[int] = None):
        self.unlimited = fps is None
        self.fps = 0 if fps is None else fps
        now = time.monotonic_ns()
        self.last = now
        self.next = now
        self._history: Deque[int] = deque([0] * _HISTORY, maxlen=_HISTORY)

    def set_fps(self, fps: int) -> None:
        self.fps = fps

    def do_frame(self, frame: Callable[[Timing], None], now: int) -> None:
        """Run one frame that starts at ``now``."""
        delta = now - self.last

        if not self.unlimited:
            step = frame_time(self.fps)
            if delta < step * 2:
                self.next = self.last + step * 2
                self.last = self.last + step
            else:
                # Running late: start the schedule again from now.
                self.next = now + step
                self.last = now
        else:
            self.last = now

        self._history.append(delta)

        # Count the frames, newest first, that fit into the last second.
        tally = 0
        total = 0
        for entry in islice(cycle(reversed(self._history)), self.fps):
            total += entry
            if total > Timing.BILLION:
                break
            tally += 1

        frame(Timing(tally, delta, delta / Timing.BILLION))

    def begin(self, should_exit: Callable[[], bool], frame: Callable[[Timing], None]) -> None:
        """Run frames until ``should_exit`` returns True."""
        self.last = self.next = time.monotonic_ns()

        while not should_exit():
            if not self.unlimited:
                wait = self.next - time.monotonic_ns() - 10_000_000
                if wait > 0:
                    time.sleep(wait / Timing.BILLION)
                while time.monotonic_ns() < self.next:
                    pass
            self.do_frame(frame, time.monotonic_ns())