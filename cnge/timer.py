"""A countdown timer advanced by frame deltas."""

from __future__ import annotations

from .mathutil import mod

__all__ = ["Timer"]


class Timer:
    """Counts elapsed time toward ``time`` while it is going."""

    def __init__(self, time: float, going: bool = False):
        self.time = time
        self.elapsed = 0.0
        self.going = going

    def start(self) -> None:
        """Start counting from zero."""
        self.going = True
        self.elapsed = 0.0

    def pause(self) -> None:
        self.going = False

    def resume(self) -> None:
        self.going = True

    def stop(self) -> None:
        """Stop and reset the elapsed time."""
        self.going = False
        self.elapsed = 0.0

    def update(self, delta: float) -> bool:
        """Advance by ``delta``; return True and stop once the time is reached."""
        if not self.going:
            return False
        self.elapsed += delta
        if self.elapsed >= self.time:
            self.stop()
            return True
        return False

    def update_continual(self, delta: float) -> bool:
        """Advance by ``delta``; return True and wrap around when the time is reached."""
        if not self.going:
            return False
        self.elapsed += delta
        if self.elapsed >= self.time:
            self.elapsed = mod(self.elapsed, self.time)
            return True
        return False

    def along(self) -> float:
        """Return the fraction of the time that has elapsed."""
        return self.elapsed / self.time

    def add(self, amount: float) -> None:
        """Add ``amount`` to the elapsed time without checking for completion."""
        self.elapsed += amount

    def set_max(self) -> None:
        """Set the elapsed time to the full time."""
        self.elapsed = self.time