"""Fit a game's preferred aspect ratio into a window, letterboxing as needed."""

from __future__ import annotations

__all__ = ["Aspect"]


class Aspect:
    """Works out game dimensions and a viewport for a given window size.

    The game keeps its preferred width or height and stretches the other
    dimension to fill the window, up to ``max_width`` or ``max_height``; any
    remaining space is split evenly as bars around the viewport.
    """

    def __init__(self, width: float, height: float, max_width: float, max_height: float):
        self.asp_width = width
        self.asp_height = height
        self.max_width = max_width
        self.max_height = max_height

        self.game_width = 0.0
        self.game_height = 0.0
        self.left = 0
        self.top = 0
        self.width = 0
        self.height = 0

    def change_aspect(self, width: float, height: float) -> None:
        self.asp_width = width
        self.asp_height = height

    def change_max_aspect(self, width: float, height: float) -> None:
        self.max_width = width
        self.max_height = height

    def update(self, screen_width: int, screen_height: int) -> None:
        """Recalculate for a window of the given size."""
        pref_aspect = self.asp_width / self.asp_height
        screen_aspect = screen_width / screen_height

        if pref_aspect > screen_aspect:
            # Tall window: fill the width, stretch the height up to its limit.
            self.game_width = self.asp_width
            self.left = 0
            self.width = screen_width

            screen_aspect = max(screen_aspect, self.asp_width / self.max_height)

            self.height = int((1.0 / screen_aspect) * self.width)
            self.top = (screen_height - self.height) // 2
            self.game_height = (1.0 / screen_aspect) * self.game_width
        else:
            # Wide window: fill the height, stretch the width up to its limit.
            self.game_height = self.asp_height
            self.top = 0
            self.height = screen_height

            screen_aspect = min(screen_aspect, self.max_width / self.asp_height)

            self.width = int(screen_aspect * self.height)
            self.left = (screen_width - self.width) // 2
            self.game_width = screen_aspect * self.game_height