"""Scenes with resource bundles, loading screens, and the manager that switches them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .input import Input
from .loader import Loader
from .loop import Timing
from .resource import Resource

__all__ = ["LoadScreen", "SceneSwitch", "Scene", "SceneManager"]


class LoadScreen(ABC):
    """What is shown while a scene's resources load."""

    @abstractmethod
    def resized(self, width: int, height: int) -> None:
        """React to the window's size."""

    @abstractmethod
    def update(self, input: Input, timing: Timing) -> None:
        """Advance the screen by one frame."""

    @abstractmethod
    def render(self, completed: int, total: int) -> None:
        """Draw the screen given loading progress."""


@dataclass
class SceneSwitch:
    """A request to move to ``scene``, showing ``load_screen`` while it loads."""

    scene: "Scene"
    load_screen: LoadScreen


class Scene(ABC):
    """A stage of the game that owns a bundle of resources it needs loaded."""

    def __init__(self, bundle: Sequence[Resource]):
        self.bundle: List[Resource] = list(bundle)

    @abstractmethod
    def start(self) -> None:
        """Called once the bundle is loaded."""

    @abstractmethod
    def resized(self, width: int, height: int) -> None:
        """React to the window's size."""

    @abstractmethod
    def update(self, input: Input, timing: Timing) -> None:
        """Advance the scene by one frame."""

    @abstractmethod
    def render(self) -> None:
        """Draw the scene."""

    @abstractmethod
    def switch_scene(self) -> Optional[SceneSwitch]:
        """Return a switch to move to another scene, or None to stay."""


class SceneManager:
    """Runs the current scene, or its loading screen while resources load."""

    def __init__(self):
        self.is_loading = False
        self.loader = Loader()
        self.scene: Optional[Scene] = None
        self.load_screen: Optional[LoadScreen] = None

    def start(self, input: Input, scene: Scene, load_screen: LoadScreen) -> None:
        """Begin switching to ``scene``, unloading what the old scene no longer needs."""
        self.is_loading = True

        old_bundle = self.scene.bundle if self.scene is not None else []
        self.loader.setup(len(scene.bundle), len(old_bundle))
        for resource in scene.bundle:
            self.loader.give_load_resource(resource)
        for resource in old_bundle:
            self.loader.give_unload_resource(resource)
        self.loader.start()

        self.scene = scene
        self.load_screen = load_screen
        load_screen.resized(input.width, input.height)

    def update_loading(self, input: Input, timing: Timing) -> bool:
        """Run one loading frame; return whether loading continues."""
        if self.scene is None or self.load_screen is None:
            raise RuntimeError("no scene has been started")

        if input.resized:
            self.load_screen.resized(input.width, input.height)

        self.loader.update()

        if self.loader.done():
            self.scene.resized(input.width, input.height)
            self.scene.start()
            return False

        self.load_screen.update(input, timing)
        self.load_screen.render(self.loader.completed, self.loader.total)
        return True

    def update_scene(self, input: Input, timing: Timing) -> bool:
        """Run one scene frame; return whether a switch has started loading."""
        if self.scene is None:
            raise RuntimeError("no scene has been started")

        if input.resized:
            self.scene.resized(input.width, input.height)

        self.scene.update(input, timing)
        self.scene.render()

        switch = self.scene.switch_scene()
        if switch is not None and switch.scene is not None:
            self.start(input, switch.scene, switch.load_screen)
            return True
        return False

    def update(self, input: Input, timing: Timing) -> None:
        """Update and render either the loading screen or the scene."""
        if self.is_loading:
            self.is_loading = self.update_loading(input, timing)
        else:
            self.is_loading = self.update_scene(input, timing)