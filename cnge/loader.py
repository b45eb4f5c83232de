"""Gathers resources on a background thread and loads them on the caller's."""

from __future__ import annotations

import threading
from typing import List, Optional

from .resource import Resource

__all__ = ["LoadingError", "Loader"]


class LoadingError(RuntimeError):
    """Raised when a resource fails to gather."""


class Loader:
    """Moves a set of resources into the loaded state and another out of it.

    Call ``setup``, hand over resources with ``give_load_resource`` and then
    ``give_unload_resource``, call ``start``, and then call ``update`` once per
    frame until ``done`` is true.
    """

    def __init__(self):
        self._thread: Optional[threading.Thread] = None
        self._load: List[Resource] = []
        self._unload: List[Resource] = []
        self._error = threading.Event()
        self.total = 0
        self.completed = 0

    def setup(self, num_load: int, num_unload: int = 0) -> None:
        """Prepare for ``num_load`` resources to load and ``num_unload`` to unload."""
        self._load = []
        self._unload = []
        self.total = num_load + num_unload
        self.completed = 0
        self._error.clear()

    def give_load_resource(self, resource: Resource) -> None:
        self._load.append(resource)

    def give_unload_resource(self, resource: Resource) -> None:
        """Queue a resource for unloading, unless it is also to be loaded."""
        if any(existing is resource for existing in self._load):
            self.completed += 1
        else:
            self._unload.append(resource)

    def _gather_all(self, to_load: List[Resource], to_unload: List[Resource]) -> None:
        for resource in to_load:
            if not resource.gathered() and not resource.loaded():
                if not resource.gather():
                    self._error.set()
                    return
        for resource in to_unload:
            if resource.gathered():
                resource.discard()

    def start(self) -> None:
        """Begin gathering on a background thread."""
        self.completed += sum(1 for resource in self._load if resource.loaded())
        self.completed += sum(1 for resource in self._unload if not resource.loaded())

        self._thread = threading.Thread(
            target=self._gather_all,
            args=(list(self._load), list(self._unload)),
            daemon=True,
        )
        self._thread.start()

    def update(self) -> None:
        """Load what has been gathered and unload what has been discarded.

        Raises LoadingError if a resource failed to gather.
        """
        if self._error.is_set():
            self.join()
            raise LoadingError("a resource failed to gather")

        for resource in self._load:
            if resource.gathered() and not resource.loaded():
                resource.load()
                resource.discard()
                self.completed += 1

        for resource in self._unload:
            if resource.loaded() and not (resource.has_gather and resource.gathered()):
                resource.unload()
                self.completed += 1

        if self.done():
            self.join()

    def quick_load(self) -> None:
        """Gather and load every load resource on this thread, blocking."""
        for resource in self._load:
            if not resource.gathered() and not resource.loaded():
                resource.gather()
            if not resource.loaded():
                resource.load()
                if resource.gathered():
                    resource.discard()

    def join(self) -> None:
        """Wait for the gathering thread, if any, to finish."""
        if self._thread is not None:
            self._thread.join()

    def done(self) -> bool:
        return self.completed == self.total