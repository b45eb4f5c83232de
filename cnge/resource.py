"""Resources that are gathered in the background and loaded on the main thread."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["Resource"]


class Resource(ABC):
    """Something that is gathered, loaded, discarded and unloaded in stages.

    Gathering reads data (from disk, say) and may run on any thread; loading
    turns gathered data into something usable; discarding frees the gathered
    data; unloading frees what loading made. A resource created with
    ``has_gather`` false has nothing to gather and always counts as gathered.
    """

    def __init__(self, has_gather: bool):
        self.has_gather = has_gather
        self._gathered = False
        self._loaded = False

    def gather(self) -> bool:
        """Gather the resource's data; return whether that succeeded."""
        result = self.custom_gather()
        self._gathered = True
        return bool(result)

    def discard(self) -> None:
        """Free the gathered data."""
        self.custom_discard()
        self._gathered = False

    def load(self) -> None:
        """Turn the gathered data into the loaded resource."""
        self.custom_load()
        self._loaded = True

    def unload(self) -> None:
        """Free the loaded resource."""
        self.custom_unload()
        self._loaded = False

    def gathered(self) -> bool:
        """Return whether gathered data is available."""
        return not self.has_gather or self._gathered

    def loaded(self) -> bool:
        """Return whether the resource is loaded."""
        return self._loaded

    def destroy(self) -> None:
        """Discard and unload whatever is still held."""
        if self._gathered:
            self.discard()
        if self._loaded:
            self.unload()

    @abstractmethod
    def custom_gather(self) -> bool:
        """Read the data; return False on failure."""

    @abstractmethod
    def custom_discard(self) -> None:
        """Free the data read by ``custom_gather``."""

    @abstractmethod
    def custom_load(self) -> None:
        """Build the usable resource from the gathered data."""

    @abstractmethod
    def custom_unload(self) -> None:
        """Free what ``custom_load`` built."""