"""High-contrast toggle persisted under the "contrast-mode" key."""

from __future__ import annotations

from pagewidgets.models import ContrastMode
from pagewidgets.storage import Storage

STORAGE_KEY = "contrast-mode"


class ThemeManager:
    """A single normal/high flag mirrored to storage."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage
        try:
            self._mode = ContrastMode(storage.load(STORAGE_KEY) or ContrastMode.NORMAL)
        except (TypeError, ValueError):
            self._mode = ContrastMode.NORMAL

    @property
    def mode(self) -> ContrastMode:
        return self._mode

    @property
    def pressed(self) -> bool:
        """Whether the toggle button shows as pressed."""
        return self._mode == ContrastMode.HIGH

    def toggle(self) -> ContrastMode:
        """Flip the mode and persist it. Returns the new mode."""
        self._mode = ContrastMode.NORMAL if self.pressed else ContrastMode.HIGH
        self.storage.save(STORAGE_KEY, self._mode.value)
        return self._mode
