# src/orange_time/core/navigation.py

from __future__ import annotations

import logging
from enum import StrEnum

logger = logging.getLogger(__name__)


class View(StrEnum):
    DASHBOARD = "dashboard"
    TIMELINE = "timeline"
    EDITOR = "editor"


class NavigationState:
    """
    Which screen is shown, where "back" goes, and the scroll offset of each view.

    Transitions:
    - dashboard <-> timeline: show()
    - any -> editor: open_editor() remembers the origin and its scroll offset
    - editor -> origin: close_editor() returns the offset to restore
    """

    def __init__(self) -> None:
        self.current: View = View.DASHBOARD
        self.previous: View = View.DASHBOARD
        self._scroll: dict[View, int] = {v: 0 for v in View}

    @property
    def in_editor(self) -> bool:
        return self.current == View.EDITOR

    def scroll_offset(self, view: View | None = None) -> int:
        return self._scroll[view or self.current]

    def show(self, view: View | str) -> View:
        view = View(view)
        if view == View.EDITOR:
            raise ValueError("Use open_editor() to enter the editor")
        if view != self.current:
            logger.debug("Navigate %s -> %s", self.current, view)
        self.current = view
        return view

    def open_editor(self, scroll_offset: int = 0) -> None:
        # Re-opening from inside the editor keeps the first origin.
        if self.current != View.EDITOR:
            self._scroll[self.current] = max(0, int(scroll_offset))
            self.previous = self.current
        self._scroll[View.EDITOR] = 0
        self.current = View.EDITOR
        logger.debug("Editor opened from %s (scroll=%s)", self.previous, self._scroll[self.previous])

    def close_editor(self) -> int:
        """Go back to the view the editor was opened from; returns its saved scroll offset."""
        if self.current == View.EDITOR:
            self.current = self.previous
        return self._scroll[self.current]
