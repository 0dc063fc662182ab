"""Content Toggle — the single process-wide boolean behind POST /toggle.

Invariants:
    - Starts hidden (False)
    - flip() is atomic: N concurrent flips from hidden leave it visible iff N is odd
"""

import threading

VISIBLE_TEXT = "This is now visible"
HIDDEN_TEXT = "This is hidden"


def content_for(visible: bool) -> str:
    return VISIBLE_TEXT if visible else HIDDEN_TEXT


class ContentToggle:
    def __init__(self, visible: bool = False):
        self._visible = visible
        self._lock = threading.Lock()

    @property
    def visible(self) -> bool:
        return self._visible

    def flip(self) -> bool:
        """Invert the flag and return the new value."""
        with self._lock:
            self._visible = not self._visible
            return self._visible

    def reset(self, visible: bool = False) -> None:
        with self._lock:
            self._visible = visible
