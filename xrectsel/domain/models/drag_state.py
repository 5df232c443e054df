# xrectsel/domain/models/drag_state.py
"""
State of an in-progress drag.

Owned by the selection loop for the duration of one ``select`` call. The
loop draws the outline of ``rect`` with an inverting graphics context, so
``last_drawn`` records what is currently visible: drawing that same
rectangle again removes it.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

Rect = Tuple[int, int, int, int]


@dataclass
class DragState:
    pointer_x: int = 0
    pointer_y: int = 0
    anchor_x: int = 0
    anchor_y: int = 0
    pressed: bool = False

    # Normalized rectangle: top-left corner plus non-negative size
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    last_drawn: Optional[Rect] = None

    @property
    def rect(self) -> Rect:
        return self.x, self.y, self.width, self.height

    def press(self, x: int, y: int) -> None:
        """Start a new drag anchored at ``(x, y)``."""
        self.pointer_x = self.anchor_x = self.x = x
        self.pointer_y = self.anchor_y = self.y = y
        self.width = self.height = 0
        self.pressed = True

    def move(self, x: int, y: int) -> None:
        """Track the pointer and normalize the rectangle against the anchor."""
        self.pointer_x = x
        self.pointer_y = y
        self.x = min(x, self.anchor_x)
        self.y = min(y, self.anchor_y)
        self.width = abs(x - self.anchor_x)
        self.height = abs(y - self.anchor_y)
