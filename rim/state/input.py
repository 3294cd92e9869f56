"""Input state - drag panning."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from ..types import Offset, Position


@dataclass
class PanState:
    """State for grab-and-drag panning."""
    is_panning: bool = False
    pan_start_mouse: Position = (0, 0)
    last_mouse: Position = (0, 0)

    def start(self, mouse_x: int, mouse_y: int) -> None:
        """Start panning operation."""
        self.is_panning = True
        self.pan_start_mouse = (mouse_x, mouse_y)
        self.last_mouse = (mouse_x, mouse_y)

    def update(self, mouse_x: int, mouse_y: int) -> Offset:
        """Get the shift since the previous update and remember the position.

        Dragging the image right moves the viewport left, so the shift
        is the negated mouse movement. Returns (0, 0) when not panning.
        """
        if not self.is_panning:
            return (0, 0)
        dx = self.last_mouse[0] - mouse_x
        dy = self.last_mouse[1] - mouse_y
        self.last_mouse = (mouse_x, mouse_y)
        return (dx, dy)

    def end(self) -> bool:
        """End panning operation. Returns True if was panning."""
        was_panning = self.is_panning
        self.is_panning = False
        return was_panning

    def get_total_delta(self) -> Tuple[int, int]:
        """Get mouse movement since the drag started."""
        dx = self.last_mouse[0] - self.pan_start_mouse[0]
        dy = self.last_mouse[1] - self.pan_start_mouse[1]
        return (dx, dy)
