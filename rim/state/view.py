"""View state - zoom level, scale and pan for the current image."""

from __future__ import annotations
from dataclasses import dataclass, replace

from ..config import SCALE_DEFAULT
from ..types import Dimensions, Offset, Position, NO_DIMENSIONS, is_known


@dataclass
class ViewState:
    """State for view/zoom parameters of the loaded image."""
    zoom_level: int = 0
    scale_factor: float = SCALE_DEFAULT
    source_dimensions: Dimensions = NO_DIMENSIONS
    view_dimensions: Dimensions = NO_DIMENSIONS
    viewport_dimensions: Dimensions = NO_DIMENSIONS
    position: Position = (0, 0)
    pan_offset: Offset = (0, 0)

    @property
    def is_valid(self) -> bool:
        """Check if a decoded image is present."""
        return is_known(self.source_dimensions)

    @property
    def is_native(self) -> bool:
        """Check if the image is shown at its native size."""
        return self.zoom_level == 0

    def add_pan(self, dx: int, dy: int) -> None:
        """Accumulate a viewport shift."""
        ox, oy = self.pan_offset
        self.pan_offset = (ox + dx, oy + dy)

    def reset_neutral(self) -> None:
        """Return to native size with no pan, keeping image and viewport."""
        self.zoom_level = 0
        self.scale_factor = SCALE_DEFAULT
        self.view_dimensions = self.source_dimensions
        self.pan_offset = (0, 0)

    def copy(self) -> ViewState:
        """Create a copy of this ViewState."""
        return replace(self)
