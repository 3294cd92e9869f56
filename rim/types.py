"""Core data types for Rim."""

from __future__ import annotations
from typing import Callable, Optional, Tuple

# (width, height) in pixels; (0, 0) means "not decoded / invalid"
Dimensions = Tuple[int, int]

# (x, y) in viewport pixels
Position = Tuple[int, int]

# Signed (dx, dy) viewport shift
Offset = Tuple[int, int]

# Host callbacks
SetCallback = Callable[[str], None]
ResizeCallback = Callable[[int, int], None]
MoveCallback = Callable[[int, int], None]
TitleCallback = Callable[[str], None]
ProbeFunc = Callable[[str], Dimensions]

NO_DIMENSIONS: Dimensions = (0, 0)


def is_known(dims: Optional[Dimensions]) -> bool:
    """Check if dimensions describe a decoded image."""
    return dims is not None and tuple(dims) != NO_DIMENSIONS
