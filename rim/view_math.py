"""Pure view calculation functions - no side effects, no state mutation."""

from __future__ import annotations
import math

from .config import SCALE_DEFAULT, SCALE_STEP, SCALE_MAX, SCALE_MIN, ZOOM_FACTOR
from .types import Dimensions, Offset, Position


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def scale_for_level(level: int) -> float:
    """Scale factor reached after ``level`` discrete zoom steps.

    Positive levels magnify (scale < 1), negative levels shrink.

    Args:
        level: Signed zoom step count from native size.

    Returns:
        Scale factor (source pixels per displayed pixel).
    """
    return SCALE_DEFAULT * SCALE_STEP ** -level


def scaled_dimensions(source: Dimensions, scale: float) -> Dimensions:
    """Displayed size of an image for a scale factor.

    Args:
        source: Native image size (w, h).
        scale: Scale factor; values > 1 shrink, < 1 magnify.

    Returns:
        Rounded (w, h) to present the image at.
    """
    w, h = source
    return (_round_half_up(w / scale), _round_half_up(h / scale))


def in_scale_band(scale: float) -> bool:
    """Check if a scale factor lies within (SCALE_MAX, SCALE_MIN]."""
    return SCALE_MAX < scale <= SCALE_MIN


def zoom_in_offset(
    position: Position,
    viewport: Dimensions,
    factor: int = ZOOM_FACTOR
) -> Offset:
    """Viewport shift keeping the anchor steady while magnifying.

    Per axis: ``c // f + (v // f) // 2``.

    Args:
        position: Anchor coordinate in the viewport.
        viewport: Viewport size (w, h).
        factor: Magnification factor ``f``.

    Returns:
        Non-negative (dx, dy).
    """
    x, y = position
    w, h = viewport
    return (
        x // factor + (w // factor) // 2,
        y // factor + (h // factor) // 2,
    )


def _zoom_out_axis(c: int, v: int, factor: int) -> int:
    half = (v // factor) // 2
    if c <= half:
        return 0
    return (c - half) // (factor + 1) + half


def zoom_out_offset(
    position: Position,
    viewport: Dimensions,
    factor: int = ZOOM_FACTOR
) -> Offset:
    """Viewport shift keeping the anchor steady while shrinking.

    Per axis, with ``half = (v // f) // 2``: zero when the anchor lies
    within ``half`` of the origin, else ``(c - half) // (f + 1) + half``.

    Args:
        position: Anchor coordinate in the viewport.
        viewport: Viewport size (w, h).
        factor: Magnification factor ``f``.

    Returns:
        Non-positive (dx, dy).
    """
    x, y = position
    w, h = viewport
    return (
        -_zoom_out_axis(x, w, factor),
        -_zoom_out_axis(y, h, factor),
    )
