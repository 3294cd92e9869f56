"""Viewer - zoom/pan engine and gallery navigation for one displayed image.

The viewer never draws anything. It tells the host what to do through
optional callbacks:

- ``on_set(path)``: load and decode a file
- ``on_resize(w, h)``: present the image at this size
- ``on_move_by(dx, dy)``: shift the visible viewport
- ``on_title(text)``: update the window title

and learns the native size of a newly loaded image through ``probe``.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Optional

from .config import APP_NAME
from .image_utils import probe_image_dimensions
from .logging import log
from .state import Gallery, ViewState, PanState
from .types import (
    Dimensions,
    MoveCallback,
    ProbeFunc,
    ResizeCallback,
    SetCallback,
    TitleCallback,
    NO_DIMENSIONS,
    is_known,
)
from .view_math import (
    in_scale_band,
    scale_for_level,
    scaled_dimensions,
    zoom_in_offset,
    zoom_out_offset,
)


@dataclass
class Viewer:
    """
    Owns the gallery and the view state of the current image.

    Usage:
        viewer = Viewer.from_path(path, on_set=..., on_resize=...)
        viewer.set_viewport(w, h)
        viewer.set_position(x, y)
        viewer.zoom_in()
    """

    gallery: Gallery = field(default_factory=Gallery)
    state: ViewState = field(default_factory=ViewState)
    pan: PanState = field(default_factory=PanState)

    on_set: Optional[SetCallback] = None
    on_resize: Optional[ResizeCallback] = None
    on_move_by: Optional[MoveCallback] = None
    on_title: Optional[TitleCallback] = None
    probe: ProbeFunc = probe_image_dimensions

    @classmethod
    def from_path(cls, path, **kwargs) -> Viewer:
        """Build a viewer over the gallery of ``path`` and load its current image."""
        viewer = cls(gallery=Gallery.from_path(path), **kwargs)
        current = viewer.gallery.get()
        if current is not None:
            viewer.load(current)
        return viewer

    # ═══════════════════════════════════════════════════════════════════════
    # Host inputs
    # ═══════════════════════════════════════════════════════════════════════

    def set_viewport(self, width: int, height: int) -> None:
        """Record the visible region size."""
        self.state.viewport_dimensions = (max(0, int(width)), max(0, int(height)))

    def set_position(self, x: int, y: int) -> None:
        """Record the zoom anchor (usually the pointer) in viewport pixels."""
        self.state.position = (max(0, int(x)), max(0, int(y)))

    def set_source_dimensions(self, width: int, height: int) -> None:
        """Record the native size of the loaded image; (0, 0) marks it invalid."""
        self.state.source_dimensions = (max(0, int(width)), max(0, int(height)))

    def is_valid(self) -> bool:
        return self.state.is_valid

    # ═══════════════════════════════════════════════════════════════════════
    # Loading
    # ═══════════════════════════════════════════════════════════════════════

    def load(self, path: str) -> None:
        """Open an image at native size, discarding zoom and pan."""
        self._request_set(path)
        self.state.reset_neutral()
        log(f"[VIEW] Loaded {path!r} at {self.state.source_dimensions}")

    def show(self, path: str) -> bool:
        """Jump to a gallery member and open it at native size."""
        target = self.gallery.move_to(path)
        if target is None:
            log(f"[NAV] {path!r} is not in the gallery")
            return False
        self.load(target)
        self._emit_title()
        return True

    def _request_set(self, path: str) -> Dimensions:
        if self.on_set is not None:
            self.on_set(path)
        dims = self.probe(path)
        self.set_source_dimensions(*dims)
        return self.state.source_dimensions

    # ═══════════════════════════════════════════════════════════════════════
    # Zoom
    # ═══════════════════════════════════════════════════════════════════════

    def zoom_in(self) -> bool:
        """Magnify one step around the anchor. Returns True if applied."""
        s = self.state
        if not s.is_valid:
            return False
        level = s.zoom_level + 1
        if not in_scale_band(scale_for_level(level)):
            log(f"[VIEW] Zoom in refused at level {s.zoom_level}")
            return False

        dx, dy = zoom_in_offset(s.position, s.viewport_dimensions)
        self._apply_level(level)
        self._move_by(dx, dy)
        return True

    def zoom_out(self) -> bool:
        """Shrink one step around the anchor. Returns True if applied."""
        s = self.state
        if not s.is_valid:
            return False
        level = s.zoom_level - 1
        if not in_scale_band(scale_for_level(level)):
            log(f"[VIEW] Zoom out refused at level {s.zoom_level}")
            return False

        dx, dy = zoom_out_offset(s.position, s.viewport_dimensions)
        self._apply_level(level)
        self._move_by(dx, dy)
        return True

    def reset(self) -> bool:
        """Step back to native size, replaying single zoom steps.

        Each step uses the current anchor, so the pan moves back the way
        it came rather than jumping. Returns True if anything changed.
        """
        s = self.state
        if not s.is_valid or s.zoom_level == 0:
            return False

        start = s.zoom_level
        step = self.zoom_out if start > 0 else self.zoom_in
        while s.zoom_level != 0:
            if not step():
                break
        log(f"[VIEW] Reset from level {start} -> {s.zoom_level}, view={s.view_dimensions}")
        return True

    def scale(self) -> None:
        """Re-apply the current scale to the (possibly new) source size."""
        s = self.state
        if not s.is_valid:
            return
        s.view_dimensions = scaled_dimensions(s.source_dimensions, s.scale_factor)
        self._resize(*s.view_dimensions)

    def _apply_level(self, level: int) -> None:
        s = self.state
        s.zoom_level = level
        s.scale_factor = scale_for_level(level)
        s.view_dimensions = scaled_dimensions(s.source_dimensions, s.scale_factor)
        self._resize(*s.view_dimensions)
        log(f"[VIEW] Level {level} scale={s.scale_factor:.5f} view={s.view_dimensions}")

    def _resize(self, width: int, height: int) -> None:
        if self.on_resize is not None:
            self.on_resize(width, height)

    def _move_by(self, dx: int, dy: int) -> None:
        self.state.add_pan(dx, dy)
        if self.on_move_by is not None:
            self.on_move_by(dx, dy)

    # ═══════════════════════════════════════════════════════════════════════
    # Pan
    # ═══════════════════════════════════════════════════════════════════════

    def start_pan(self, x: int, y: int) -> bool:
        """Grab the image at (x, y)."""
        if not self.state.is_valid or self.pan.is_panning:
            return False
        self.pan.start(x, y)
        return True

    def update_pan(self, x: int, y: int) -> bool:
        """Drag the grabbed image to (x, y)."""
        if not self.state.is_valid or not self.pan.is_panning:
            return False
        dx, dy = self.pan.update(x, y)
        if dx or dy:
            self._move_by(dx, dy)
        return True

    def end_pan(self) -> bool:
        """Release the grabbed image."""
        if not self.pan.end():
            return False
        log(f"[VIEW] Pan ended, dragged {self.pan.get_total_delta()}")
        return True

    # ═══════════════════════════════════════════════════════════════════════
    # Navigation
    # ═══════════════════════════════════════════════════════════════════════

    def next(self, notify: bool = True) -> Optional[str]:
        """Show the next image, keeping the zoom level."""
        if not self.gallery.is_navigable:
            return None
        path = self.gallery.next()
        if path is None:
            return None
        self._navigate(path, notify)
        return path

    def prev(self, notify: bool = True) -> Optional[str]:
        """Show the previous image, keeping the zoom level."""
        if not self.gallery.is_navigable:
            return None
        path = self.gallery.prev()
        if path is None:
            return None
        self._navigate(path, notify)
        return path

    def _navigate(self, path: str, notify: bool) -> None:
        log(f"[NAV] -> {self.gallery.position() + 1}/{self.gallery.size()} {path!r}")
        if not is_known(self._request_set(path)):
            self.state.view_dimensions = NO_DIMENSIONS
        self.scale()
        if notify:
            self._emit_title()

    def _emit_title(self) -> None:
        text = self.title()
        if text is not None and self.on_title is not None:
            self.on_title(text)

    def title(self) -> Optional[str]:
        """Window title for the current image, or None without one."""
        g = self.gallery
        if g.size() == 0:
            return None
        path = g.get()
        if path is None:
            return None
        name = os.path.basename(os.path.normpath(path))
        if name in ("", ".", ".."):
            return None

        pos, count = g.position() + 1, g.size()
        dims = self.state.source_dimensions
        if not is_known(dims):
            return f"{name} - {pos}/{count} - {APP_NAME}"
        w, h = dims
        return f"{name} - {pos}/{count} - ({w} x {h}) - {APP_NAME}"
