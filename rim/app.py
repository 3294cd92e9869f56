"""Application - wires a host toolkit to the viewer.

The Application owns the Viewer and a CommandQueue and keeps the window
title and initial window size the host should use:

    app = Application(on_title=window.set_title)
    app.initialize(start_path, on_set=image.load, on_resize=image.resize,
                   on_move_by=region.move_by)
    window.resize(*app.window_size)
    ...
    app.submit(NavigateNext())
"""

from __future__ import annotations
import argparse
import os
from dataclasses import dataclass, field
from typing import List, Optional

from .commands import Command, CommandQueue
from .config import APP_NAME, DEFAULT_WINDOW_SIZE, MIN_WINDOW_SIZE, MAX_WINDOW_SIZE
from .logging import log, increment_event, set_enabled
from .math_utils import clamp
from .types import Dimensions, TitleCallback, is_known
from .viewer import Viewer


def initial_window_size(dims: Dimensions) -> Dimensions:
    """Window size for the first image: its size clamped to sane limits."""
    if not is_known(dims):
        return DEFAULT_WINDOW_SIZE
    w, h = dims
    return (
        int(clamp(w, MIN_WINDOW_SIZE[0], MAX_WINDOW_SIZE[0])),
        int(clamp(h, MIN_WINDOW_SIZE[1], MAX_WINDOW_SIZE[1])),
    )


@dataclass
class Application:
    """
    Main application orchestrator.

    Input → Commands → Viewer → host callbacks.
    """

    viewer: Viewer = field(default_factory=Viewer)
    queue: CommandQueue = field(default_factory=CommandQueue)
    window_title: str = APP_NAME
    window_size: Dimensions = DEFAULT_WINDOW_SIZE

    # Host window title setter
    on_title: Optional[TitleCallback] = None

    def initialize(self, start_path: Optional[str] = None, **callbacks) -> bool:
        """
        Build the gallery for ``start_path`` and open its current image.

        ``callbacks`` are passed on to the Viewer (on_set, on_resize,
        on_move_by, probe). An ``on_title`` callback replaces the host
        title setter. Returns True if there is an image to show.
        """
        if "on_title" in callbacks:
            self.on_title = callbacks.pop("on_title")
        self.viewer = Viewer.from_path(start_path or "", on_title=self._set_title, **callbacks)
        self.window_title = self.viewer.title() or APP_NAME
        self.window_size = initial_window_size(self.viewer.state.view_dimensions)
        log(f"[APP] Initialized: title={self.window_title!r} size={self.window_size}")
        return self.viewer.gallery.size() > 0

    def submit(self, command: Command) -> bool:
        """Execute one command from the host. Returns True if it took effect."""
        increment_event()
        return self.queue.execute(command, self.viewer)

    def _set_title(self, text: str) -> None:
        self.window_title = text
        if self.on_title is not None:
            self.on_title(text)


def resolve_start_path(arg: Optional[str]) -> Optional[str]:
    """The start path as an absolute path, or None to use the current directory.

    A path that does not exist is kept: its parent directory is still
    browsed, starting at the first image.
    """
    if not arg:
        log("[ARGS] No path provided, using current directory")
        return None
    p = os.path.abspath(arg)
    if not os.path.exists(p):
        log(f"[ARGS] {p!r} does not exist, browsing its directory")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rim",
        description="Show the gallery and window setup Rim would open for a path.",
    )
    parser.add_argument("path", nargs="?", help="image file or directory")
    parser.add_argument("-q", "--quiet", action="store_true", help="suppress log output")
    ns = parser.parse_args(argv)

    if ns.quiet:
        set_enabled(False)

    app = Application()
    start_path = resolve_start_path(ns.path)
    if not app.initialize(start_path):
        print(f"{APP_NAME}: no images found")
        return 1

    gallery = app.viewer.gallery
    print(app.window_title)
    print(f"{app.window_size[0]}x{app.window_size[1]}")
    for i, p in enumerate(gallery.images):
        marker = ">" if i == gallery.position() else " "
        print(f"{marker} {i + 1:4d} {p}")
    return 0
