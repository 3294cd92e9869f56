"""Command Pattern for viewer input.

The host turns key presses, wheel ticks and toolbar clicks into one of a
closed set of commands: NavigateNext, NavigatePrev, ZoomIn, ZoomOut and
ResetZoom. Each command has an execute() method and can_execute() guard.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .viewer import Viewer

from .logging import log
from .types import Position


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, viewer: "Viewer") -> bool:
        """Execute the command. Returns True if action was taken."""

    def can_execute(self, viewer: "Viewer") -> bool:
        """Check if command can be executed. Override for guards."""
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Navigation Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class NavigateNext(Command):
    """Navigate to next image."""
    notify: bool = True

    def can_execute(self, viewer: "Viewer") -> bool:
        return viewer.gallery.is_navigable

    def execute(self, viewer: "Viewer") -> bool:
        if not self.can_execute(viewer):
            return False
        log(f"[CMD] NavigateNext from {viewer.gallery.position()}")
        return viewer.next(self.notify) is not None


@dataclass
class NavigatePrev(Command):
    """Navigate to previous image."""
    notify: bool = True

    def can_execute(self, viewer: "Viewer") -> bool:
        return viewer.gallery.is_navigable

    def execute(self, viewer: "Viewer") -> bool:
        if not self.can_execute(viewer):
            return False
        log(f"[CMD] NavigatePrev from {viewer.gallery.position()}")
        return viewer.prev(self.notify) is not None


# ═══════════════════════════════════════════════════════════════════════════
# Zoom Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class ZoomIn(Command):
    """Zoom in one step, optionally around a new anchor."""
    anchor: Optional[Position] = None

    def can_execute(self, viewer: "Viewer") -> bool:
        return viewer.is_valid()

    def execute(self, viewer: "Viewer") -> bool:
        if not self.can_execute(viewer):
            return False
        if self.anchor is not None:
            viewer.set_position(*self.anchor)
        log(f"[CMD] ZoomIn: anchor={viewer.state.position}")
        return viewer.zoom_in()


@dataclass
class ZoomOut(Command):
    """Zoom out one step, optionally around a new anchor."""
    anchor: Optional[Position] = None

    def can_execute(self, viewer: "Viewer") -> bool:
        return viewer.is_valid()

    def execute(self, viewer: "Viewer") -> bool:
        if not self.can_execute(viewer):
            return False
        if self.anchor is not None:
            viewer.set_position(*self.anchor)
        log(f"[CMD] ZoomOut: anchor={viewer.state.position}")
        return viewer.zoom_out()


class ResetZoom(Command):
    """Return to native size."""

    def can_execute(self, viewer: "Viewer") -> bool:
        return viewer.is_valid() and not viewer.state.is_native

    def execute(self, viewer: "Viewer") -> bool:
        if not self.can_execute(viewer):
            return False
        log(f"[CMD] ResetZoom: level={viewer.state.zoom_level}")
        return viewer.reset()


# ═══════════════════════════════════════════════════════════════════════════
# Command Queue
# ═══════════════════════════════════════════════════════════════════════════

class CommandQueue:
    """Runs commands against a viewer and keeps a bounded history."""

    def __init__(self, max_history: int = 100):
        self._history: List[Command] = []
        self._max_history = max_history

    def execute(self, command: Command, viewer: "Viewer") -> bool:
        """Execute a command and track it if it took effect."""
        if not command.can_execute(viewer):
            return False

        result = command.execute(viewer)
        if result and self._max_history > 0:
            self._history.append(command)
            if len(self._history) > self._max_history:
                self._history.pop(0)

        return result

    @property
    def history(self) -> List[Command]:
        """Get command history."""
        return self._history.copy()

    def clear_history(self) -> None:
        """Clear command history."""
        self._history.clear()
