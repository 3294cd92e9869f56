"""Rim - image gallery browsing with stepped zoom and pan."""

from .state import Gallery, ViewState, PanState
from .viewer import Viewer
from .commands import (
    Command,
    CommandQueue,
    NavigateNext,
    NavigatePrev,
    ZoomIn,
    ZoomOut,
    ResetZoom,
)
from .app import Application

__all__ = [
    'Gallery',
    'ViewState',
    'PanState',
    'Viewer',
    'Command',
    'CommandQueue',
    'NavigateNext',
    'NavigatePrev',
    'ZoomIn',
    'ZoomOut',
    'ResetZoom',
    'Application',
]
