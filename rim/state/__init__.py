"""State management submodules for Rim."""

from .gallery import Gallery
from .view import ViewState
from .input import PanState

__all__ = [
    'Gallery',
    'ViewState',
    'PanState',
]
