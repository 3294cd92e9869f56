"""Image utilities - probing and listing helpers."""

from __future__ import annotations
import os
from typing import List

from PIL import Image

from .config import IMG_EXTS
from .logging import log
from .sorting import natural_sort_key
from .types import Dimensions, NO_DIMENSIONS


def is_supported_image(filepath: str) -> bool:
    """Check if file has a supported image extension (case-insensitive)."""
    ext = os.path.splitext(filepath)[1].lower()
    return ext in IMG_EXTS


def list_images(dirpath: str) -> List[str]:
    """List all supported image files in directory, in natural order.

    Args:
        dirpath: Directory path to scan.

    Returns:
        List of full paths to image files, empty if the directory
        cannot be read.
    """
    try:
        names = os.listdir(dirpath)
    except OSError as e:
        log(f"[SCAN] Cannot read directory {dirpath!r}: {e}")
        return []

    result = []
    for name in sorted(names, key=natural_sort_key):
        path = os.path.join(dirpath, name)
        if os.path.isfile(path) and is_supported_image(name):
            result.append(path)
    return result


def probe_image_dimensions(filepath: str) -> Dimensions:
    """Read image dimensions from the file header without decoding pixels.

    Args:
        filepath: Path to image file.

    Returns:
        Tuple of (width, height), or (0, 0) if the file cannot be identified.
    """
    try:
        with Image.open(filepath) as img:
            w, h = img.size
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        log(f"[PROBE] Cannot read {filepath!r}: {e}")
        return NO_DIMENSIONS
    return (int(w), int(h))
