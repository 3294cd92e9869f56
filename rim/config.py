"""Application configuration constants."""

from __future__ import annotations

APP_NAME = "Rim"

# Zoom
SCALE_DEFAULT = 1.0
SCALE_STEP = 1.2
SCALE_MAX = 0.00390625  # Most magnified scale (1/256)
SCALE_MIN = 32.0        # Most shrunk scale
ZOOM_FACTOR = 5         # Divisor used for anchor correction

# Window
DEFAULT_WINDOW_SIZE = (320, 240)
MIN_WINDOW_SIZE = (32, 32)
MAX_WINDOW_SIZE = (1280, 720)

# Supported image extensions
IMG_EXTS = frozenset({
    ".bmp", ".ico", ".jpg", ".jpeg", ".gif", ".png",
    ".tiff", ".webp", ".avif", ".pnm", ".dds", ".tga",
})
