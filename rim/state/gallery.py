"""Gallery state - ordered, cyclic list of image paths with a cursor."""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import List, Optional

from ..image_utils import is_supported_image, list_images
from ..logging import log


def _same_path(a: str, b: str) -> bool:
    return os.path.normpath(a) == os.path.normpath(b)


@dataclass
class Gallery:
    """Image paths of one directory plus the index of the current one.

    Membership is fixed once built; only the cursor moves.
    """
    images: List[str] = field(default_factory=list)
    index: int = 0

    def __post_init__(self) -> None:
        if not self.images:
            self.index = 0
        else:
            self.index = max(0, min(self.index, len(self.images) - 1))

    @classmethod
    def from_path(cls, path: "str | os.PathLike[str]") -> Gallery:
        """Build a gallery for a file or directory path.

        A directory is scanned directly. For anything else the parent
        directory is scanned; a bare file name scans ".", and an empty
        path scans the current working directory. An existing file the
        scan skipped (unknown extension) is appended so it can still be
        shown. The cursor starts on ``path`` when present, else at 0.
        """
        path = os.fspath(path)

        if os.path.isdir(path):
            directory = path
        elif not path:
            directory = os.getcwd()
        else:
            directory = os.path.dirname(path)
            if not directory:
                directory = "."
                if not os.path.isabs(path):
                    path = os.path.join(directory, path)

        images = list_images(directory)
        if os.path.isfile(path) and not is_supported_image(path):
            if not any(_same_path(p, path) for p in images):
                images.append(path)

        index = 0
        for i, p in enumerate(images):
            if _same_path(p, path):
                index = i
                break

        log(f"[GALLERY] {directory!r}: {len(images)} images, start at {index}")
        return cls(images=images, index=index)

    def next(self) -> Optional[str]:
        """Advance the cursor, wrapping from last to first."""
        if not self.images:
            return None
        if self.index == len(self.images) - 1:
            self.index = 0
        else:
            self.index += 1
        return self.get()

    def prev(self) -> Optional[str]:
        """Move the cursor back, wrapping from first to last."""
        if not self.images:
            return None
        if self.index == 0:
            self.index = len(self.images) - 1
        else:
            self.index -= 1
        return self.get()

    def move_to(self, path: str) -> Optional[str]:
        """Move the cursor to ``path`` if it is a member."""
        for i, p in enumerate(self.images):
            if _same_path(p, path):
                self.index = i
                return p
        return None

    def get(self) -> Optional[str]:
        """Current image path or None."""
        if 0 <= self.index < len(self.images):
            return self.images[self.index]
        return None

    def position(self) -> int:
        return self.index

    def size(self) -> int:
        return len(self.images)

    @property
    def is_navigable(self) -> bool:
        """A gallery needs two or more images for next/prev to do anything."""
        return len(self.images) > 1
