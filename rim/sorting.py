"""Natural sort helpers.

Orders file names so that embedded numbers compare by value:
``a2.png`` comes before ``a10.png``.
"""

from __future__ import annotations
import re
import unicodedata
from typing import List, Tuple

_RUN_PATTERN = re.compile(r'(\d+)|([^\W\d_]+)')

# Digit runs sort before letter runs
_DIGIT = 0
_ALPHA = 1


def natural_sort_key(text: str) -> Tuple[List[Tuple[int, int, str]], str]:
    """Build a natural sort key for a string.

    Only alphanumeric characters take part in the comparison. Digit runs
    compare by numeric value, letter runs case-insensitively with accents
    folded (``é`` compares as ``e``). The original string is kept as a
    final tiebreak so the ordering is total.

    Args:
        text: String to build a key for.

    Returns:
        A tuple usable as ``sorted(key=...)`` key.
    """
    if text is None:
        text = ""
    text = str(text)
    folded = "".join(
        c for c in unicodedata.normalize("NFKD", text) if not unicodedata.combining(c)
    )

    parts: List[Tuple[int, int, str]] = []
    for digits, letters in _RUN_PATTERN.findall(folded):
        if digits:
            parts.append((_DIGIT, int(digits), digits))
        else:
            parts.append((_ALPHA, 0, letters.lower()))
    return parts, text


def natural_sorted(items) -> List[str]:
    """Return items sorted in natural order."""
    return sorted(items, key=natural_sort_key)
