"""
Content metrics: renderable length and reading time.
"""

from __future__ import annotations

import math
import re

from .markers import strip_markers


READING_SPEED = 400  # characters per minute
_WHITESPACE = re.compile(r"\s+")


def normalize_content(value: str) -> str:
    """Convert Windows line endings to ``\\n``.

    Example:
        >>> normalize_content("a\\r\\nb")
        'a\\nb'
    """

    return value.replace("\r\n", "\n")


def count_content_length(text: str) -> int:
    """Count renderable characters, ignoring markers and whitespace.

    Example:
        >>> count_content_length("**重点** 内容")
        4
    """

    if not text:
        return 0
    return len(_WHITESPACE.sub("", strip_markers(text)))


def estimate_reading_time(length: int) -> int:
    """Return reading time in whole minutes; 0 means under a minute.

    Example:
        >>> estimate_reading_time(3600)
        9
    """

    return max(0, math.ceil(length / READING_SPEED))


def format_reading_label(length: int, minutes: int) -> str:
    """Return the metadata row shown on the first page."""

    return f"{length} WORDS / {minutes} MIN"
