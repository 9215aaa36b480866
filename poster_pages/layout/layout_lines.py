"""Visual line estimation without a shaping pass."""

from __future__ import annotations

import math

from ..markers import strip_markers
from .layout_constants import LINE_INFLATION


def estimate_visual_lines(paragraph: str, chars_per_line: int) -> int:
    """Estimate how many rendered lines a paragraph occupies.

    Markers take no width. An empty paragraph still occupies one line so
    blank spacer lines keep their height.

    Args:
        paragraph: Paragraph text, possibly containing markers.
        chars_per_line: Character budget per line; clamped to at least 1.
    Returns:
        Line count, at least 1.

    Example:
        >>> estimate_visual_lines("", 30)
        1
        >>> estimate_visual_lines("x" * 100, 30)
        5
    """

    if not paragraph:
        return 1
    clean = strip_markers(paragraph)
    raw_lines = math.ceil(len(clean) / max(1, chars_per_line))
    return max(1, math.ceil(raw_lines * LINE_INFLATION))
