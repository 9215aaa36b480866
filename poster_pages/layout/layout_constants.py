"""Shared constants for poster page layout estimation.

Glyph width, line inflation, title chrome and descender buffer are empirical
and worth recalibrating against a real shaping engine.
"""

from __future__ import annotations

import os

CANVAS_WIDTH = 1000.0
USABLE_WIDTH_RATIO = 0.82
USABLE_HEIGHT_RATIO = 0.76
GLYPH_WIDTH_RATIO = 1.2
LINE_INFLATION = 1.05
TITLE_LEADING = 1.4
TITLE_CHROME = 240.0
FIRST_PAGE_FLOOR = 0.2
DESCENDER_BUFFER = 0.3
SPLIT_SAFETY_LINES = 2
MIN_SPLIT_LINES = 2
PUNCTUATION_FLOOR = 0.4
SPLIT_PUNCTUATION = ("。", "！", "？", "；", "”", "』", "》", ".", "!", "?", ";")
DEBUG_PAGINATION = os.getenv("DEBUG_PAGINATION", "0") not in {
    "",
    "0",
    "false",
    "False",
}
