"""Public pagination helpers for poster output."""

from __future__ import annotations

from .layout.layout_capacity import page_capacity, title_block_height
from .layout.layout_lines import estimate_visual_lines
from .layout.layout_pagination import (
    PageBuilder,
    paginate,
    paginate_paragraphs,
    paginate_text,
    paragraph_height,
)
from .layout.layout_settings import CanvasSettings, chars_per_line
from .layout.layout_split import advance_marker_split, resolve_safe_split

__all__ = [
    "CanvasSettings",
    "PageBuilder",
    "advance_marker_split",
    "chars_per_line",
    "estimate_visual_lines",
    "page_capacity",
    "paginate",
    "paginate_paragraphs",
    "paginate_text",
    "paragraph_height",
    "resolve_safe_split",
    "title_block_height",
]
