"""Per-page vertical budget."""

from __future__ import annotations

import math

from .layout_constants import FIRST_PAGE_FLOOR, TITLE_CHROME, TITLE_LEADING
from .layout_settings import CanvasSettings


def title_block_height(*, settings: CanvasSettings) -> float:
    """Estimate the height of the title plus the metadata row.

    Args:
        settings: Canvas settings.
    Returns:
        Height in canvas units.
    """

    title_lines = math.ceil(len(settings.title) / max(1, settings.title_chars_per_line()))
    return settings.title_font_size * TITLE_LEADING * title_lines + TITLE_CHROME


def page_capacity(*, settings: CanvasSettings, is_first_page: bool) -> float:
    """Return the usable body height for a page.

    The first page loses the title block but always keeps a fifth of the
    usable height for body text.

    Example:
        >>> from poster_pages.models import StyleMetrics
        >>> settings = CanvasSettings.from_style(StyleMetrics())
        >>> round(page_capacity(settings=settings, is_first_page=False), 2)
        1013.33
    """

    usable = settings.usable_height
    if not is_first_page:
        return usable
    return max(usable * FIRST_PAGE_FLOOR, usable - title_block_height(settings=settings))
