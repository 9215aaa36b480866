"""
Naming and failure handling for exported poster pages.
"""

from __future__ import annotations

import re
from datetime import date
from typing import List, Sequence

from .models import Page


RETRY_MESSAGE = "Page export failed; regenerate the pages and retry."
_SLUG_UNSAFE = re.compile(r"[^一-龥a-zA-Z0-9]")
_SLUG_LENGTH = 10


class ExportError(RuntimeError):
    """A recoverable failure while writing exported pages.

    Pagination is stateless, so callers may simply paginate again and retry.
    """

    def __init__(self, message: str = RETRY_MESSAGE, *, page_index: int | None = None):
        super().__init__(message)
        self.page_index = page_index


def format_export_date(day: date) -> str:
    """Return ``day`` as ``YYYYMMDD``.

    Example:
        >>> format_export_date(date(2024, 3, 7))
        '20240307'
    """

    return day.strftime("%Y%m%d")


def slugify(title: str) -> str:
    """Return a filename-safe slug from the first characters of ``title``.

    Example:
        >>> slugify("排版指南: v2!")
        '排版指南__v2_'
        >>> slugify("")
        'poster'
    """

    if not title:
        return "poster"
    return _SLUG_UNSAFE.sub("_", title[:_SLUG_LENGTH])


def export_filename(title: str, index: int, day: date) -> str:
    """Return the download filename for page ``index`` (zero based).

    Example:
        >>> export_filename("Guide", 0, date(2024, 3, 7))
        '20240307_Guide_P1.png'
    """

    return f"{format_export_date(day)}_{slugify(title)}_P{index + 1}.png"


def export_order(pages: Sequence[Page]) -> List[int]:
    """Return page indices in export order, last page first."""

    return [page.index for page in reversed(pages)]
