"""Greedy pagination of paragraphs into poster pages."""

from __future__ import annotations

import math
import sys
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, List

from ..models import Page, PaginationResult, StyleMetrics
from ..text import count_content_length, estimate_reading_time, normalize_content
from .layout_capacity import page_capacity
from .layout_constants import (
    DEBUG_PAGINATION,
    DESCENDER_BUFFER,
    MIN_SPLIT_LINES,
    SPLIT_SAFETY_LINES,
)
from .layout_lines import estimate_visual_lines
from .layout_settings import CanvasSettings
from .layout_split import advance_marker_split, resolve_safe_split


@dataclass(slots=True)
class PageBuilder:
    """Paragraphs accumulated for the page being filled."""

    paragraphs: List[str] = field(default_factory=list)
    height: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.paragraphs

    def add(self, *, paragraph: str, height: float) -> None:
        self.paragraphs.append(paragraph)
        self.height += height


@dataclass(slots=True)
class _PaginationState:
    """Mutable state for one pagination run."""

    queue: Deque[str]
    builder: PageBuilder = field(default_factory=PageBuilder)
    pages: List[List[str]] = field(default_factory=list)
    is_first: bool = True

    @property
    def done(self) -> bool:
        return not self.queue and self.builder.is_empty

    def close_page(self) -> None:
        """Emit the builder when it holds content and start a non-first page."""

        if not self.builder.is_empty:
            _debug(
                msg=(
                    f"page {len(self.pages) + 1}: {len(self.builder.paragraphs)} "
                    f"paragraph(s), height {self.builder.height:.1f}"
                )
            )
            self.pages.append(self.builder.paragraphs)
        self.builder = PageBuilder()
        self.is_first = False


def _debug(*, msg: str) -> None:
    """Log pagination debug output when enabled.

    Args:
        msg: Message to print.
    Returns:
        None.
    """

    if DEBUG_PAGINATION:
        print(msg, file=sys.stderr)


def paragraph_height(
    *, paragraph: str, settings: CanvasSettings, after_content: bool
) -> float:
    """Return the effective height of a paragraph on a page.

    Args:
        paragraph: Paragraph text.
        settings: Canvas settings.
        after_content: Whether the page already holds a paragraph, which
            adds the paragraph gap.
    Returns:
        Height in canvas units, including the descender buffer.
    """

    lines = estimate_visual_lines(paragraph, settings.chars_per_line())
    gap = settings.paragraph_gap_px if after_content else 0.0
    return lines * settings.line_height_px + gap + settings.line_height_px * DESCENDER_BUFFER


def paginate_paragraphs(
    paragraphs: Iterable[str], *, settings: CanvasSettings
) -> List[List[str]]:
    """Pack paragraphs into pages, splitting the one that overflows.

    Args:
        paragraphs: Paragraphs in reading order.
        settings: Canvas settings.
    Returns:
        Paragraph lists, one per page, in reading order.
    """

    chars_per_line = settings.chars_per_line()
    line_px = settings.line_height_px
    state = _PaginationState(queue=deque(paragraphs))
    capacity = page_capacity(settings=settings, is_first_page=True)

    while not state.done:
        if not state.queue:
            state.close_page()
            continue
        builder = state.builder
        para = state.queue.popleft()
        if not para.strip() and builder.is_empty:
            continue

        height = paragraph_height(
            paragraph=para, settings=settings, after_content=not builder.is_empty
        )
        if builder.height + height <= capacity:
            builder.add(paragraph=para, height=height)
            continue

        gap = 0.0 if builder.is_empty else settings.paragraph_gap_px
        available = capacity - builder.height - gap
        possible_lines = math.floor(available / line_px) - SPLIT_SAFETY_LINES

        if possible_lines >= MIN_SPLIT_LINES:
            raw_offset = possible_lines * chars_per_line
            offset = resolve_safe_split(para, raw_offset)
            if not para[:offset].strip() and builder.is_empty and not state.is_first:
                offset = advance_marker_split(para, raw_offset)
                _debug(msg=f"span blocks split of {len(para)} chars; closing it at {offset}")
            head, tail = para[:offset], para[offset:]
            _debug(msg=f"split {len(para)} chars at {offset}")
            if head.strip():
                builder.add(
                    paragraph=head,
                    height=paragraph_height(
                        paragraph=head,
                        settings=settings,
                        after_content=not builder.is_empty,
                    ),
                )
            if tail.strip():
                state.queue.appendleft(tail)
        elif builder.is_empty and not state.is_first:
            _debug(msg=f"paragraph of {len(para)} chars exceeds an empty page")
            builder.add(paragraph=para, height=height)
        else:
            state.queue.appendleft(para)

        state.close_page()
        capacity = page_capacity(settings=settings, is_first_page=False)

    return state.pages


def paginate(content: str, style: StyleMetrics) -> PaginationResult:
    """Paginate marked-up text into poster pages.

    Args:
        content: Raw text; paragraphs are separated by newlines.
        style: Style metrics for the run.
    Returns:
        PaginationResult with shared length and reading time on every page.

    Example:
        >>> paginate("", StyleMetrics()).pages
        ()
    """

    text = normalize_content(content or "")
    length = count_content_length(text)
    minutes = estimate_reading_time(length)
    if not text.strip():
        return PaginationResult(pages=(), content_length=length, reading_time=minutes)

    settings = CanvasSettings.from_style(style)
    page_paragraphs = paginate_paragraphs(text.split("\n"), settings=settings)
    pages = tuple(
        Page(
            index=idx,
            is_first=idx == 0,
            paragraphs=tuple(paragraphs),
            content_length=length,
            reading_time=minutes,
            title=style.title if idx == 0 else None,
            author=style.author if idx == 0 else None,
        )
        for idx, paragraphs in enumerate(page_paragraphs)
    )
    return PaginationResult(pages=pages, content_length=length, reading_time=minutes)


def paginate_text(content: str, style: StyleMetrics) -> List[str]:
    """Return page strings with paragraphs joined by newlines."""

    return paginate(content, style).contents
