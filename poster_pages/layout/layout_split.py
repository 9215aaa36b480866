"""Marker-safe split points for paragraphs that overflow a page."""

from __future__ import annotations

from typing import Dict, List

from ..markers import TOKEN_WIDTH, find_tokens, is_marker_open, is_symmetric, opener_of
from .layout_constants import PUNCTUATION_FLOOR, SPLIT_PUNCTUATION


def resolve_safe_split(paragraph: str, raw_offset: int) -> int:
    """Return a split offset near ``raw_offset`` that keeps markers closed.

    The offset prefers a position just past a sentence terminator, then
    moves backward until no marker is left open in ``paragraph[:offset]``.

    Args:
        paragraph: Paragraph text.
        raw_offset: Candidate character offset.
    Returns:
        Offset in ``[0, len(paragraph)]`` that never falls inside a token.

    Example:
        >>> text = "**重点**这是一段很长的句子。后面还有内容。"
        >>> resolve_safe_split(text, 4)
        0
    """

    raw_offset = max(0, raw_offset)
    cut = min(len(paragraph), punctuation_split(paragraph, raw_offset))
    return repair_marker_split(paragraph, cut)


def punctuation_split(paragraph: str, raw_offset: int) -> int:
    """Return the offset just past the latest terminator at or before ``raw_offset``.

    Terminators at or before 40% of ``raw_offset`` are ignored; when none
    qualify the raw offset is returned unchanged, even mid-word.

    Example:
        >>> punctuation_split("abcdef. gh", 8)
        7
        >>> punctuation_split("a. bcdefghij", 8)
        8
    """

    best = -1
    for mark in SPLIT_PUNCTUATION:
        idx = paragraph.rfind(mark, 0, raw_offset + 1)
        if idx > raw_offset * PUNCTUATION_FLOOR:
            best = max(best, idx)
    return best + 1 if best != -1 else raw_offset


def repair_marker_split(paragraph: str, cut: int) -> int:
    """Move ``cut`` backward until it is outside every token and span.

    Args:
        paragraph: Paragraph text.
        cut: Candidate offset in ``[0, len(paragraph)]``.
    Returns:
        Adjusted offset, never greater than ``cut``.
    """

    while True:
        blocker = _earliest_blocker(paragraph, cut)
        if blocker is None:
            return cut
        cut = blocker


def advance_marker_split(paragraph: str, raw_offset: int) -> int:
    """Return the first offset at or past ``raw_offset`` with no span open.

    Used when moving backward would leave nothing before the cut. The cut
    lands just past the closing token of the blocking span; a span that is
    never closed yields ``len(paragraph)``.

    Example:
        >>> advance_marker_split("**abc**def", 3)
        7
        >>> advance_marker_split("**abc", 3)
        5
    """

    cut = min(len(paragraph), punctuation_split(paragraph, max(0, raw_offset)))
    if repair_marker_split(paragraph, cut) == cut:
        return cut
    open_at: Dict[str, List[int]] = {}
    for pos, token in find_tokens(paragraph):
        _track(open_at, pos, token)
        end = pos + TOKEN_WIDTH
        if end >= cut and not any(open_at.values()):
            return end
    return len(paragraph)


def _earliest_blocker(paragraph: str, cut: int) -> int | None:
    """Return the start of a token straddling ``cut`` or of the earliest open span."""

    open_at: Dict[str, List[int]] = {}
    for pos, token in find_tokens(paragraph):
        if pos >= cut:
            break
        if pos + TOKEN_WIDTH > cut:
            return pos
        _track(open_at, pos, token)
    starts = [stack[0] for stack in open_at.values() if stack]
    return min(starts) if starts else None


def _track(open_at: Dict[str, List[int]], pos: int, token: str) -> None:
    if is_symmetric(token):
        if open_at.get(token):
            open_at[token].pop()
        else:
            open_at[token] = [pos]
    elif is_marker_open(token):
        open_at.setdefault(token, []).append(pos)
    else:
        stack = open_at.get(opener_of(token) or "")
        if stack:
            stack.pop()
