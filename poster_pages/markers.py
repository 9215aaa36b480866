"""
Inline marker lexicon shared by measuring, splitting, and span parsing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple


MARKER_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("**", "**"),
    ("==", "=="),
    ("!!", "!!"),
    ("~~", "~~"),
    ("__", "__"),
    ('""', '""'),
    ("``", "``"),
    ("%%", "%%"),
    ("##", "##"),
    ("((", "))"),
    ("[[", "]]"),
)

_CLOSE_FOR: Dict[str, str] = dict(MARKER_PAIRS)
_OPEN_FOR_CLOSE: Dict[str, str] = {
    close: open_ for open_, close in MARKER_PAIRS if close != open_
}

MARKER_TOKENS: Tuple[str, ...] = tuple(
    dict.fromkeys(token for pair in MARKER_PAIRS for token in pair)
)
TOKEN_WIDTH = 2

_TOKEN_RE = re.compile("|".join(re.escape(token) for token in MARKER_TOKENS))
_SPAN_RE = re.compile(
    "("
    + "|".join(
        f"{re.escape(open_)}.*?{re.escape(close)}" for open_, close in MARKER_PAIRS
    )
    + ")"
)


@dataclass(frozen=True, slots=True)
class Span:
    """A run of text with at most one inline style.

    Attributes:
        text: Content with the delimiters removed.
        marker: Opening token of the style, or None for plain text.
    """

    text: str
    marker: str | None = None

    @property
    def is_styled(self) -> bool:
        return self.marker is not None


def is_marker_open(token: str) -> bool:
    """Return True when ``token`` opens a marker span.

    Example:
        >>> is_marker_open("((")
        True
        >>> is_marker_open("))")
        False
    """

    return token in _CLOSE_FOR


def close_for(open_token: str) -> str:
    """Return the closing sequence for an opening token.

    Raises:
        KeyError: ``open_token`` is not part of the lexicon.

    Example:
        >>> close_for("[[")
        ']]'
    """

    return _CLOSE_FOR[open_token]


def is_symmetric(token: str) -> bool:
    """Return True when the token closes itself."""

    return _CLOSE_FOR.get(token) == token


def opener_of(close_token: str) -> str | None:
    """Return the opening token for an asymmetric closing token."""

    return _OPEN_FOR_CLOSE.get(close_token)


def find_tokens(text: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(position, token)`` for every marker token, left to right.

    Matches never overlap, so ``"***"`` yields a single ``**`` at 0.
    """

    for match in _TOKEN_RE.finditer(text):
        yield match.start(), match.group(0)


def strip_markers(text: str) -> str:
    """Remove every marker token occurrence from ``text``.

    Example:
        >>> strip_markers("**bold** and ((aside))")
        'bold and aside'
    """

    return _TOKEN_RE.sub("", text)


def split_spans(text: str) -> List[Span]:
    """Split a paragraph into plain and styled spans.

    Each styled span is the shortest ``open ... close`` run for one pair;
    unmatched tokens stay in the plain text around them.

    Example:
        >>> split_spans("a **b** c")
        [Span(text='a ', marker=None), Span(text='b', marker='**'), Span(text=' c', marker=None)]
    """

    spans: List[Span] = []
    for part in _SPAN_RE.split(text):
        if not part:
            continue
        marker = _styled_marker(part)
        if marker is None:
            spans.append(Span(text=part))
        else:
            spans.append(Span(text=part[TOKEN_WIDTH:-TOKEN_WIDTH], marker=marker))
    return spans


def _styled_marker(part: str) -> str | None:
    if len(part) < 2 * TOKEN_WIDTH:
        return None
    for open_, close in MARKER_PAIRS:
        if part.startswith(open_) and part.endswith(close):
            return open_
    return None
