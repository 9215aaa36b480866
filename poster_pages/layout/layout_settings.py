"""Canvas geometry derived from style metrics."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..models import StyleMetrics
from .layout_constants import (
    CANVAS_WIDTH,
    GLYPH_WIDTH_RATIO,
    USABLE_HEIGHT_RATIO,
    USABLE_WIDTH_RATIO,
)


@dataclass(frozen=True, slots=True)
class CanvasSettings:
    """Geometry used during layout, in normalized canvas units.

    Example:
        >>> settings = CanvasSettings.from_style(StyleMetrics())
        >>> settings.usable_width
        820.0
    """

    font_size: float
    title_font_size: float
    line_height: float
    paragraph_gap: float
    ratio_width: float
    ratio_height: float
    title: str = ""
    canvas_width: float = CANVAS_WIDTH

    @classmethod
    def from_style(cls, style: StyleMetrics) -> "CanvasSettings":
        """Return settings for a style.

        Args:
            style: Caller-supplied style metrics.
        Returns:
            CanvasSettings instance.
        """

        width, height = style.ratio()
        return cls(
            font_size=style.font_size,
            title_font_size=style.title_font_size,
            line_height=style.line_height,
            paragraph_gap=style.paragraph_gap,
            ratio_width=width,
            ratio_height=height,
            title=style.title,
        )

    @property
    def usable_width(self) -> float:
        """Return the width available for text inside the poster padding."""

        return self.canvas_width * USABLE_WIDTH_RATIO

    @property
    def base_height(self) -> float:
        """Return the canvas height for the configured aspect ratio."""

        return self.canvas_width / self.ratio_width * self.ratio_height

    @property
    def usable_height(self) -> float:
        """Return the height available for content on a page without a title."""

        return self.base_height * USABLE_HEIGHT_RATIO

    @property
    def line_height_px(self) -> float:
        return self.font_size * self.line_height

    @property
    def paragraph_gap_px(self) -> float:
        return self.font_size * self.paragraph_gap

    def chars_per_line(self) -> int:
        """Return the estimated body characters per line, at least 1."""

        return chars_per_line(width=self.usable_width, font_size=self.font_size)

    def title_chars_per_line(self) -> int:
        """Return the estimated title characters per line, at least 1."""

        return chars_per_line(width=self.usable_width, font_size=self.title_font_size)


def chars_per_line(*, width: float, font_size: float) -> int:
    """Estimate how many glyphs of ``font_size`` fit across ``width``.

    Example:
        >>> chars_per_line(width=820.0, font_size=22)
        31
    """

    if font_size <= 0:
        return 1
    return max(1, math.floor(width / (font_size * GLYPH_WIDTH_RATIO)))
