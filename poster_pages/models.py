"""
Typed containers for poster styling and pagination output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple


NAMED_RATIOS = ("3:4", "9:16")
CUSTOM_RATIO = "custom"


@dataclass(frozen=True, slots=True)
class StyleMetrics:
    """Style inputs for one pagination run.

    Defaults mirror the stock poster: 22pt body on a 3:4 canvas.

    Attributes:
        font_size: Body font size in canvas units.
        title_font_size: Title font size in canvas units.
        line_height: Line height as a multiple of ``font_size``.
        paragraph_gap: Gap between paragraphs as a multiple of ``font_size``.
        aspect_ratio: ``"W:H"`` string or ``"custom"``.
        custom_width: Width term used when ``aspect_ratio == "custom"``.
        custom_height: Height term used when ``aspect_ratio == "custom"``.
        title: Title shown on the first page.
        use_indentation: Whether paragraphs are rendered with a first-line indent.

    Example:
        >>> StyleMetrics(aspect_ratio="custom", custom_width=9, custom_height=16).ratio()
        (9.0, 16.0)
    """

    font_size: float = 22
    title_font_size: float = 52
    line_height: float = 1.8
    paragraph_gap: float = 1.6
    aspect_ratio: str = "3:4"
    custom_width: float = 3
    custom_height: float = 4
    title: str = ""
    use_indentation: bool = True
    author: str | None = None
    metadata_font_size: float = 14
    theme_color: str = "#ffffff"
    text_color: str = "#1a1a1a"
    font_family: str = "serif"

    def __post_init__(self) -> None:
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")
        if self.title_font_size <= 0:
            raise ValueError(
                f"title_font_size must be positive, got {self.title_font_size}"
            )
        if self.line_height <= 0:
            raise ValueError(f"line_height must be positive, got {self.line_height}")
        if self.paragraph_gap < 0:
            raise ValueError(
                f"paragraph_gap must not be negative, got {self.paragraph_gap}"
            )
        self.ratio()

    def ratio(self) -> Tuple[float, float]:
        """Return the canvas ``(width, height)`` ratio terms.

        Raises:
            ValueError: The ratio string is malformed or non-positive.
        """

        if self.aspect_ratio == CUSTOM_RATIO:
            width, height = float(self.custom_width), float(self.custom_height)
        else:
            parts = self.aspect_ratio.split(":")
            if len(parts) != 2:
                raise ValueError(f"Unknown aspect ratio: {self.aspect_ratio!r}")
            try:
                width, height = float(parts[0]), float(parts[1])
            except ValueError as exc:
                raise ValueError(f"Unknown aspect ratio: {self.aspect_ratio!r}") from exc
        if width <= 0 or height <= 0:
            raise ValueError(
                f"Aspect ratio terms must be positive, got {width}:{height}"
            )
        return width, height


@dataclass(frozen=True, slots=True)
class Page:
    """One poster page of paragraph strings.

    ``title`` and ``author`` are only set on the first page.
    """

    index: int
    is_first: bool
    paragraphs: Tuple[str, ...]
    content_length: int
    reading_time: int
    title: str | None = None
    author: str | None = None

    @property
    def content(self) -> str:
        """Return the page text with paragraphs joined by newlines."""
        return "\n".join(self.paragraphs)


@dataclass(frozen=True, slots=True)
class PaginationResult:
    """Ordered pages plus metrics computed once from the full text."""

    pages: Tuple[Page, ...]
    content_length: int
    reading_time: int

    def __len__(self) -> int:
        return len(self.pages)

    def __iter__(self) -> Iterator[Page]:
        return iter(self.pages)

    @property
    def contents(self) -> List[str]:
        return [page.content for page in self.pages]


@dataclass(frozen=True, slots=True)
class LayoutPreset:
    """Named bundle of layout settings, without title, content or author.

    Attributes:
        id: Stable identifier.
        name: Display name.
        category: Optional grouping label.
        settings: ``StyleMetrics`` field overrides.
    """

    id: str
    name: str
    category: str | None = None
    settings: dict = field(default_factory=dict)
