import pytest

from poster_pages.models import StyleMetrics
from poster_pages.pagination import (
    CanvasSettings,
    chars_per_line,
    estimate_visual_lines,
    page_capacity,
    title_block_height,
)


def _settings(**kwargs) -> CanvasSettings:
    return CanvasSettings.from_style(StyleMetrics(**kwargs))


def test_empty_paragraph_is_one_line():
    assert estimate_visual_lines("", 31) == 1


def test_short_paragraph_is_inflated_to_two_lines():
    assert estimate_visual_lines("abc", 31) == 2


def test_markers_take_no_width():
    assert estimate_visual_lines("**ab**", 1) == estimate_visual_lines("ab", 1) == 3


def test_zero_chars_per_line_is_clamped():
    assert estimate_visual_lines("abc", 0) == 4


def test_chars_per_line_defaults_and_clamp():
    assert _settings().chars_per_line() == 31
    assert chars_per_line(width=820.0, font_size=10_000) == 1


def test_usable_dimensions():
    settings = _settings(aspect_ratio="9:16")
    assert settings.usable_width == pytest.approx(820.0)
    assert settings.base_height == pytest.approx(1000 / 9 * 16)
    assert settings.usable_height == pytest.approx(1000 / 9 * 16 * 0.76)


def test_custom_ratio_matches_named_ratio():
    named = _settings(aspect_ratio="3:4", title="标题")
    custom = _settings(aspect_ratio="custom", custom_width=3, custom_height=4, title="标题")
    for first in (True, False):
        assert page_capacity(settings=named, is_first_page=first) == page_capacity(
            settings=custom, is_first_page=first
        )


def test_non_first_page_uses_full_usable_height():
    settings = _settings()
    assert page_capacity(settings=settings, is_first_page=False) == pytest.approx(
        1000 / 3 * 4 * 0.76
    )


def test_first_page_reserves_title_block():
    settings = _settings(title="优质小红书审美排版指南")
    assert title_block_height(settings=settings) == pytest.approx(52 * 1.4 + 240)
    assert page_capacity(settings=settings, is_first_page=True) == pytest.approx(
        1000 / 3 * 4 * 0.76 - (52 * 1.4 + 240)
    )


def test_untitled_first_page_still_reserves_chrome():
    settings = _settings(title="")
    assert page_capacity(settings=settings, is_first_page=True) == pytest.approx(
        1000 / 3 * 4 * 0.76 - 240
    )


def test_long_title_keeps_a_fifth_of_the_page():
    settings = _settings(title="长" * 500)
    usable = settings.usable_height
    assert page_capacity(settings=settings, is_first_page=True) == pytest.approx(usable * 0.2)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"font_size": 0},
        {"line_height": -1},
        {"title_font_size": 0},
        {"paragraph_gap": -0.5},
        {"aspect_ratio": "4x3"},
        {"aspect_ratio": "a:b"},
        {"aspect_ratio": "custom", "custom_width": 0},
    ],
)
def test_invalid_style_is_rejected(kwargs):
    with pytest.raises(ValueError):
        StyleMetrics(**kwargs)
