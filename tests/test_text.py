import pytest

from poster_pages.text import (
    count_content_length,
    estimate_reading_time,
    format_reading_label,
    normalize_content,
)


def test_content_length_ignores_markers_and_whitespace():
    assert count_content_length("**重点**  这是\n内容") == 6
    assert count_content_length("") == 0
    assert count_content_length(" \n\t ") == 0


def test_multibyte_characters_count_once():
    assert count_content_length("优质小红书") == 5


@pytest.mark.parametrize(
    "length,minutes",
    [(0, 0), (1, 1), (400, 1), (401, 2), (3600, 9)],
)
def test_reading_time(length, minutes):
    assert estimate_reading_time(length) == minutes


def test_reading_time_is_monotonic():
    values = [estimate_reading_time(n) for n in range(0, 2000, 7)]
    assert values == sorted(values)


def test_normalize_content():
    assert normalize_content("a\r\nb\nc") == "a\nb\nc"


def test_reading_label():
    assert format_reading_label(3600, 9) == "3600 WORDS / 9 MIN"
