from datetime import date

import pytest

from poster_pages.export import (
    RETRY_MESSAGE,
    ExportError,
    export_filename,
    export_order,
    format_export_date,
    slugify,
)
from poster_pages.models import StyleMetrics
from poster_pages.pagination import paginate
from poster_pages.presets import (
    DEFAULT_PRESETS,
    apply_preset,
    categories,
    find_preset,
    preset_from_style,
)


def test_stock_presets_are_unique_and_valid():
    ids = [preset.id for preset in DEFAULT_PRESETS]
    assert len(ids) == len(set(ids)) == 24
    for preset in DEFAULT_PRESETS:
        apply_preset(StyleMetrics(), preset)


def test_categories_keep_catalogue_order():
    assert categories() == ["小红书", "专业", "可爱", "轻松", "复古", "艺术"]


def test_apply_preset_keeps_document_fields():
    style = StyleMetrics(title="标题", author="作者", font_size=30)
    styled = apply_preset(style, find_preset("default-art-4"))
    assert styled.title == "标题"
    assert styled.author == "作者"
    assert styled.font_size == 18
    assert styled.line_height == 2.2
    assert styled.font_family == "sans"


def test_find_preset_unknown_id():
    with pytest.raises(KeyError):
        find_preset("missing")


def test_preset_from_style_round_trips_layout():
    source = StyleMetrics(title="原文", font_size=26, aspect_ratio="9:16")
    preset = preset_from_style(source, preset_id="mine", name="我的")
    assert "title" not in preset.settings
    assert "author" not in preset.settings
    target = apply_preset(StyleMetrics(title="新文"), preset)
    assert target.font_size == 26
    assert target.aspect_ratio == "9:16"
    assert target.title == "新文"


def test_export_naming():
    assert format_export_date(date(2024, 1, 5)) == "20240105"
    assert slugify("") == "poster"
    assert slugify("优质小红书审美排版指南多余") == "优质小红书审美排版指"
    assert export_filename("A b", 2, date(2024, 1, 5)) == "20240105_A_b_P3.png"


def test_export_order_is_last_page_first():
    result = paginate("\n".join(f"段落{i}。" for i in range(20)), StyleMetrics())
    assert export_order(result.pages) == [2, 1, 0]


def test_export_error_is_recoverable_message():
    error = ExportError(page_index=1)
    assert str(error) == RETRY_MESSAGE
    assert error.page_index == 1
