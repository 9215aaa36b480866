"""
Stock layout presets and helpers to apply or capture them.
"""

from __future__ import annotations

from dataclasses import asdict, replace
from typing import List, Sequence

from .models import LayoutPreset, StyleMetrics


# Fields a preset never carries; they belong to the document, not the layout.
_DOCUMENT_FIELDS = frozenset({"title", "author"})

# (id, name, category, theme, text, font, title font, metadata font,
#  line height, paragraph gap, font family)
_STOCK = (
    ("xhs-1", "多巴胺粉", "小红书", "#fff0f3", "#ff4d6d", 22, 54, 14, 1.8, 1.6, "kuaile"),
    ("xhs-2", "莫兰迪绿", "小红书", "#f1f3f0", "#4a5d4e", 21, 50, 14, 1.7, 1.5, "serif"),
    ("xhs-3", "极简白", "小红书", "#ffffff", "#1a1a1a", 22, 52, 14, 1.8, 1.6, "serif"),
    ("xhs-4", "高级灰", "小红书", "#f8f9fa", "#343a40", 21, 48, 14, 1.7, 1.5, "sans"),
    ("default-1", "经典社论", "专业", "#fdfaf1", "#1a1a1a", 22, 48, 15, 1.8, 1.5, "serif"),
    ("default-2", "现代极简", "专业", "#ffffff", "#121212", 20, 42, 15, 1.6, 1.2, "sans"),
    ("default-3", "暗夜深思", "专业", "#121212", "#f5f5f7", 24, 52, 15, 1.9, 1.8, "serif"),
    ("default-4", "格调灰阶", "专业", "#f1f3f5", "#495057", 21, 44, 15, 1.7, 1.4, "sans"),
    ("default-5", "奶油草莓", "可爱", "#fff5f7", "#d81b60", 24, 50, 15, 1.7, 1.4, "kuaile"),
    ("default-6", "萌动黄油", "可爱", "#fffde7", "#f57f17", 23, 48, 15, 1.6, 1.3, "huangyou"),
    ("default-cute-3", "蜜桃甜心", "可爱", "#fce4ec", "#880e4f", 22, 46, 15, 1.8, 1.5, "kuaile"),
    ("default-cute-4", "薄荷苏打", "可爱", "#e0f2f1", "#00695c", 22, 46, 15, 1.8, 1.5, "sans"),
    ("default-7", "午后慵懒", "轻松", "#faf9f6", "#5d4037", 22, 46, 15, 1.9, 1.6, "serif"),
    ("default-8", "海风轻抚", "轻松", "#e1f5fe", "#01579b", 21, 44, 15, 1.7, 1.4, "sans"),
    ("default-relaxed-3", "晨间咖啡", "轻松", "#fdfbf7", "#4e342e", 22, 46, 15, 1.8, 1.5, "serif"),
    ("default-relaxed-4", "暮色森林", "轻松", "#f1f8e9", "#33691e", 22, 46, 15, 1.8, 1.5, "sans"),
    ("default-retro-1", "羊皮纸卷", "复古", "#f5e6d3", "#5d4037", 22, 48, 15, 1.8, 1.5, "serif"),
    ("default-retro-2", "胶片时代", "复古", "#263238", "#cfd8dc", 21, 44, 15, 1.7, 1.4, "maocao"),
    ("default-retro-3", "报纸头条", "复古", "#eeeeee", "#212121", 20, 52, 15, 1.6, 1.2, "serif"),
    ("default-retro-4", "黄金年代", "复古", "#3e2723", "#d4af37", 22, 48, 15, 1.8, 1.5, "zhimang"),
    ("default-art-1", "水墨丹青", "艺术", "#ffffff", "#000000", 24, 56, 15, 2.0, 2.0, "mashan"),
    ("default-art-2", "极光幻境", "艺术", "#1a237e", "#80deea", 21, 46, 15, 1.7, 1.4, "sans"),
    ("default-art-3", "霓虹都市", "艺术", "#000000", "#ff00ff", 20, 48, 15, 1.6, 1.2, "huangyou"),
    ("default-art-4", "极简留白", "艺术", "#fafafa", "#9e9e9e", 18, 36, 15, 2.2, 1.8, "sans"),
)


def _stock_preset(row: tuple) -> LayoutPreset:
    (pid, name, category, theme, text, font, title_font, meta_font, leading, gap, family) = row
    return LayoutPreset(
        id=pid,
        name=name,
        category=category,
        settings={
            "theme_color": theme,
            "text_color": text,
            "font_size": font,
            "title_font_size": title_font,
            "metadata_font_size": meta_font,
            "line_height": leading,
            "paragraph_gap": gap,
            "use_indentation": True,
            "aspect_ratio": "3:4",
            "custom_width": 3,
            "custom_height": 4,
            "font_family": family,
        },
    )


DEFAULT_PRESETS: tuple[LayoutPreset, ...] = tuple(_stock_preset(row) for row in _STOCK)


def find_preset(
    preset_id: str, presets: Sequence[LayoutPreset] = DEFAULT_PRESETS
) -> LayoutPreset:
    """Return the preset with ``preset_id``.

    Raises:
        KeyError: No preset has that id.

    Example:
        >>> find_preset("xhs-3").name
        '极简白'
    """

    for preset in presets:
        if preset.id == preset_id:
            return preset
    raise KeyError(f"Unknown preset: {preset_id}")


def apply_preset(style: StyleMetrics, preset: LayoutPreset) -> StyleMetrics:
    """Return ``style`` with the preset's layout fields applied.

    Title and author are kept from ``style``.
    """

    overrides = {
        key: value
        for key, value in preset.settings.items()
        if key not in _DOCUMENT_FIELDS
    }
    return replace(style, **overrides)


def preset_from_style(style: StyleMetrics, *, preset_id: str, name: str) -> LayoutPreset:
    """Capture the layout fields of ``style`` as a new preset."""

    settings = {
        key: value for key, value in asdict(style).items() if key not in _DOCUMENT_FIELDS
    }
    return LayoutPreset(id=preset_id, name=name, settings=settings)


def categories(presets: Sequence[LayoutPreset] = DEFAULT_PRESETS) -> List[str]:
    """Return preset categories in first-seen order."""

    seen: List[str] = []
    for preset in presets:
        if preset.category and preset.category not in seen:
            seen.append(preset.category)
    return seen
