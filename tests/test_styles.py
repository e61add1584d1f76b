"""Tests table de styles — buckets sémantiques → CSS, recherche inverse, alignements par défaut."""
import pytest

from email_builder.blocks import BlockStyles, SizeOption
from email_builder.core.styles import (
    SIZE_MAPPINGS, to_css, css_declarations, default_alignment, size_option_for,
)


# ── Table SIZE_MAPPINGS ──────────────────────────────────────────────────────

def test_every_property_covers_every_bucket():
    for prop, mapping in SIZE_MAPPINGS.items():
        assert set(mapping) == set(SizeOption), prop


@pytest.mark.parametrize("field,option,expected", [
    ("padding",       SizeOption.SMALL,       "10px"),
    ("padding",       SizeOption.EXTRA_LARGE, "40px"),
    ("margin",        SizeOption.MEDIUM,      "10px"),
    ("font_size",     SizeOption.LARGE,       "20px"),
    ("line_height",   SizeOption.MEDIUM,      "1.4"),
    ("border_width",  SizeOption.SMALL,       "1px"),
    ("border_radius", SizeOption.EXTRA_LARGE, "16px"),
    ("width",         SizeOption.LARGE,       "600px"),
    ("height",        SizeOption.MEDIUM,      "200px"),
])
def test_size_mapping_values(field, option, expected):
    assert SIZE_MAPPINGS[field][option] == expected


# ── to_css ───────────────────────────────────────────────────────────────────

def test_to_css_padding_and_alignment():
    css = to_css(BlockStyles(padding="medium", text_align="center"))
    assert css == {"padding": "20px", "text-align": "center"}
    assert css_declarations(css) == "padding: 20px; text-align: center"


def test_to_css_accepts_camel_case_dict():
    css = to_css({"fontSize": "large", "textColor": "#111111", "backgroundColor": "#fafafa"})
    assert css == {"font-size": "20px", "color": "#111111", "background-color": "#fafafa"}


def test_to_css_width_passthrough_values():
    assert to_css({"width": "100%", "height": "auto"}) == {"width": "100%", "height": "auto"}
    assert to_css({"width": "small"}) == {"width": "200px"}


def test_to_css_empty_and_none():
    assert to_css(None) == {}
    assert to_css({}) == {}
    assert css_declarations({}) == ""


def test_unknown_bucket_value_is_dropped():
    styles = BlockStyles.model_validate({"padding": "huge", "fontSize": "small", "textAlign": "justify"})
    assert styles.padding is None
    assert styles.text_align is None
    assert styles.font_size == SizeOption.SMALL
    assert to_css(styles) == {"font-size": "12px"}


# ── Alignement par défaut ────────────────────────────────────────────────────

@pytest.mark.parametrize("block_type", ["header", "hero", "footer", "features"])
def test_default_alignment_centered(block_type):
    assert default_alignment(block_type) == "center"


@pytest.mark.parametrize("block_type", ["text", "image", "button", "divider"])
def test_default_alignment_left(block_type):
    assert default_alignment(block_type) == "left"


# ── Recherche inverse ────────────────────────────────────────────────────────

def test_size_option_for_known_value():
    assert size_option_for("font_size", "16px") == SizeOption.MEDIUM
    assert size_option_for("padding", " 30px ") == SizeOption.LARGE


def test_size_option_for_unknown_value():
    assert size_option_for("padding", "20px 40px") is None
    assert size_option_for("font_size", "17px") is None
    assert size_option_for("nope", "10px") is None
