"""Tests renderer — HTML par bloc, couleurs des boutons, footer, ordre des lignes, idempotence."""
import re

import pytest

from email_builder.blocks import (
    HeaderBlock, HeaderContent,
    HeroBlock, HeroContent,
    TextBlock, TextContent,
    ImageBlock, ImageContent,
    ButtonBlock, ButtonContent,
    DividerBlock, DividerContent,
    FooterBlock, FooterContent, SocialLink,
    FeaturesBlock, FeaturesContent, FeatureItem,
    UnknownBlock, BlockStyles,
)
from email_builder.core.schemas import load_document
from email_builder.renderer import render_email, render_block, resolve_button_colors, cell_style


def block_ids(html):
    return re.findall(r'data-block-id="([^"]+)"', html)


# ── Document ─────────────────────────────────────────────────────────────────

def test_rows_follow_order_id_not_array_order():
    doc = load_document({"blocks": [
        {"id": "b1", "blockType": "text", "orderId": 2, "styles": {}, "content": {"text": "Hello"}},
        {"id": "b2", "blockType": "header", "orderId": 1, "styles": {}, "content": {"text": "Acme"}},
    ]})
    html = render_email(doc)
    assert block_ids(html) == ["b2", "b1"]
    assert html.index("Acme") < html.index("Hello")


def test_render_is_idempotent():
    doc = load_document({"subject": "S", "blocks": [
        {"id": "h", "blockType": "hero", "orderId": 1, "content": {"headline": "Hi"}},
        {"id": "f", "blockType": "features", "orderId": 2,
         "content": {"features": [{"title": "A"}, {"title": "B"}, {"title": "C"}], "layout": "grid"}},
    ]})
    assert render_email(doc) == render_email(doc)


def test_document_wrapper():
    doc = load_document({
        "subject": "Spring sale",
        "preheader": "Up to 50% off",
        "globalStyles": {"backgroundColor": "#eeeeee", "containerWidth": 640, "fontFamily": "Georgia, serif"},
        "blocks": [],
    })
    html = render_email(doc)
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Spring sale</title>" in html
    assert "<!--[if mso]>" in html
    assert "display: none" in html and "Up to 50% off" in html
    assert 'width="640"' in html
    assert "background-color: #eeeeee" in html
    assert "font-family: Georgia, serif" in html
    assert 'role="presentation"' in html


def test_default_title_without_subject():
    assert "<title>Email</title>" in render_email(load_document({"blocks": []}))


def test_unknown_block_renders_empty():
    block = UnknownBlock(id="x", block_type="carousel")
    assert render_block(block) == ""
    doc = load_document({"blocks": [
        {"id": "x", "blockType": "carousel", "orderId": 1},
        {"id": "t", "blockType": "text", "orderId": 2, "content": {"text": "Hi"}},
    ]})
    assert block_ids(render_email(doc)) == ["t"]


# ── Cellule ──────────────────────────────────────────────────────────────────

def test_cell_style_default_padding_and_alignment():
    assert cell_style(TextBlock(id="t")) == "padding: 20px 40px; text-align: left"
    assert cell_style(HeroBlock(id="h")) == "padding: 20px 40px; text-align: center"


def test_cell_style_uses_semantic_styles():
    block = TextBlock(id="t", styles=BlockStyles(padding="small", text_align="right", text_color="#333333"))
    style = cell_style(block)
    assert "padding: 10px" in style
    assert "20px 40px" not in style
    assert "text-align: right" in style
    assert "color: #333333" in style


# ── Header / Hero / Text ─────────────────────────────────────────────────────

def test_header_with_logo():
    html = render_block(HeaderBlock(id="h", content=HeaderContent(
        image_url="https://cdn/logo.png", image_alt="Acme", image_width=180,
    )))
    assert 'src="https://cdn/logo.png"' in html
    assert 'alt="Acme"' in html
    assert 'width="180"' in html
    assert "max-width: 200px" in html
    assert "<h1" not in html


def test_header_text_and_placeholder():
    assert "Acme</h1>" in render_block(HeaderBlock(id="h", content=HeaderContent(text="Acme")))
    assert "Company Name</h1>" in render_block(HeaderBlock(id="h"))


def test_hero_subheadline_optional():
    html = render_block(HeroBlock(id="h", content=HeroContent(headline="Big news")))
    assert "Big news</h1>" in html
    assert "<p" not in html
    html = render_block(HeroBlock(id="h", content=HeroContent(headline="Big news", subheadline="Read on")))
    assert "Read on</p>" in html


def test_text_link_wraps_first_occurrence():
    html = render_block(TextBlock(id="t", content=TextContent(
        text="See docs and more docs", link_text="docs", link_url="https://docs",
    )))
    assert 'See <a href="https://docs"' in html
    assert html.count("<a ") == 1
    assert "and more docs</p>" in html


def test_text_link_ignored_when_not_in_body():
    html = render_block(TextBlock(id="t", content=TextContent(
        text="Hello world", link_text="docs", link_url="https://docs",
    )))
    assert "<a " not in html
    assert "Hello world</p>" in html


# ── Image ────────────────────────────────────────────────────────────────────

def test_image_with_link_and_caption():
    html = render_block(ImageBlock(id="i", content=ImageContent(
        image_url="https://cdn/p.png", image_alt="Photo", link_url="https://shop", caption="Our shop",
    )))
    assert '<a href="https://shop"' in html
    assert 'src="https://cdn/p.png"' in html
    assert "Our shop</p>" in html


def test_image_without_link():
    html = render_block(ImageBlock(id="i", content=ImageContent(image_url="https://cdn/p.png")))
    assert "<a " not in html
    assert 'alt=""' in html


# ── Button ───────────────────────────────────────────────────────────────────

def test_button_custom_color_wins_over_variant():
    html = render_block(ButtonBlock(id="b", content=ButtonContent(
        text="Buy", url="https://buy", button_style="secondary", background_color="#112233",
    )))
    assert "background-color: #112233" in html
    assert "#6B7280" not in html


@pytest.mark.parametrize("style,background,text,border", [
    ("primary",   "#3B82F6",     "#FFFFFF", "2px solid #3B82F6"),
    ("secondary", "#6B7280",     "#FFFFFF", "2px solid #6B7280"),
    ("outline",   "transparent", "#3B82F6", "2px solid #3B82F6"),
    ("ghost",     "transparent", "#3B82F6", "2px solid transparent"),
])
def test_button_variant_colors(style, background, text, border):
    colors = resolve_button_colors(ButtonContent(text="Go", url="#", button_style=style))
    assert colors.background == background
    assert colors.text == text
    assert colors.border == border


def test_button_renders_link():
    html = render_block(ButtonBlock(id="b", content=ButtonContent(text="Go", url="https://go")))
    assert '<a href="https://go"' in html
    assert ">Go</a>" in html


# ── Divider ──────────────────────────────────────────────────────────────────

def test_divider_line():
    html = render_block(DividerBlock(
        id="d", content=DividerContent(thickness=3), styles=BlockStyles(border_color="#ff0000"),
    ))
    assert 'data-divider-type="line"' in html
    assert "border-top: 3px solid #ff0000" in html


def test_divider_space():
    html = render_block(DividerBlock(id="d", content=DividerContent(divider_type="space", height=40)))
    assert 'data-divider-type="space"' in html
    assert "height: 40px" in html
    assert "<hr" not in html


def test_divider_space_default_height():
    html = render_block(DividerBlock(id="d", content=DividerContent(divider_type="space")))
    assert "height: 20px" in html


# ── Footer ───────────────────────────────────────────────────────────────────

def _footer(**overrides):
    content = dict(
        company_name="Acme Inc",
        unsubscribe_text="Unsubscribe", unsubscribe_url="https://u",
        privacy_policy_text="Privacy Policy", privacy_policy_url="https://p",
    )
    content.update(overrides)
    return FooterBlock(id="f", content=FooterContent(**content), styles=BlockStyles(text_align="left"))


def test_footer_links_joined_on_one_line():
    html = render_block(_footer())
    assert html.count(" | ") == 1
    line = re.search(r'<p class="footer__links"[^>]*>(.*?)</p>', html).group(1)
    assert "https://u" in line and "https://p" in line


def test_footer_always_centered():
    html = render_block(_footer())
    assert "text-align: center" in html
    assert "text-align: left" not in html


def test_footer_without_privacy_has_single_link():
    html = render_block(_footer(privacy_policy_text=None, privacy_policy_url=None))
    assert " | " not in html
    assert ">Unsubscribe</a>" in html


def test_footer_address_and_social():
    html = render_block(_footer(
        address="1 Main St\nSpringfield",
        social_links=[SocialLink(platform="twitter", url="https://t"), SocialLink(platform="linkedin", url="https://l")],
    ))
    assert "1 Main St<br />Springfield" in html
    assert ">Twitter</a> · <a" in html
    assert ">Linkedin</a>" in html
    assert html.index("footer__address") < html.index("footer__social") < html.index("footer__links")


# ── Features ─────────────────────────────────────────────────────────────────

def _features(layout, count=3):
    return FeaturesBlock(id="f", content=FeaturesContent(
        title="Why us",
        layout=layout,
        features=[FeatureItem(icon="🚀", title=f"F{i}", description=f"D{i}") for i in range(count)],
    ))


def test_features_list_layout():
    html = render_block(_features("list"))
    assert 'class="features features--list"' in html
    assert html.count('class="feature-item"') == 3
    assert "Why us</h3>" in html
    assert 'class="feature-icon"' in html and "🚀" in html


def test_features_grid_pads_last_row():
    html = render_block(_features("grid"))
    assert 'class="features features--grid"' in html
    assert html.count("<tr>") == 2
    assert html.count('<td width="50%"') == 4


def test_features_default_icon():
    block = FeaturesBlock(id="f", content=FeaturesContent(features=[FeatureItem(title="A")]))
    html = render_block(block)
    assert "✓" in html
    assert 'class="feature-description"' not in html
