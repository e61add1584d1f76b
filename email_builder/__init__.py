"""
Email Builder — conversion bidirectionnelle Block Document ↔ HTML email.

Usage (rendu):
    >>> from email_builder import load_document, render_email
    >>> html = render_email(load_document({"blocks": [
    ...     {"id": "h1", "blockType": "hero", "orderId": 1, "content": {"headline": "Bienvenue"}},
    ... ]}))

Usage (parsing):
    >>> from email_builder import parse_html
    >>> document = parse_html(html)
    >>> document.blocks[0].content.headline
    'Bienvenue'

Usage (édition):
    >>> from email_builder import EmailBuilder
    >>> builder = EmailBuilder.from_html(html)
    >>> builder.insert_block(builder.create_block("button", {"text": "Go", "url": "https://x.io"}))
"""

# ── Blocs ───────────────────────────────────────────────────────────────────
from .blocks import (
    BaseBlock, BlockStyles, SizeOption,
    HeaderBlock, HeaderContent,
    HeroBlock, HeroContent,
    TextBlock, TextContent,
    ImageBlock, ImageContent,
    ButtonBlock, ButtonContent,
    DividerBlock, DividerContent,
    FooterBlock, FooterContent, SocialLink,
    FeaturesBlock, FeaturesContent, FeatureItem,
    UnknownBlock,
    BlockUnion, BLOCK_TYPES,
)

# ── Document / styles / validation ──────────────────────────────────────────
from .core import (
    DocumentError,
    GlobalStyles,
    EmailMetadata,
    EmailDocument,
    load_document,
    SIZE_MAPPINGS,
    to_css,
    ValidationIssue,
    ValidationResult,
    validate_document,
)

# ── Conversion ──────────────────────────────────────────────────────────────
from .renderer import render_email, render_block
from .parser import parse_html
from .builder import EmailBuilder
from .export import prepare_for_export, generate_filename

__version__ = "0.1.0"

__all__ = [
    # blocs
    "BaseBlock", "BlockStyles", "SizeOption",
    "HeaderBlock", "HeaderContent",
    "HeroBlock", "HeroContent",
    "TextBlock", "TextContent",
    "ImageBlock", "ImageContent",
    "ButtonBlock", "ButtonContent",
    "DividerBlock", "DividerContent",
    "FooterBlock", "FooterContent", "SocialLink",
    "FeaturesBlock", "FeaturesContent", "FeatureItem",
    "UnknownBlock",
    "BlockUnion", "BLOCK_TYPES",
    # document
    "DocumentError", "GlobalStyles", "EmailMetadata", "EmailDocument", "load_document",
    "SIZE_MAPPINGS", "to_css",
    "ValidationIssue", "ValidationResult", "validate_document",
    # conversion
    "render_email", "render_block", "parse_html",
    "EmailBuilder", "prepare_for_export", "generate_filename",
]
