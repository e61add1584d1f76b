"""Parser — HTML email → EmailDocument."""
from .html import parse_html
from .styles import parse_inline_styles, extract_block_styles
from .strategies import clean_company_name, split_icon, split_title_description

__all__ = [
    "parse_html",
    "parse_inline_styles",
    "extract_block_styles",
    "clean_company_name",
    "split_icon",
    "split_title_description",
]
