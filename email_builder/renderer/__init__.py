"""Renderer — EmailDocument → HTML email."""
from .html import render_email, render_block
from .css import resolve_button_colors, ButtonColors, cell_style

__all__ = ["render_email", "render_block", "resolve_button_colors", "ButtonColors", "cell_style"]
