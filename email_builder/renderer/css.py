"""
CSS propre au rendu email : style de cellule des blocs + couleurs des boutons.
La correspondance bucket → valeur vit dans core.styles.
"""
from typing import NamedTuple, Optional

from ..blocks import BaseBlock, ButtonContent
from ..core.styles import to_css, css_declarations, default_alignment

ACCENT_COLOR = "#3B82F6"
BASE_CELL_PADDING = "20px 40px"

# variante → couleur de fond par défaut
BUTTON_BACKGROUNDS = {
    "primary":   ACCENT_COLOR,
    "secondary": "#6B7280",
    "outline":   "transparent",
    "ghost":     "transparent",
}


class ButtonColors(NamedTuple):
    background: str
    text: str
    border: str


def resolve_button_colors(content: ButtonContent) -> ButtonColors:
    """
    Priorité : couleur personnalisée > couleur de la variante.

    Texte blanc sauf fond transparent (texte bleu accent). Bordure 2px de la
    couleur de fond ; outline garde une bordure accent, ghost une bordure transparente.
    """
    style = content.button_style or "primary"
    if content.background_color:
        background = content.background_color
        border_color = background
    else:
        background = BUTTON_BACKGROUNDS.get(style, ACCENT_COLOR)
        if style == "outline":
            border_color = ACCENT_COLOR
        else:
            border_color = background
    text = ACCENT_COLOR if background == "transparent" else "#FFFFFF"
    return ButtonColors(background, text, f"2px solid {border_color}")


def cell_style(block: BaseBlock, force_align: Optional[str] = None) -> str:
    """Style inline de la cellule <td> d'un bloc : styles sémantiques + alignement par défaut."""
    css = to_css(block.styles)
    if "padding" not in css:
        css = {"padding": BASE_CELL_PADDING, **css}
    css["text-align"] = force_align or css.get("text-align") or default_alignment(block.block_type)
    return css_declarations(css)


def block_alignment(block: BaseBlock) -> str:
    return block.styles.text_align or default_alignment(block.block_type)
