"""
Table de correspondance styles sémantiques → CSS.

  BlockStyles(padding="medium", textAlign="center")
      → to_css()           → {"padding": "20px", "text-align": "center"}
      → css_declarations() → "padding: 20px; text-align: center"

Fonction totale : une option absente ou inconnue est omise, jamais une erreur.
"""
from typing import Dict, Optional, Union

from ..blocks.base import BlockStyles, SizeOption

CssPropertyMap = Dict[str, str]

SIZE_MAPPINGS: Dict[str, Dict[SizeOption, str]] = {
    "padding": {
        SizeOption.SMALL:       "10px",
        SizeOption.MEDIUM:      "20px",
        SizeOption.LARGE:       "30px",
        SizeOption.EXTRA_LARGE: "40px",
    },
    "margin": {
        SizeOption.SMALL:       "5px",
        SizeOption.MEDIUM:      "10px",
        SizeOption.LARGE:       "20px",
        SizeOption.EXTRA_LARGE: "30px",
    },
    "font_size": {
        SizeOption.SMALL:       "12px",
        SizeOption.MEDIUM:      "16px",
        SizeOption.LARGE:       "20px",
        SizeOption.EXTRA_LARGE: "24px",
    },
    "line_height": {
        SizeOption.SMALL:       "1.2",
        SizeOption.MEDIUM:      "1.4",
        SizeOption.LARGE:       "1.6",
        SizeOption.EXTRA_LARGE: "1.8",
    },
    "border_width": {
        SizeOption.SMALL:       "1px",
        SizeOption.MEDIUM:      "2px",
        SizeOption.LARGE:       "3px",
        SizeOption.EXTRA_LARGE: "4px",
    },
    "border_radius": {
        SizeOption.SMALL:       "4px",
        SizeOption.MEDIUM:      "8px",
        SizeOption.LARGE:       "12px",
        SizeOption.EXTRA_LARGE: "16px",
    },
    "width": {
        SizeOption.SMALL:       "200px",
        SizeOption.MEDIUM:      "400px",
        SizeOption.LARGE:       "600px",
        SizeOption.EXTRA_LARGE: "800px",
    },
    "height": {
        SizeOption.SMALL:       "100px",
        SizeOption.MEDIUM:      "200px",
        SizeOption.LARGE:       "300px",
        SizeOption.EXTRA_LARGE: "400px",
    },
}

# champ BlockStyles → propriété CSS
_BUCKET_PROPERTIES = (
    ("padding",       "padding"),
    ("margin",        "margin"),
    ("font_size",     "font-size"),
    ("line_height",   "line-height"),
    ("border_width",  "border-width"),
    ("border_radius", "border-radius"),
)
_PASSTHROUGH = {
    "width":  ("auto", "100%"),
    "height": ("auto",),
}
_DIRECT_PROPERTIES = (
    ("text_color",       "color"),
    ("border_color",     "border-color"),
    ("background_color", "background-color"),
    ("font_family",      "font-family"),
    ("font_weight",      "font-weight"),
    ("text_align",       "text-align"),
    ("border_style",     "border-style"),
    ("text_decoration",  "text-decoration"),
)

# Blocs centrés par défaut ; les autres (texte, image, bouton, divider) alignés à gauche
_CENTERED_BLOCK_TYPES = ("header", "hero", "footer", "features")


def to_css(styles: Union[BlockStyles, dict, None]) -> CssPropertyMap:
    """Convertit un objet de style sémantique en propriétés CSS (valeurs concrètes)."""
    if styles is None:
        return {}
    if isinstance(styles, dict):
        styles = BlockStyles.model_validate(styles)

    css: CssPropertyMap = {}
    for field, prop in _BUCKET_PROPERTIES:
        value = getattr(styles, field)
        if value is not None:
            css[prop] = SIZE_MAPPINGS[field][SizeOption(value)]

    for field, passthrough in _PASSTHROUGH.items():
        value = getattr(styles, field)
        if value is None:
            continue
        if value in passthrough:
            css[field] = value
        else:
            css[field] = SIZE_MAPPINGS[field][SizeOption(value)]

    for field, prop in _DIRECT_PROPERTIES:
        value = getattr(styles, field)
        if value:
            css[prop] = value
    return css


def css_declarations(css: CssPropertyMap) -> str:
    """Sérialise en attribut style inline."""
    return "; ".join(f"{prop}: {value}" for prop, value in css.items())


def default_alignment(block_type: str) -> str:
    return "center" if block_type in _CENTERED_BLOCK_TYPES else "left"


def size_option_for(field: str, css_value: str) -> Optional[SizeOption]:
    """Recherche inverse : valeur CSS littérale → bucket, si elle figure dans la table."""
    for option, value in SIZE_MAPPINGS.get(field, {}).items():
        if value == css_value.strip():
            return option
    return None
