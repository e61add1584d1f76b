"""
Blocs de base pour email_builder.
Modèle camelCase côté JSON, snake_case côté Python + objet de style sémantique.
"""
import logging
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

log = logging.getLogger(__name__)


class CamelModel(BaseModel):
    """Base commune : alias camelCase (format JSON de l'éditeur), noms Python acceptés en entrée."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SizeOption(str, Enum):
    """Tailles sémantiques (buckets) — la valeur CSS concrète vient de SIZE_MAPPINGS."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra-large"


Alignment = Literal["left", "center", "right"]
FontWeight = Literal[
    "normal", "bold", "100", "200", "300", "400", "500", "600", "700", "800", "900",
]
BorderStyle = Literal["solid", "dashed", "dotted", "none"]
TextDecoration = Literal["none", "underline", "line-through"]

ALIGNMENTS = ("left", "center", "right")
FONT_WEIGHTS = (
    "normal", "bold", "100", "200", "300", "400", "500", "600", "700", "800", "900",
)

_SIZES = tuple(option.value for option in SizeOption)

# Valeurs acceptées pour les champs énumérés ; le reste est écarté au chargement
_ALLOWED_VALUES = {
    "padding":         _SIZES,
    "margin":          _SIZES,
    "font_size":       _SIZES,
    "line_height":     _SIZES,
    "border_width":    _SIZES,
    "border_radius":   _SIZES,
    "width":           _SIZES + ("auto", "100%"),
    "height":          _SIZES + ("auto",),
    "font_weight":     FONT_WEIGHTS,
    "text_align":      ALIGNMENTS,
    "border_style":    ("solid", "dashed", "dotted", "none"),
    "text_decoration": ("none", "underline", "line-through"),
}


class BlockStyles(CamelModel):
    """Objet de style clairsemé : buckets sémantiques + quelques valeurs directes."""
    # Layout
    padding: Optional[SizeOption] = None
    margin: Optional[SizeOption] = None

    # Couleurs (hex libre)
    text_color: Optional[str] = None
    border_color: Optional[str] = None
    background_color: Optional[str] = None

    # Typographie
    font_size: Optional[SizeOption] = None
    font_family: Optional[str] = None
    font_weight: Optional[FontWeight] = None
    text_align: Optional[Alignment] = None
    line_height: Optional[SizeOption] = None

    # Bordure
    border_width: Optional[SizeOption] = None
    border_style: Optional[BorderStyle] = None
    border_radius: Optional[SizeOption] = None

    # Dimensions
    width: Optional[Union[SizeOption, Literal["auto", "100%"]]] = None
    height: Optional[Union[SizeOption, Literal["auto"]]] = None

    text_decoration: Optional[TextDecoration] = None

    @model_validator(mode="before")
    @classmethod
    def _drop_unknown_values(cls, data):
        """Écarte les valeurs hors table plutôt que de rejeter tout le document."""
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            name = _FIELD_NAMES.get(key, key)
            allowed = _ALLOWED_VALUES.get(name)
            raw = value.value if isinstance(value, Enum) else value
            if allowed is not None and raw is not None and raw not in allowed:
                log.debug("Style ignoré %s=%r (valeur inconnue)", key, value)
                continue
            cleaned[key] = value
        return cleaned


# alias camelCase → nom de champ (le validateur "before" reçoit les clés brutes)
_FIELD_NAMES = {to_camel(name): name for name in _ALLOWED_VALUES}


class BaseBlock(CamelModel):
    """Bloc de base (classe parente de tous les blocs email)."""
    id: str = ""
    block_type: str
    order_id: int = 0
    styles: BlockStyles = BlockStyles()
