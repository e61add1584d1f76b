"""
Blocs email — exports publics + BlockUnion discriminé par blockType.
"""
from typing import Annotated, Any, Union
from pydantic import Discriminator, Tag

from .base import (
    CamelModel, BaseBlock, BlockStyles, SizeOption,
    Alignment, ALIGNMENTS, FONT_WEIGHTS,
)
from .header   import HeaderBlock, HeaderContent
from .hero     import HeroBlock, HeroContent
from .text     import TextBlock, TextContent
from .image    import ImageBlock, ImageContent
from .button   import ButtonBlock, ButtonContent, ButtonStyle
from .divider  import DividerBlock, DividerContent
from .footer   import FooterBlock, FooterContent, SocialLink, SOCIAL_PLATFORMS
from .features import FeaturesBlock, FeaturesContent, FeatureItem, DEFAULT_FEATURE_ICON
from .unknown  import UnknownBlock

# Registry blockType → classe (ordre = ordre d'énumération des variantes)
BLOCK_CLASSES: dict = {
    "header":   HeaderBlock,
    "hero":     HeroBlock,
    "text":     TextBlock,
    "image":    ImageBlock,
    "button":   ButtonBlock,
    "divider":  DividerBlock,
    "footer":   FooterBlock,
    "features": FeaturesBlock,
}
BLOCK_TYPES = tuple(BLOCK_CLASSES)


def _block_tag(value: Any) -> str:
    """Tag de discrimination : dict JSON (camelCase ou snake_case) ou instance de bloc."""
    if isinstance(value, dict):
        block_type = value.get("blockType", value.get("block_type"))
    else:
        block_type = getattr(value, "block_type", None)
    return block_type if block_type in BLOCK_CLASSES else "unknown"


# Un blockType inconnu tombe sur UnknownBlock au lieu d'invalider tout le document
BlockUnion = Annotated[
    Union[
        Annotated[HeaderBlock,   Tag("header")],
        Annotated[HeroBlock,     Tag("hero")],
        Annotated[TextBlock,     Tag("text")],
        Annotated[ImageBlock,    Tag("image")],
        Annotated[ButtonBlock,   Tag("button")],
        Annotated[DividerBlock,  Tag("divider")],
        Annotated[FooterBlock,   Tag("footer")],
        Annotated[FeaturesBlock, Tag("features")],
        Annotated[UnknownBlock,  Tag("unknown")],
    ],
    Discriminator(_block_tag),
]

__all__ = [
    # Base
    "CamelModel", "BaseBlock", "BlockStyles", "SizeOption",
    "Alignment", "ALIGNMENTS", "FONT_WEIGHTS",
    # Variantes
    "HeaderBlock", "HeaderContent",
    "HeroBlock", "HeroContent",
    "TextBlock", "TextContent",
    "ImageBlock", "ImageContent",
    "ButtonBlock", "ButtonContent", "ButtonStyle",
    "DividerBlock", "DividerContent",
    "FooterBlock", "FooterContent", "SocialLink", "SOCIAL_PLATFORMS",
    "FeaturesBlock", "FeaturesContent", "FeatureItem", "DEFAULT_FEATURE_ICON",
    "UnknownBlock",
    # Union + registry
    "BlockUnion", "BLOCK_CLASSES", "BLOCK_TYPES",
]
