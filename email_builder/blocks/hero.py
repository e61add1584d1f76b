"""Bloc Hero — titre principal + sous-titre optionnel (texte uniquement)."""
from typing import Literal, Optional
from .base import BaseBlock, CamelModel


class HeroContent(CamelModel):
    headline: str = ""
    subheadline: Optional[str] = None


class HeroBlock(BaseBlock):
    block_type: Literal["hero"] = "hero"
    content: HeroContent = HeroContent()
