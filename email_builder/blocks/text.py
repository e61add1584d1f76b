"""Bloc Text — paragraphe, avec un lien optionnel sur un extrait du texte."""
from typing import Literal, Optional
from .base import BaseBlock, CamelModel


class TextContent(CamelModel):
    text: str = ""
    link_text: Optional[str] = None  # doit apparaître tel quel dans `text`
    link_url: Optional[str] = None


class TextBlock(BaseBlock):
    block_type: Literal["text"] = "text"
    content: TextContent = TextContent()
