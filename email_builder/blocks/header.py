"""Bloc Header — logo image ou nom de l'entreprise."""
from typing import Literal, Optional
from .base import BaseBlock, CamelModel


class HeaderContent(CamelModel):
    text: Optional[str] = None
    image_url: Optional[str] = None
    image_alt: Optional[str] = None
    image_width: Optional[int] = None
    image_height: Optional[int] = None


class HeaderBlock(BaseBlock):
    block_type: Literal["header"] = "header"
    content: HeaderContent = HeaderContent()
