"""Bloc Image — image cliquable optionnelle + légende."""
from typing import Literal, Optional
from .base import BaseBlock, CamelModel


class ImageContent(CamelModel):
    image_url: str = ""
    image_alt: str = ""
    image_width: Optional[int] = None
    image_height: Optional[int] = None
    caption: Optional[str] = None
    link_url: Optional[str] = None


class ImageBlock(BaseBlock):
    block_type: Literal["image"] = "image"
    content: ImageContent = ImageContent()
