"""Bloc Divider — ligne horizontale ou espace vertical."""
from typing import Literal, Optional
from .base import BaseBlock, CamelModel


class DividerContent(CamelModel):
    divider_type: Literal["line", "space"] = "line"
    thickness: Optional[int] = None  # px, divider "line"
    height: Optional[int] = None     # px, divider "space"


class DividerBlock(BaseBlock):
    block_type: Literal["divider"] = "divider"
    content: DividerContent = DividerContent()
