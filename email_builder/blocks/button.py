"""Bloc Button — CTA avec variante de style et couleur de fond personnalisée."""
from typing import Literal, Optional
from .base import BaseBlock, CamelModel

ButtonStyle = Literal["primary", "secondary", "outline", "ghost"]


class ButtonContent(CamelModel):
    text: str = ""
    url: str = ""
    button_style: ButtonStyle = "primary"
    background_color: Optional[str] = None  # prioritaire sur la variante


class ButtonBlock(BaseBlock):
    block_type: Literal["button"] = "button"
    content: ButtonContent = ButtonContent()
