"""Bloc inconnu — conserve un blockType non reconnu sans faire échouer le document."""
from typing import Any, Dict
from .base import BaseBlock


class UnknownBlock(BaseBlock):
    """Ignoré au rendu, signalé par la validation."""
    block_type: str = ""
    content: Dict[str, Any] = {}
