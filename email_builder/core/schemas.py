"""
Schémas Pydantic du document email (Block Document).
Structure : EmailDocument → blocks (BlockUnion) + globalStyles + metadata

Format JSON camelCase (celui de l'API de génération IA), attributs Python snake_case.
"""
import json
from typing import List, Optional, Union

from pydantic import Field, ValidationError

from ..blocks import BlockUnion, CamelModel
from .. import config


class DocumentError(ValueError):
    """Entrée impossible à interpréter comme document email."""


class GlobalStyles(CamelModel):
    """Styles globaux du document (fond de page + conteneur central)."""
    font_family: str = "Arial, sans-serif"
    background_color: str = "#f4f4f4"
    container_width: int = Field(default_factory=lambda: config.DEFAULT_CONTAINER_WIDTH)
    container_background_color: str = "#ffffff"


class EmailMetadata(CamelModel):
    version: str = "1.0"
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    no_blocks_found: bool = False  # positionné par le parser HTML


class EmailDocument(CamelModel):
    """Document email complet — source de vérité de l'éditeur."""
    id: Optional[str] = None
    subject: Optional[str] = None
    preheader: Optional[str] = None
    blocks: List[BlockUnion] = Field(default_factory=list)
    global_styles: GlobalStyles = Field(default_factory=GlobalStyles)
    metadata: EmailMetadata = Field(default_factory=EmailMetadata)

    @property
    def has_blocks(self) -> bool:
        return bool(self.blocks)

    def ordered_blocks(self) -> list:
        """Blocs triés par orderId (tri stable : l'ordre du tableau départage les doublons)."""
        return sorted(self.blocks, key=lambda b: b.order_id)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def load_document(data: Union[str, bytes, dict, EmailDocument]) -> EmailDocument:
    """
    Charge un document depuis du JSON (str/bytes), un dict ou un EmailDocument.

    Raises:
        DocumentError: JSON invalide, racine non-objet ou enveloppe invalide
    """
    if isinstance(data, EmailDocument):
        return data
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except ValueError as e:
            raise DocumentError(f"JSON invalide : {e}") from e
    if not isinstance(data, dict):
        raise DocumentError(f"Document attendu (objet JSON), reçu : {type(data).__name__}")
    try:
        return EmailDocument.model_validate(data)
    except ValidationError as e:
        raise DocumentError(str(e)) from e
