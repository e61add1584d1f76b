"""
Validation d'un document email — passe séparée, jamais bloquante pour le rendu.
L'appelant (UI, sauvegarde) décide si un warning empêche la persistance.
"""
from collections import Counter
from typing import List, Optional

from ..blocks import (
    BaseBlock, ImageBlock, ButtonBlock, HeroBlock, TextBlock,
    FooterBlock, FeaturesBlock, UnknownBlock,
)
from ..blocks.base import CamelModel
from .schemas import EmailDocument


class ValidationIssue(CamelModel):
    block_id: Optional[str] = None
    field: str
    message: str


class ValidationResult(CamelModel):
    is_valid: bool
    errors: List[ValidationIssue] = []
    warnings: List[ValidationIssue] = []


def validate_document(document: EmailDocument) -> ValidationResult:
    """Vérifie les invariants (id/orderId uniques) et les champs requis de chaque bloc."""
    errors: List[ValidationIssue] = []
    warnings: List[ValidationIssue] = []

    id_counts = Counter(b.id for b in document.blocks)
    order_counts = Counter(b.order_id for b in document.blocks)

    for block in document.blocks:
        if not block.id:
            errors.append(ValidationIssue(field="id", message="Block id is required"))
        elif id_counts[block.id] > 1:
            errors.append(ValidationIssue(
                block_id=block.id, field="id", message=f"Duplicate id {block.id} found",
            ))
        if order_counts[block.order_id] > 1:
            errors.append(ValidationIssue(
                block_id=block.id or None, field="orderId",
                message=f"Duplicate orderId {block.order_id} found",
            ))
        _validate_block(block, errors, warnings)

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def _validate_block(block: BaseBlock, errors: list, warnings: list) -> None:
    block_id = block.id or None

    def error(field: str, message: str):
        errors.append(ValidationIssue(block_id=block_id, field=field, message=message))

    def warning(field: str, message: str):
        warnings.append(ValidationIssue(block_id=block_id, field=field, message=message))

    if isinstance(block, UnknownBlock):
        warning("blockType", f"Unknown block type {block.block_type!r} will not be rendered")

    elif isinstance(block, ImageBlock):
        if not block.content.image_url:
            error("imageUrl", "Image URL is required")
        if not block.content.image_alt:
            warning("imageAlt", "Image alt text is missing")

    elif isinstance(block, ButtonBlock):
        if not block.content.text:
            error("text", "Button text is required")
        if block.content.url in ("", "#"):
            warning("url", "Button URL is empty")

    elif isinstance(block, HeroBlock):
        if not block.content.headline:
            error("headline", "Hero headline is required")

    elif isinstance(block, TextBlock):
        c = block.content
        if c.link_text and c.link_text not in c.text:
            warning("linkText", "Link text does not appear in the block text and will be ignored")

    elif isinstance(block, FooterBlock):
        if not block.content.unsubscribe_url:
            warning("unsubscribeUrl", "Footer has no unsubscribe URL")

    elif isinstance(block, FeaturesBlock):
        if not block.content.features:
            warning("features", "Features block has no entries")
