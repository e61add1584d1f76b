"""
API d'édition du Email Builder.

EmailBuilder encapsule un EmailDocument et le modifie en place. Après chaque
opération structurelle les blocs sont triés puis renumérotés (orderId = 1..n) ;
les ids ne sont jamais modifiés ni réutilisés.
"""
import logging
import uuid
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

from .blocks import BLOCK_CLASSES, ALIGNMENTS, BaseBlock
from .core.schemas import EmailDocument, load_document
from .core.validation import ValidationResult, validate_document
from .parser.html import parse_html
from .renderer.html import render_email

log = logging.getLogger(__name__)

DocumentListener = Callable[[EmailDocument], None]


def _short_id() -> str:
    return uuid.uuid4().hex[:8]


def _by_field_name(model_cls: type, values: Dict[str, Any]) -> Dict[str, Any]:
    """Clés camelCase ou snake_case → noms de champs Python."""
    aliases = {f.alias: name for name, f in model_cls.model_fields.items() if f.alias}
    return {aliases.get(key, key): value for key, value in values.items()}


class EmailBuilder:
    """
    Éditeur de document email.

    Usage:
        >>> builder = EmailBuilder()
        >>> hero = builder.create_block("hero", {"headline": "Bienvenue"})
        >>> builder.insert_block(hero)
        >>> html = builder.render()
    """

    def __init__(self, document: Optional[EmailDocument] = None):
        self.document = document or EmailDocument()
        self._listeners: List[DocumentListener] = []
        self._sort()
        self._renumber()

    @classmethod
    def from_html(cls, html: str) -> "EmailBuilder":
        return cls(parse_html(html))

    @classmethod
    def from_json(cls, data: Any) -> "EmailBuilder":
        """Accepte JSON (str/bytes) ou dict ; DocumentError si invalide."""
        return cls(load_document(data))

    # ── Listeners ───────────────────────────────────────────────────────────

    def subscribe(self, listener: DocumentListener) -> None:
        """Enregistre un callback appelé avec le document après chaque modification."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: DocumentListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.document)

    # ── Lecture ─────────────────────────────────────────────────────────────

    @property
    def blocks(self) -> list:
        return self.document.blocks

    def _index_of(self, block_id: str) -> int:
        for index, block in enumerate(self.document.blocks):
            if block.id == block_id:
                return index
        raise KeyError(block_id)

    def get_block(self, block_id: str) -> BaseBlock:
        """Raises: KeyError si l'id est inconnu."""
        return self.document.blocks[self._index_of(block_id)]

    # ── Création / insertion ────────────────────────────────────────────────

    def create_block(
        self,
        block_type: str,
        content: Optional[Dict[str, Any]] = None,
        styles: Optional[Dict[str, Any]] = None,
    ) -> BaseBlock:
        """
        Construit un bloc avec un id neuf, sans l'insérer.

        Raises:
            ValueError: blockType inconnu
        """
        block_cls = BLOCK_CLASSES.get(block_type)
        if block_cls is None:
            raise ValueError(
                f"Type de bloc inconnu : '{block_type}'. Disponibles : {list(BLOCK_CLASSES)}"
            )
        return block_cls.model_validate({
            "id": f"{block_type}-{_short_id()}",
            "content": content or {},
            "styles": styles or {},
        })

    def insert_block(self, block: BaseBlock, position: Optional[int] = None) -> BaseBlock:
        """
        Insère un bloc à la position donnée (ajout en fin par défaut).

        Raises:
            ValueError: id déjà présent dans le document
        """
        if any(b.id == block.id for b in self.document.blocks):
            raise ValueError(f"Id de bloc déjà utilisé : '{block.id}'")
        self._sort()
        if position is None:
            self.document.blocks.append(block)
        else:
            self.document.blocks.insert(position, block)
        self._changed()
        log.debug("Bloc inséré : %s (%s)", block.id, block.block_type)
        return block

    # ── Modification ────────────────────────────────────────────────────────

    def update_block(
        self,
        block_id: str,
        content: Optional[Dict[str, Any]] = None,
        styles: Optional[Dict[str, Any]] = None,
    ) -> BaseBlock:
        """Fusionne un contenu et des styles partiels. id, blockType et orderId inchangés."""
        index = self._index_of(block_id)
        block = self.document.blocks[index]
        data = block.model_dump()

        if content:
            if isinstance(block.content, BaseModel):
                content = _by_field_name(type(block.content), content)
            data["content"] = {**data["content"], **content}
        if styles:
            data["styles"] = {**data["styles"], **_by_field_name(type(block.styles), styles)}

        data.update(id=block.id, block_type=block.block_type, order_id=block.order_id)
        updated = type(block).model_validate(data)
        self.document.blocks[index] = updated
        self._notify()
        return updated

    def set_alignment(self, block_id: str, alignment: str) -> BaseBlock:
        """Raises: ValueError si l'alignement n'est pas left|center|right."""
        if alignment not in ALIGNMENTS:
            raise ValueError(f"Alignement invalide : '{alignment}'")
        return self.update_block(block_id, styles={"text_align": alignment})

    # ── Structure ───────────────────────────────────────────────────────────

    def delete_block(self, block_id: str) -> BaseBlock:
        self._sort()
        removed = self.document.blocks.pop(self._index_of(block_id))
        self._changed()
        return removed

    def clone_block(self, block_id: str) -> BaseBlock:
        """Copie profonde placée juste après la source, avec un nouvel id."""
        self._sort()
        index = self._index_of(block_id)
        source = self.document.blocks[index]
        clone = source.model_copy(deep=True, update={"id": f"{source.id}-clone-{_short_id()}"})
        self.document.blocks.insert(index + 1, clone)
        self._changed()
        return clone

    def move_block_up(self, block_id: str) -> bool:
        return self._move(block_id, -1)

    def move_block_down(self, block_id: str) -> bool:
        return self._move(block_id, 1)

    def _move(self, block_id: str, step: int) -> bool:
        self._sort()
        index = self._index_of(block_id)
        target = index + step
        if not 0 <= target < len(self.document.blocks):
            return False
        blocks = self.document.blocks
        blocks[index], blocks[target] = blocks[target], blocks[index]
        self._changed()
        return True

    # ── Ordre ───────────────────────────────────────────────────────────────

    def _sort(self) -> None:
        self.document.blocks.sort(key=lambda b: b.order_id)

    def _renumber(self) -> None:
        # l'ordre courant de la liste fait foi
        for position, block in enumerate(self.document.blocks, start=1):
            block.order_id = position

    def _changed(self) -> None:
        self._renumber()
        self._notify()

    # ── Sorties ─────────────────────────────────────────────────────────────

    def render(self) -> str:
        return render_email(self.document)

    def validate(self) -> ValidationResult:
        return validate_document(self.document)

    def to_json(self) -> dict:
        return self.document.to_json_dict()
