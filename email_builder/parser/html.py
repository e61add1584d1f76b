"""
Parser HTML → EmailDocument (reconstruction best-effort, ne lève jamais sur du HTML malformé).

1. Sélectionne les éléments portant data-block-id ET data-block-type, dans l'ordre du document
2. orderId séquentiel à partir de 1 (l'ordre source fait foi)
3. Extraction du contenu par type via le registry _BLOCK_PARSERS
4. Aucun bloc trouvé → blocks=[] + metadata.noBlocksFound
"""
import logging
import re
from datetime import datetime, timezone
from typing import Optional

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from ..blocks import (
    BlockStyles,
    HeaderBlock, HeaderContent,
    HeroBlock, HeroContent,
    TextBlock, TextContent,
    ImageBlock, ImageContent,
    ButtonBlock, ButtonContent,
    DividerBlock, DividerContent,
    FooterBlock,
    FeaturesBlock, FeaturesContent,
)
from ..core.schemas import DocumentError, EmailDocument, EmailMetadata, GlobalStyles
from .styles import content_cell, extract_block_styles, parse_inline_styles
from .strategies import (
    features_from_items,
    features_from_paragraphs,
    features_layout,
    features_title,
    footer_from_paragraphs,
    footer_from_text,
    placeholder_features,
)

log = logging.getLogger(__name__)

_PX_RE = re.compile(r"^\s*(\d+)")


# ── Point d'entrée public ───────────────────────────────────────────────────

def parse_html(html: str) -> EmailDocument:
    """
    Reconstruit un EmailDocument depuis du HTML (rendu par render_email ou legacy).

    Raises:
        DocumentError: entrée qui n'est pas une chaîne
    """
    if not isinstance(html, str):
        raise DocumentError(f"HTML attendu (str), reçu : {type(html).__name__}")

    soup = BeautifulSoup(html, "html.parser")
    blocks = []
    order_id = 1
    for element in soup.select("[data-block-id][data-block-type]"):
        block_id = element.get("data-block-id")
        block_type = element.get("data-block-type")
        if not block_id or not block_type:
            continue
        parse_block = _BLOCK_PARSERS.get(block_type)
        if parse_block is None:
            log.warning("Bloc ignoré au parsing : type inconnu %r (id=%r)", block_type, block_id)
            continue
        blocks.append(parse_block(element, block_id, order_id, extract_block_styles(element)))
        order_id += 1

    if not blocks:
        log.info("Aucun bloc récupérable dans le HTML fourni")

    return EmailDocument(
        subject=_extract_subject(soup),
        preheader=_extract_preheader(soup),
        blocks=blocks,
        global_styles=_extract_global_styles(soup),
        metadata=EmailMetadata(
            created_at=datetime.now(timezone.utc).isoformat(),
            no_blocks_found=not blocks,
        ),
    )


# ── Métadonnées document ─────────────────────────────────────────────────────

def _extract_subject(soup: BeautifulSoup) -> Optional[str]:
    title = soup.find("title")
    if title is None:
        return None
    return title.get_text().strip() or None


def _extract_preheader(soup: BeautifulSoup) -> Optional[str]:
    # Non extrait : limitation connue
    return None


def _extract_global_styles(soup: BeautifulSoup) -> GlobalStyles:
    # Non extraits : valeurs par défaut
    return GlobalStyles()


# ── Helpers ──────────────────────────────────────────────────────────────────

def _text(tag: Optional[Tag]) -> str:
    return tag.get_text().strip() if tag is not None else ""


def _int_attr(tag: Optional[Tag], name: str) -> Optional[int]:
    """Équivalent parseInt : '200px' → 200, absent/invalide → None."""
    if tag is None:
        return None
    match = _PX_RE.match(tag.get(name) or "")
    return int(match.group(1)) if match else None


def _content_root(element: Tag) -> Tag:
    return content_cell(element) or element


# ── Parsers blocs ────────────────────────────────────────────────────────────

def parse_header_block(element: Tag, block_id: str, order_id: int, styles: BlockStyles) -> HeaderBlock:
    img = element.find("img")
    if img is not None:
        content = HeaderContent(
            image_url=img.get("src") or None,
            image_alt=img.get("alt") or None,
            image_width=_int_attr(img, "width"),
            image_height=_int_attr(img, "height"),
        )
    else:
        content = HeaderContent(text=_text(element))
    return HeaderBlock(id=block_id, order_id=order_id, styles=styles, content=content)


def parse_hero_block(element: Tag, block_id: str, order_id: int, styles: BlockStyles) -> HeroBlock:
    headline, subheadline = "", None
    heading = element.find("h1") or element.find("h2")
    if heading is not None:
        headline = _text(heading)
        p = element.find("p")
        if p is not None:
            subheadline = _text(p) or None
    else:
        # Repli : 1er / 2e texte non vide (nœuds texte ou <p> directs)
        texts = []
        for node in _content_root(element).children:
            if isinstance(node, Comment):
                continue
            if isinstance(node, NavigableString):
                text = str(node).strip()
            elif isinstance(node, Tag) and node.name == "p":
                text = _text(node)
            else:
                continue
            if text:
                texts.append(text)
        if texts:
            headline = texts[0]
            subheadline = texts[1] if len(texts) > 1 else None
    return HeroBlock(
        id=block_id, order_id=order_id, styles=styles,
        content=HeroContent(headline=headline, subheadline=subheadline),
    )


def parse_text_block(element: Tag, block_id: str, order_id: int, styles: BlockStyles) -> TextBlock:
    content = TextContent(text=_text(element))
    link = element.find("a", href=True)
    if link is not None and _text(link) and _text(link) in content.text:
        content.link_text = _text(link)
        content.link_url = link["href"]
    return TextBlock(id=block_id, order_id=order_id, styles=styles, content=content)


def parse_image_block(element: Tag, block_id: str, order_id: int, styles: BlockStyles) -> ImageBlock:
    img = element.find("img")
    link = element.find("a")
    caption = element.find("p")
    content = ImageContent(
        image_url=(img.get("src") if img is not None else None) or "",
        image_alt=(img.get("alt") if img is not None else None) or "",
        image_width=_int_attr(img, "width"),
        image_height=_int_attr(img, "height"),
        caption=_text(caption) or None,
        link_url=(link.get("href") if link is not None else None) or None,
    )
    return ImageBlock(id=block_id, order_id=order_id, styles=styles, content=content)


def parse_button_block(element: Tag, block_id: str, order_id: int, styles: BlockStyles) -> ButtonBlock:
    link = element.find("a")
    # variante non récupérable depuis le HTML : primary par défaut
    content = ButtonContent(
        text=_text(link),
        url=(link.get("href") if link is not None else None) or "#",
        button_style="primary",
    )
    return ButtonBlock(id=block_id, order_id=order_id, styles=styles, content=content)


def parse_divider_block(element: Tag, block_id: str, order_id: int, styles: BlockStyles) -> DividerBlock:
    content = DividerContent(divider_type="line", thickness=1)
    marker = element.find(attrs={"data-divider-type": True})
    if marker is not None:
        declarations = parse_inline_styles(marker.get("style"))
        if marker.get("data-divider-type") == "space":
            match = _PX_RE.match(declarations.get("height", ""))
            content = DividerContent(
                divider_type="space", height=int(match.group(1)) if match else None,
            )
        else:
            match = re.search(r"(\d+)px", declarations.get("border-top", ""))
            content = DividerContent(
                divider_type="line", thickness=int(match.group(1)) if match else 1,
            )
    return DividerBlock(id=block_id, order_id=order_id, styles=styles, content=content)


def parse_footer_block(element: Tag, block_id: str, order_id: int, styles: BlockStyles) -> FooterBlock:
    content = footer_from_paragraphs(element) or footer_from_text(element)
    return FooterBlock(id=block_id, order_id=order_id, styles=styles, content=content)


def parse_features_block(element: Tag, block_id: str, order_id: int, styles: BlockStyles) -> FeaturesBlock:
    features = (
        features_from_items(element)
        or features_from_paragraphs(element)
        or placeholder_features()
    )
    content = FeaturesContent(
        title=features_title(element),
        features=features,
        layout=features_layout(element),
    )
    return FeaturesBlock(id=block_id, order_id=order_id, styles=styles, content=content)


# ── Registry data-block-type → parser ────────────────────────────────────────

_BLOCK_PARSERS: dict = {
    "header":   parse_header_block,
    "hero":     parse_hero_block,
    "text":     parse_text_block,
    "image":    parse_image_block,
    "button":   parse_button_block,
    "divider":  parse_divider_block,
    "footer":   parse_footer_block,
    "features": parse_features_block,
}
