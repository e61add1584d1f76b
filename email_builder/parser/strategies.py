"""
Stratégies d'extraction par paliers pour les blocs à structure libre (footer, features).

Chaque palier est une fonction pure, testable isolément :
  footer   : paragraphes structurés → texte brut
  features : items (<li>, .feature-item, .feature) → paragraphes → placeholder
"""
import re
from typing import Iterable, List, Optional, Tuple

from bs4 import Tag

from ..blocks import FeatureItem, FooterContent, SocialLink, SOCIAL_PLATFORMS, DEFAULT_FEATURE_ICON

# Emoji/symbole en tête de texte : "🚀 Rapide" → ("🚀", "Rapide")
_ICON_RE = re.compile(r"^([^\w\s]+)\s*(.*)$", re.DOTALL)
_TITLE_SEPARATORS_RE = re.compile(r"[:\-–—]")
# Nom composé d'un seul motif répété : "AcmeAcme", "Acme Acme"
_REPEATED_RE = re.compile(r"^(.{2,}?)(?:\s*\1)+$")
_UNSUBSCRIBE_TAIL_RE = re.compile(r"Unsubscribe.*$", re.IGNORECASE)
_PRIVACY_TAIL_RE = re.compile(r"Privacy Policy.*$", re.IGNORECASE)


def _text(tag: Optional[Tag]) -> str:
    return tag.get_text().strip() if tag is not None else ""


def _inside(tag: Tag, containers: Iterable[Tag]) -> bool:
    ids = {id(c) for c in containers}
    return any(id(parent) in ids for parent in tag.parents)


# ── Texte ────────────────────────────────────────────────────────────────────

def split_icon(text: str) -> Tuple[Optional[str], str]:
    """Sépare un emoji/symbole de tête du reste du texte."""
    text = text.strip()
    match = _ICON_RE.match(text)
    if match:
        return match.group(1), match.group(2).strip()
    return None, text


def split_title_description(text: str) -> Tuple[str, str]:
    """'Titre: description' (ou -, –, —) → (titre, description)."""
    parts = _TITLE_SEPARATORS_RE.split(text)
    if len(parts) >= 2:
        return parts[0].strip(), ":".join(parts[1:]).strip()
    return text.strip(), ""


def clean_company_name(name: str) -> str:
    """Retire le texte de désinscription/confidentialité agrégé et les répétitions, normalise les espaces."""
    name = re.sub(r"\s+", " ", name).strip()
    name = _UNSUBSCRIBE_TAIL_RE.sub("", name)
    name = _PRIVACY_TAIL_RE.sub("", name).strip()
    match = _REPEATED_RE.match(name)
    if match:
        name = match.group(1)
    return name.strip()


# ── Footer ───────────────────────────────────────────────────────────────────

def _apply_footer_link(content: FooterContent, link: Tag) -> None:
    label = _text(link)
    lowered = label.lower()
    href = link.get("href") or "#"
    if "unsubscribe" in lowered:
        content.unsubscribe_text = label or "Unsubscribe"
        content.unsubscribe_url = href
    elif "privacy" in lowered:
        content.privacy_policy_text = label or "Privacy Policy"
        content.privacy_policy_url = href
    elif lowered in SOCIAL_PLATFORMS:
        content.social_links.append(SocialLink(platform=lowered, url=href))


def _address_lines(p: Tag) -> Optional[str]:
    lines = [line.strip() for line in p.get_text("\n").split("\n")]
    return "\n".join(line for line in lines if line) or None


def _is_tagged_footer(paragraphs: List[Tag]) -> bool:
    """Paragraphes balisés footer__* : produits par notre propre renderer."""
    return any(cls.startswith("footer__") for p in paragraphs for cls in p.get("class", []))


def footer_from_paragraphs(element: Tag) -> Optional[FooterContent]:
    """
    Palier structuré, liens reconnus par leur libellé.

    Footer balisé (footer__company, footer__address…) : lecture exacte, sans
    nettoyage. Sinon 1er paragraphe = entreprise (nettoyé), 1er paragraphe sans
    lien suivant = adresse.
    """
    paragraphs = element.find_all("p")
    if not paragraphs:
        return None

    content = FooterContent(unsubscribe_text="Unsubscribe", unsubscribe_url="#")

    if _is_tagged_footer(paragraphs):
        company_p = element.select_one("p.footer__company")
        if company_p is not None:
            strong = company_p.find("strong")
            content.company_name = _text(strong) if strong is not None else _text(company_p)
        address_p = element.select_one("p.footer__address")
    else:
        company_p = paragraphs[0]
        strong = company_p.find("strong")
        name = _text(strong) if strong is not None else company_p.get_text(" ")
        content.company_name = clean_company_name(name)
        address_p = next(
            (p for p in paragraphs if p is not company_p and p.find("a") is None), None
        )

    if address_p is not None:
        content.address = _address_lines(address_p)

    for p in paragraphs:
        for link in p.find_all("a"):
            _apply_footer_link(content, link)
    return content


def footer_from_text(element: Tag) -> FooterContent:
    """Palier de repli : 1re ligne de texte = entreprise (nettoyée), 1er lien = désinscription."""
    content = FooterContent(unsubscribe_text="Unsubscribe", unsubscribe_url="#")
    lines = [line.strip() for line in element.get_text("\n").split("\n") if line.strip()]
    if lines:
        content.company_name = clean_company_name(lines[0])
    link = element.find("a", href=True)
    if link is not None:
        content.unsubscribe_text = _text(link) or "Unsubscribe"
        content.unsubscribe_url = link.get("href") or "#"
    return content


# ── Features ─────────────────────────────────────────────────────────────────

def feature_items(element: Tag) -> List[Tag]:
    return element.select("li, .feature-item, .feature")


def _feature_from_item(item: Tag) -> Optional[FeatureItem]:
    icon_el = item.select_one(".feature-icon")
    title_el = item.select_one("h4, strong, .feature-title")
    desc_el = item.select_one("p, .feature-description")

    if title_el is None:
        children = [
            child for child in item.children
            if isinstance(child, Tag) and child is not icon_el and child is not desc_el
            and not (icon_el is not None and _inside(icon_el, [child]))
        ]
        if children:
            title_el = children[0]
            if desc_el is None and children[-1] is not title_el:
                desc_el = children[-1]
        elif desc_el is None:
            # item purement textuel : "🚀 Rapide: déploiement en 1 clic"
            title, description = split_title_description(_text(item))
            icon, title = split_icon(title)
            if not title and not description:
                return None
            return FeatureItem(icon=icon or DEFAULT_FEATURE_ICON, title=title, description=description)

    if icon_el is not None:
        icon, title = _text(icon_el) or None, _text(title_el)
    else:
        icon, title = split_icon(_text(title_el))

    description = _text(desc_el) if desc_el is not None and desc_el is not title_el else ""
    # un .feature-title balisé (même vide) reste une entrée
    if not title and not description and item.select_one(".feature-title") is None:
        return None
    return FeatureItem(icon=icon or DEFAULT_FEATURE_ICON, title=title, description=description)


def features_from_items(element: Tag) -> List[FeatureItem]:
    """Palier structuré : <li>, .feature-item ou .feature."""
    features = []
    for item in feature_items(element):
        feature = _feature_from_item(item)
        if feature is not None:
            features.append(feature)
    return features


def features_from_paragraphs(element: Tag) -> List[FeatureItem]:
    """Palier de repli : un <p> par fonctionnalité, titre/description séparés par : - – —."""
    features = []
    for p in element.find_all("p"):
        text = _text(p)
        if not text or "unsubscribe" in text.lower():
            continue
        title, description = split_title_description(text)
        icon, title = split_icon(title)
        if not title and not description:
            continue
        features.append(FeatureItem(icon=icon or DEFAULT_FEATURE_ICON, title=title, description=description))
    return features


def placeholder_features() -> List[FeatureItem]:
    """Dernier palier : le tableau features n'est jamais vide après parsing."""
    return [FeatureItem(icon=DEFAULT_FEATURE_ICON, title="Feature", description="Feature description")]


def features_title(element: Tag) -> Optional[str]:
    """Titre de section : <h2>/<h3>, sinon 1er <strong> hors des items."""
    heading = element.select_one("h2, h3")
    if heading is not None:
        return _text(heading) or None
    items = feature_items(element)
    for strong in element.find_all("strong"):
        if not _inside(strong, items):
            return _text(strong) or None
    return None


def features_layout(element: Tag) -> str:
    container = element.select_one(".features")
    if container is not None:
        for cls in container.get("class", []):
            layout = cls.partition("features--")[2]
            if layout in ("list", "grid", "columns"):
                return layout
    return "grid" if element.find("table") is not None else "list"
