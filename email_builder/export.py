"""
Préparation du HTML rendu pour l'export (fichier .html autonome).

Le téléchargement lui-même reste côté appelant.
"""
import re
from datetime import datetime, timezone
from typing import Optional

from bs4 import BeautifulSoup, Doctype, Tag

DEFAULT_EXPORT_TITLE = "Email Template"

EMAIL_COMPATIBILITY_CSS = """
    /* Compatibilité clients email */
    body {
      margin: 0;
      padding: 0;
      -webkit-text-size-adjust: 100%;
      -ms-text-size-adjust: 100%;
    }

    table {
      border-collapse: collapse;
      mso-table-lspace: 0pt;
      mso-table-rspace: 0pt;
    }

    img {
      border: 0;
      height: auto;
      line-height: 100%;
      outline: none;
      text-decoration: none;
      -ms-interpolation-mode: bicubic;
    }

    /* Outlook */
    .ExternalClass {
      width: 100%;
    }

    .ExternalClass,
    .ExternalClass p,
    .ExternalClass span,
    .ExternalClass font,
    .ExternalClass td,
    .ExternalClass div {
      line-height: 100%;
    }

    /* Mobile */
    @media only screen and (max-width: 600px) {
      table[class="main"] {
        width: 100% !important;
      }

      td[class="mobile-padding"] {
        padding: 20px !important;
      }

      img[class="mobile-image"] {
        width: 100% !important;
        height: auto !important;
      }
    }
"""

_BLOCK_ATTRIBUTES = ("data-block-id", "data-block-type")


def _has_compatibility_styles(head: Tag) -> bool:
    return any(".ExternalClass" in style.get_text() for style in head.find_all("style"))


def _ensure_head(soup: BeautifulSoup) -> Tag:
    """<head> existant, sinon créé (et <html> autour du fragment si absent)."""
    head = soup.find("head")
    if head is not None:
        return head
    html = soup.find("html")
    if html is None:
        html = soup.new_tag("html")
        for node in [n for n in soup.contents if not isinstance(n, Doctype)]:
            html.append(node.extract())
        soup.append(html)
    head = soup.new_tag("head")
    html.insert(0, head)
    return head


def prepare_for_export(html: str, include_styles: bool = True) -> str:
    """
    Complète un HTML email pour l'export.

    - DOCTYPE, meta charset, meta viewport et <title> ajoutés s'ils manquent
    - bloc <style> de compatibilité clients email si include_styles et absent
    - attributs data-block-id / data-block-type retirés
    """
    soup = BeautifulSoup(html, "html.parser")
    if not any(isinstance(node, Doctype) for node in soup.contents):
        soup.insert(0, Doctype("html"))

    head = _ensure_head(soup)
    if head.find("meta", charset=True) is None:
        head.insert(0, soup.new_tag("meta", attrs={"charset": "UTF-8"}))
    if head.find("meta", attrs={"name": "viewport"}) is None:
        head.append(soup.new_tag("meta", attrs={
            "name": "viewport", "content": "width=device-width, initial-scale=1.0",
        }))
    if head.find("title") is None:
        title = soup.new_tag("title")
        title.string = DEFAULT_EXPORT_TITLE
        head.append(title)
    if include_styles and not _has_compatibility_styles(head):
        style = soup.new_tag("style")
        style.string = EMAIL_COMPATIBILITY_CSS
        head.append(style)

    for element in soup.select("[data-block-id], [data-block-type]"):
        for attr in _BLOCK_ATTRIBUTES:
            element.attrs.pop(attr, None)

    return str(soup)


def generate_filename(subject: Optional[str], now: Optional[datetime] = None) -> str:
    """'Summer Sale 50%' → 'summer-sale-50-2026-10-17T09-30-00.html' (sujet vide → email-template)."""
    now = now or datetime.now(timezone.utc)
    timestamp = re.sub(r"[:.]", "-", now.strftime("%Y-%m-%dT%H:%M:%S"))
    slug = ""
    if subject:
        slug = re.sub(r"[^a-zA-Z0-9\s-]", "", subject)
        slug = re.sub(r"\s+", "-", slug.strip()).lower()[:50]
    return f"{slug or 'email-template'}-{timestamp}.html"
