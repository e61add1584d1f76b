"""
Renderer HTML email — génère un document HTML compatible clients mail
(layout en tables, styles inline, particularités Outlook/MSO).

Chaque bloc produit une ligne <tr data-block-id=… data-block-type=…> : ces deux
attributs sont le seul contrat dont dépend le parser pour retrouver les blocs.
Fonction pure et déterministe (aucune date, aucun état).
"""
import logging
from typing import Optional

from ..core.schemas import EmailDocument
from ..blocks import (
    BaseBlock, HeaderBlock, HeroBlock, TextBlock, ImageBlock, ButtonBlock,
    DividerBlock, FooterBlock, FeaturesBlock, DEFAULT_FEATURE_ICON,
)
from .css import cell_style, block_alignment, resolve_button_colors, ACCENT_COLOR

log = logging.getLogger(__name__)

MUTED_COLOR = "#666"
DIVIDER_COLOR = "#e5e7eb"


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_email(document: EmailDocument) -> str:
    """Génère le HTML complet d'un email (blocs triés par orderId)."""
    rows = "\n".join(
        html for html in (render_block(b) for b in document.ordered_blocks()) if html
    )
    g = document.global_styles

    preheader_html = ""
    if document.preheader:
        preheader_html = (
            '<div style="display: none; max-height: 0; overflow: hidden; '
            f'mso-hide: all;">{document.preheader}</div>\n  '
        )

    return f"""<!DOCTYPE html>
<html lang="en" xmlns="http://www.w3.org/1999/xhtml" xmlns:o="urn:schemas-microsoft-com:office:office">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta http-equiv="X-UA-Compatible" content="IE=edge">
  <title>{document.subject or 'Email'}</title>
  <!--[if mso]>
  <xml><o:OfficeDocumentSettings><o:PixelsPerInch>96</o:PixelsPerInch></o:OfficeDocumentSettings></xml>
  <![endif]-->
</head>
<body style="margin: 0; padding: 0; background-color: {g.background_color};">
  {preheader_html}<table role="presentation" width="100%" cellpadding="0" cellspacing="0" border="0">
    <tr>
      <td align="center">
        <table role="presentation" width="{g.container_width}" cellpadding="0" cellspacing="0" border="0" style="background-color: {g.container_background_color}; font-family: {g.font_family};">
{rows}
        </table>
      </td>
    </tr>
  </table>
</body>
</html>"""


# ── Dispatch bloc ────────────────────────────────────────────────────────────

def render_block(block: BaseBlock) -> str:
    """Dispatch vers le renderer du bloc ; type inconnu → chaîne vide."""
    if isinstance(block, HeaderBlock):   return render_header_block(block)
    if isinstance(block, HeroBlock):     return render_hero_block(block)
    if isinstance(block, TextBlock):     return render_text_block(block)
    if isinstance(block, ImageBlock):    return render_image_block(block)
    if isinstance(block, ButtonBlock):   return render_button_block(block)
    if isinstance(block, DividerBlock):  return render_divider_block(block)
    if isinstance(block, FooterBlock):   return render_footer_block(block)
    if isinstance(block, FeaturesBlock): return render_features_block(block)

    log.warning("Bloc ignoré au rendu : type inconnu %r (id=%r)",
                getattr(block, "block_type", "?"), getattr(block, "id", "?"))
    return ""


def _row(block: BaseBlock, inner: str, style: Optional[str] = None) -> str:
    """Ligne de tableau d'un bloc — porte les attributs data-block-* une seule fois."""
    return f"""<tr data-block-id="{block.id}" data-block-type="{block.block_type}">
  <td style="{style if style is not None else cell_style(block)}">
    {inner}
  </td>
</tr>"""


def _dimension_attrs(width: Optional[int], height: Optional[int]) -> str:
    attrs = ""
    if width:
        attrs += f' width="{width}"'
    if height:
        attrs += f' height="{height}"'
    return attrs


# ── Renderers blocs ──────────────────────────────────────────────────────────

def render_header_block(b: HeaderBlock) -> str:
    c = b.content
    if c.image_url:
        # Logo plafonné à ~200px, centré
        inner = (
            f'<img src="{c.image_url}" alt="{c.image_alt or ""}"'
            f'{_dimension_attrs(c.image_width, c.image_height)} '
            'style="display: block; margin: 0 auto; max-width: 200px; height: auto; border: 0;" />'
        )
    else:
        inner = (
            '<h1 style="margin: 0; font-size: 32px; font-weight: bold; line-height: 1.2;">'
            f'{c.text or "Company Name"}</h1>'
        )
    return _row(b, inner)


def render_hero_block(b: HeroBlock) -> str:
    c = b.content
    sub = ""
    if c.subheadline:
        sub = f'\n    <p style="margin: 10px 0 0 0; font-size: 18px; line-height: 1.4;">{c.subheadline}</p>'
    inner = f'<h1 style="margin: 0; font-size: 48px; font-weight: bold; line-height: 1.2;">{c.headline}</h1>{sub}'
    return _row(b, inner)


def render_text_block(b: TextBlock) -> str:
    c = b.content
    body = c.text
    # Lien appliqué seulement si linkText est une sous-chaîne littérale du texte (1re occurrence)
    if c.link_text and c.link_url and c.link_text in body:
        before, after = body.split(c.link_text, 1)
        link = (
            f'<a href="{c.link_url}" style="color: {ACCENT_COLOR}; text-decoration: underline;">'
            f'{c.link_text}</a>'
        )
        body = f"{before}{link}{after}"
    return _row(b, f'<p style="margin: 0; line-height: 1.6;">{body}</p>')


def render_image_block(b: ImageBlock) -> str:
    c = b.content
    img = (
        f'<img src="{c.image_url}" alt="{c.image_alt}"'
        f'{_dimension_attrs(c.image_width, c.image_height)} '
        'style="max-width: 100%; height: auto; display: block; border: 0;" />'
    )
    if c.link_url:
        img = f'<a href="{c.link_url}" style="display: inline-block;">{img}</a>'
    caption = ""
    if c.caption:
        caption = (
            f'\n    <p style="margin: 8px 0 0 0; font-size: 12px; line-height: 1.4; '
            f'color: {MUTED_COLOR};">{c.caption}</p>'
        )
    return _row(b, f'<div style="display: inline-block;">{img}</div>{caption}')


def render_button_block(b: ButtonBlock) -> str:
    c = b.content
    colors = resolve_button_colors(c)
    link_style = (
        "display: inline-block; padding: 12px 24px; "
        f"background-color: {colors.background}; color: {colors.text}; border: {colors.border}; "
        "text-decoration: none; border-radius: 6px; font-family: Arial, sans-serif; "
        "font-size: 16px; font-weight: bold;"
    )
    inner = f'<div style="display: inline-block;"><a href="{c.url}" style="{link_style}">{c.text}</a></div>'
    return _row(b, inner)


def render_divider_block(b: DividerBlock) -> str:
    c = b.content
    if c.divider_type == "space":
        height = c.height or 20
        inner = (
            f'<div data-divider-type="space" style="height: {height}px; line-height: {height}px; '
            'font-size: 1px;">&nbsp;</div>'
        )
    else:
        color = b.styles.border_color or DIVIDER_COLOR
        inner = (
            f'<hr data-divider-type="line" style="border: none; border-top: {c.thickness or 1}px '
            f'solid {color}; margin: 20px 0; width: 100%;" />'
        )
    return _row(b, inner)


def render_footer_block(b: FooterBlock) -> str:
    c = b.content
    parts = []

    if c.company_name:
        parts.append(
            '<p class="footer__company" style="margin: 0 0 10px 0; font-size: 14px; line-height: 1.4;">'
            f'<strong>{c.company_name}</strong></p>'
        )

    if c.address:
        address = "<br />".join(line.strip() for line in c.address.splitlines())
        parts.append(
            '<p class="footer__address" style="margin: 0 0 10px 0; font-size: 12px; line-height: 1.4; '
            f'color: {MUTED_COLOR};">{address}</p>'
        )

    if c.social_links:
        social = " · ".join(
            f'<a href="{link.url}" style="color: {MUTED_COLOR}; text-decoration: none;">'
            f'{link.platform.capitalize()}</a>'
            for link in c.social_links
        )
        parts.append(
            '<p class="footer__social" style="margin: 0 0 10px 0; font-size: 12px; line-height: 1.4;">'
            f'{social}</p>'
        )

    links = []
    if c.unsubscribe_text and c.unsubscribe_url:
        links.append(
            f'<a href="{c.unsubscribe_url}" style="color: {MUTED_COLOR}; text-decoration: underline;">'
            f'{c.unsubscribe_text}</a>'
        )
    if c.privacy_policy_text and c.privacy_policy_url:
        links.append(
            f'<a href="{c.privacy_policy_url}" style="color: {MUTED_COLOR}; text-decoration: underline;">'
            f'{c.privacy_policy_text}</a>'
        )
    if links:
        parts.append(
            '<p class="footer__links" style="margin: 10px 0 0 0; font-size: 12px; line-height: 1.4; '
            f'color: {MUTED_COLOR};">{" | ".join(links)}</p>'
        )

    # Footer toujours centré, quel que soit styles.textAlign
    return _row(b, "".join(parts), style=cell_style(b, force_align="center"))


def render_features_block(b: FeaturesBlock) -> str:
    c = b.content
    layout = c.layout or "list"
    align = block_alignment(b)

    title_html = ""
    if c.title:
        title_html = (
            '<h3 style="margin: 0 0 20px 0; font-size: 18px; font-weight: 600; line-height: 1.3;">'
            f'{c.title}</h3>\n    '
        )

    if layout in ("grid", "columns"):
        features_html = _features_table(c.features, layout, align)
    else:
        features_html = _features_list(c.features, align)
    return _row(b, f"{title_html}{features_html}")


def _feature_description(description: str) -> str:
    if not description:
        return ""
    return (
        '<p class="feature-description" style="margin: 0; font-size: 12px; line-height: 1.4; '
        f'color: {MUTED_COLOR};">{description}</p>'
    )


def _features_list(features: list, align: str) -> str:
    items = ""
    for index, feature in enumerate(features):
        margin_bottom = "15px" if index < len(features) - 1 else "0"
        items += f"""
      <div class="feature-item" style="display: flex; align-items: flex-start; margin-bottom: {margin_bottom}; text-align: {align};">
        <div style="flex-shrink: 0; margin-right: 12px; margin-top: 2px;"><span class="feature-icon" style="font-size: 18px; line-height: 1;">{feature.icon or DEFAULT_FEATURE_ICON}</span></div>
        <div style="flex: 1;"><h4 class="feature-title" style="margin: 0 0 4px 0; font-size: 14px; font-weight: 600; line-height: 1.3;">{feature.title}</h4>{_feature_description(feature.description)}</div>
      </div>"""
    return f'<div class="features features--list" style="margin: 0;">{items}\n    </div>'


def _features_table(features: list, layout: str, align: str, per_row: int = 2) -> str:
    """Grille 2 colonnes en tableau HTML (flex/grid non supportés par les clients mail)."""
    cell_width = 100 // per_row
    rows = ""
    for start in range(0, len(features), per_row):
        cells = ""
        for feature in features[start:start + per_row]:
            cells += f"""
        <td width="{cell_width}%" style="padding: 10px; vertical-align: top;">
          <div class="feature-item" style="text-align: {align};">
            <div class="feature-icon" style="font-size: 20px; margin-bottom: 8px;">{feature.icon or DEFAULT_FEATURE_ICON}</div>
            <h4 class="feature-title" style="margin: 0 0 5px 0; font-size: 14px; font-weight: 600; line-height: 1.3;">{feature.title}</h4>{_feature_description(feature.description)}
          </div>
        </td>"""
        # Compléter la dernière ligne avec des cellules vides
        for _ in range(per_row - len(features[start:start + per_row])):
            cells += f'\n        <td width="{cell_width}%" style="padding: 10px;"></td>'
        rows += f"\n      <tr>{cells}\n      </tr>"
    return (
        f'<table class="features features--{layout}" role="presentation" width="100%" '
        f'cellpadding="0" cellspacing="0" style="margin: 0;">{rows}\n    </table>'
    )
