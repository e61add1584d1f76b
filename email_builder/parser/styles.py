"""
Extraction des styles inline d'un élément bloc → BlockStyles.

Ordre de lecture : style de l'élément, puis cellule de contenu du bloc
(1er <td> d'une ligne <tr>), puis text-align du <td> ancêtre le plus proche.
Alignement par défaut : center.
"""
from typing import Dict, Optional

from bs4 import Tag

from ..blocks.base import BlockStyles, ALIGNMENTS, FONT_WEIGHTS
from ..core.styles import size_option_for

# propriété CSS → champ BlockStyles (valeurs reconverties en bucket)
_BUCKET_PROPERTIES = {
    "padding":       "padding",
    "font-size":     "font_size",
    "line-height":   "line_height",
    "border-radius": "border_radius",
}


def parse_inline_styles(style: Optional[str]) -> Dict[str, str]:
    """'a: 1; B: 2' → {'a': '1', 'b': '2'} (propriétés en minuscules, déclarations vides ignorées)."""
    declarations: Dict[str, str] = {}
    if not style:
        return declarations
    for declaration in style.split(";"):
        prop, sep, value = declaration.partition(":")
        prop, value = prop.strip().lower(), value.strip()
        if sep and prop and value:
            declarations[prop] = value
    return declarations


def content_cell(element: Tag) -> Optional[Tag]:
    """Cellule portant le style d'un bloc rendu (<tr><td style=…>)."""
    if element.name == "tr":
        return element.find("td", recursive=False)
    return None


def extract_block_styles(element: Tag) -> BlockStyles:
    cell = content_cell(element)
    declarations = {}
    if cell is not None:
        declarations.update(parse_inline_styles(cell.get("style")))
    # le style propre de l'élément l'emporte sur celui de sa cellule
    declarations.update(parse_inline_styles(element.get("style")))

    values: dict = {}
    align = declarations.get("text-align")
    if align in ALIGNMENTS:
        values["text_align"] = align
    if declarations.get("color"):
        values["text_color"] = declarations["color"]
    if declarations.get("background-color"):
        values["background_color"] = declarations["background-color"]
    if declarations.get("font-family"):
        values["font_family"] = declarations["font-family"]
    if declarations.get("font-weight") in FONT_WEIGHTS:
        values["font_weight"] = declarations["font-weight"]
    for prop, field in _BUCKET_PROPERTIES.items():
        if prop in declarations:
            option = size_option_for(field, declarations[prop])
            if option is not None:
                values[field] = option

    if "text_align" not in values:
        parent_td = element.find_parent("td")
        if parent_td is not None:
            parent_align = parse_inline_styles(parent_td.get("style")).get("text-align")
            if parent_align in ALIGNMENTS:
                values["text_align"] = parent_align
    values.setdefault("text_align", "center")

    return BlockStyles(**values)
