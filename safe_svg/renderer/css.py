"""
Styles inline du conteneur intérieur — padding/margin/couleurs → attribut style.

Pipeline :
  add_css_property_prefix(padding, "padding")  →  {"padding-top": "10px", ...}
  add_css_property_prefix(margin, "margin")    →  {"margin-left": "var:preset|spacing|20", ...}
  convert_to_css_variable() sur chaque valeur  →  var(--wp--preset--spacing--20)
  background-color puis color (toujours présents, éventuellement vides)
  render_inline_css()                          →  "padding-top: 10px; color: #000;"

L'ordre d'insertion du dict fixe l'ordre des déclarations.
"""
from typing import Any, Dict, Mapping, Optional

from ..blocks.svg_icon import SvgIconBlock
from ..core.design_system import convert_to_css_variable, preset_color

# propriété CSS → valeur, ordonné
StylePropertyMap = Dict[str, str]


def add_css_property_prefix(properties: Optional[Mapping[str, Any]], prefix: str) -> StylePropertyMap:
    """{"top": "1px"} + "padding" → {"padding-top": "1px"}"""
    if not properties:
        return {}
    return {
        f"{prefix}-{side}": "" if value is None else str(value)
        for side, value in properties.items()
    }


def render_css_property_string(prop: str, value: str) -> str:
    """Une déclaration "prop: value;" — vide si la valeur est vide."""
    if not value:
        return ""
    return f"{prop}: {value};"


def render_inline_css(styles: Mapping[str, str]) -> str:
    """Déclarations non vides, séparées par une espace."""
    declarations = [render_css_property_string(p, v) for p, v in styles.items()]
    return " ".join(d for d in declarations if d)


def _color(slot: Optional[str], raw: Optional[str]) -> str:
    # slot nommé du design system prioritaire, sinon valeur brute
    if slot:
        return preset_color(slot)
    return raw or ""


def resolve_style_properties(block: SvgIconBlock) -> StylePropertyMap:
    """Construit la StylePropertyMap ordonnée d'un bloc (avant rendu en chaîne)."""
    spacing = block.style.spacing
    color = block.style.color

    styles: StylePropertyMap = {}
    styles.update(add_css_property_prefix(spacing.padding, "padding"))
    styles.update(add_css_property_prefix(spacing.margin, "margin"))
    styles = {prop: convert_to_css_variable(value) for prop, value in styles.items()}

    styles["background-color"] = _color(block.background_color, color.background)
    styles["color"] = _color(block.text_color, color.text)
    return styles


def resolve_style(block: SvgIconBlock) -> str:
    """Attribut style du conteneur intérieur (chaîne éventuellement vide)."""
    return render_inline_css(resolve_style_properties(block))
