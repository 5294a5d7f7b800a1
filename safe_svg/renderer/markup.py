"""
Patch du balisage SVG — fixe width/height sur la première balise <svg>.

Scan séquentiel des balises (commentaires, déclarations et <?xml?> ignorés).
Pas de <svg> → balisage retourné tel quel, ce n'est pas une erreur.
"""
import logging
import re
from typing import Optional, Union

from .base import Escaper, escape_attribute

log = logging.getLogger(__name__)

Dimension = Optional[Union[int, float]]

_TOKEN_RE = re.compile(
    r"<!--.*?-->"
    r"|<!\[CDATA\[.*?\]\]>"
    r"|<![^>]*>"
    r"|<\?.*?\?>"
    r"""|<(?P<name>[A-Za-z][^\s/>]*)(?P<attrs>(?:"[^"]*"|'[^']*'|[^'">])*)>""",
    re.S,
)

_ATTR_RE = re.compile(
    r"""(?P<ws>\s*)(?P<name>[^\s"'>/=]+)(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'>]+))?"""
)


def format_dimension(value: Dimension) -> str:
    """64 → "64px", 12.5 → "12.5px", 10.0 → "10px", None → "auto"."""
    if value is None:
        return "auto"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}px"


def find_svg_tag(markup: str) -> Optional[re.Match]:
    """Première balise ouvrante dont le nom est svg (insensible à la casse)."""
    for m in _TOKEN_RE.finditer(markup):
        name = m.group("name")
        if name is not None and name.lower() == "svg":
            return m
    return None


def set_attributes(attrs: str, values: dict) -> str:
    """
    Fixe chaque attribut de `values` dans le texte d'attributs d'une balise.
    Existant → remplacé à sa place (doublons retirés). Absent → inséré en tête.
    """
    edits = []
    inserted = ""
    for name, value in values.items():
        rendered = f'{name}="{value}"'
        found = False
        for m in _ATTR_RE.finditer(attrs):
            if m.group("name").lower() != name:
                continue
            if not found:
                edits.append((m.start("name"), m.end(), rendered))
                found = True
            else:
                edits.append((m.start(), m.end(), ""))
        if not found:
            inserted += f" {rendered}"

    for start, end, replacement in sorted(edits, reverse=True):
        attrs = attrs[:start] + replacement + attrs[end:]
    return inserted + attrs


def patch_svg_dimensions(
    markup: str,
    width: Dimension = None,
    height: Dimension = None,
    escape: Escaper = escape_attribute,
) -> str:
    """Fixe width/height ("<n>px" ou "auto") sur la première balise <svg>."""
    m = find_svg_tag(markup)
    if m is None:
        log.debug("Aucune balise <svg> trouvée, balisage inchangé")
        return markup

    attrs = set_attributes(m.group("attrs"), {
        "width": escape(format_dimension(width)),
        "height": escape(format_dimension(height)),
    })
    return markup[:m.start("attrs")] + attrs + markup[m.end("attrs"):]
