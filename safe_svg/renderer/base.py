"""
Protocol Renderer — interface pluggable pour les renderers de blocs.
"""
import html
from typing import Any, Callable, Mapping, Protocol, runtime_checkable

# Neutralise une chaîne pour une valeur d'attribut HTML (collaborateur hôte)
Escaper = Callable[[str], str]


def escape_attribute(value: str) -> str:
    """Échappement par défaut : & < > " ' → entités."""
    return html.escape(value, quote=True)


@runtime_checkable
class BlockRenderer(Protocol):
    def render(self, attributes: Mapping[str, Any]) -> str: ...
