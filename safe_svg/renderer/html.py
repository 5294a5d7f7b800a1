"""
Renderer HTML du bloc SVG Icon — pipeline complet attributs → balisage.

  Guard (type MIME)  →  Loader (contenu fichier)  →  patch <svg>
  →  styles inline  →  wrapper  →  hooks

Échec MIME / lecture / attributs invalides → "" (jamais d'exception).
"""
import logging
from typing import Any, Callable, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..blocks.svg_icon import SvgIconBlock
from ..config import Settings, get_settings
from ..core.media import SVG_MIME_TYPE, LocalMediaLibrary, MediaId, MediaLibrary
from .base import Escaper, escape_attribute
from .css import resolve_style
from .markup import patch_svg_dimensions

log = logging.getLogger(__name__)

DEFAULT_INLINE_CLASS = "safe-svg-inline"

ClassHook = Callable[[str], str]
StyleHook = Callable[[str], str]
MarkupHook = Callable[[str, str, str, Optional[MediaId]], str]


# ── Hooks ───────────────────────────────────────────────────────────────────

class RenderHooks:
    """
    Intercepteurs optionnels, appliqués dans l'ordre d'ajout.

    Usage:
        >>> hooks = RenderHooks()
        >>> hooks.add_inline_class(lambda c: "my-icon")
        >>> hooks.add_inline_markup(lambda markup, svg, cls, image_id: svg)
    """

    def __init__(
        self,
        inline_class: Optional[List[ClassHook]] = None,
        inside_style: Optional[List[StyleHook]] = None,
        inline_markup: Optional[List[MarkupHook]] = None,
    ):
        self.inline_class: List[ClassHook] = list(inline_class or [])
        self.inside_style: List[StyleHook] = list(inside_style or [])
        self.inline_markup: List[MarkupHook] = list(inline_markup or [])

    def add_inline_class(self, hook: ClassHook):
        """Classe du wrapper intérieur (défaut "safe-svg-inline")."""
        self.inline_class.append(hook)

    def add_inside_style(self, hook: StyleHook):
        """Attribut style résolu, avant composition."""
        self.inside_style.append(hook)

    def add_inline_markup(self, hook: MarkupHook):
        """Balisage final (reçoit aussi le SVG patché, la classe et l'id média)."""
        self.inline_markup.append(hook)

    def filter_inline_class(self, class_name: str) -> str:
        for hook in self.inline_class:
            class_name = hook(class_name)
        return class_name

    def filter_inside_style(self, style: str) -> str:
        for hook in self.inside_style:
            style = hook(style)
        return style

    def filter_inline_markup(self, markup: str, svg: str, class_name: str, image_id: Optional[MediaId]) -> str:
        for hook in self.inline_markup:
            markup = hook(markup, svg, class_name, image_id)
        return markup


# ── Étapes ──────────────────────────────────────────────────────────────────

def is_renderable(mime_type: Optional[str]) -> bool:
    """Seul image/svg+xml est rendu inline."""
    return mime_type == SVG_MIME_TYPE


def load_contents(media: MediaLibrary, path: Optional[str]) -> Optional[str]:
    """
    Contenu texte du fichier, ou None si absent / illisible / vide.
    Un fichier vide est traité comme un échec de lecture.
    """
    if not path:
        return None
    try:
        raw = media.read_file(path)
    except OSError as e:
        log.debug("Lecture impossible %s : %s", path, e)
        return None
    if not raw:
        return None
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw


def compose_wrapper(
    svg: str,
    class_name: str,
    style: str,
    align: Optional[str] = None,
    escape: Escaper = escape_attribute,
) -> str:
    """Les deux conteneurs autour du SVG."""
    align_cls  = f" align{escape(align)}" if align else ""
    inside_cls = f" {escape(class_name)}" if class_name else ""
    style_attr = f' style="{escape(style)}"' if style else ""
    return (
        f'<div class="wp-block-safe-svg-svg-icon safe-svg-cover{align_cls}">'
        f'<div class="safe-svg-inside{inside_cls}"{style_attr}>{svg}</div>'
        f"</div>"
    )


# ── Pipeline ────────────────────────────────────────────────────────────────

class SvgIconRenderer:
    """
    Render callback du bloc safe-svg/svg-icon.

    Usage:
        >>> renderer = SvgIconRenderer(LocalMediaLibrary("./media", {42: "logo.svg"}))
        >>> html = renderer.render({"imageID": 42, "align": "wide"})
    """

    def __init__(
        self,
        media: MediaLibrary,
        hooks: Optional[RenderHooks] = None,
        escape: Escaper = escape_attribute,
        inline_class: str = DEFAULT_INLINE_CLASS,
    ):
        self.media = media
        self.hooks = hooks or RenderHooks()
        self.escape = escape
        self.inline_class = inline_class

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        index: Optional[Mapping[MediaId, str]] = None,
        hooks: Optional[RenderHooks] = None,
    ) -> "SvgIconRenderer":
        """Renderer sur LocalMediaLibrary(settings.media_root)."""
        settings = settings or get_settings()
        media = LocalMediaLibrary(settings.media_root, dict(index or {}))
        return cls(media, hooks=hooks, inline_class=settings.inline_class)

    def render(self, attributes: Union[Mapping[str, Any], SvgIconBlock]) -> str:
        """Attributs du bloc → balisage HTML, ou "" si le média n'est pas rendable."""
        if isinstance(attributes, SvgIconBlock):
            block = attributes
        else:
            try:
                block = SvgIconBlock.model_validate(dict(attributes))
            except ValidationError as e:
                log.warning("Attributs svg-icon invalides : %s", e)
                return ""
        return self.render_block(block)

    def render_block(self, block: SvgIconBlock) -> str:
        if block.image_id is None:
            log.debug("Bloc svg-icon sans imageID")
            return ""

        mime_type = self.media.get_mime_type(block.image_id)
        if not is_renderable(mime_type):
            log.debug("Média %s ignoré : type %r", block.image_id, mime_type)
            return ""

        contents = load_contents(self.media, self.media.get_attached_file(block.image_id))
        if contents is None:
            log.debug("Média %s : contenu illisible ou vide", block.image_id)
            return ""

        svg = patch_svg_dimensions(contents, block.dimension_width, block.dimension_height, self.escape)

        class_name = self.hooks.filter_inline_class(self.inline_class)
        if block.class_name:
            class_name = f"{class_name} {block.class_name}"

        style = self.hooks.filter_inside_style(resolve_style(block))
        return self.compose(svg, class_name, style, block.align, block.image_id)

    def compose(
        self,
        svg: str,
        class_name: str,
        style: str,
        align: Optional[str],
        image_id: Optional[MediaId],
    ) -> str:
        markup = compose_wrapper(svg, class_name, style, align, self.escape)
        return self.hooks.filter_inline_markup(markup, svg, class_name, image_id)


# ── Raccourci ───────────────────────────────────────────────────────────────

def render_svg_icon_block(
    attributes: Union[Mapping[str, Any], SvgIconBlock],
    media: MediaLibrary,
    hooks: Optional[RenderHooks] = None,
) -> str:
    """Rend un bloc en une ligne (renderer éphémère)."""
    return SvgIconRenderer(media, hooks=hooks).render(attributes)
