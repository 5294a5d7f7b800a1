"""Renderers — patch SVG, styles inline, wrapper HTML."""
from .base import BlockRenderer, Escaper, escape_attribute
from .markup import patch_svg_dimensions, format_dimension
from .css import (
    StylePropertyMap,
    add_css_property_prefix,
    render_css_property_string,
    render_inline_css,
    resolve_style,
    resolve_style_properties,
)
from .html import (
    DEFAULT_INLINE_CLASS,
    RenderHooks,
    SvgIconRenderer,
    compose_wrapper,
    is_renderable,
    load_contents,
    render_svg_icon_block,
)

__all__ = [
    "BlockRenderer", "Escaper", "escape_attribute",
    "patch_svg_dimensions", "format_dimension",
    "StylePropertyMap", "add_css_property_prefix", "render_css_property_string",
    "render_inline_css", "resolve_style", "resolve_style_properties",
    "DEFAULT_INLINE_CLASS", "RenderHooks", "SvgIconRenderer", "compose_wrapper",
    "is_renderable", "load_contents", "render_svg_icon_block",
]
