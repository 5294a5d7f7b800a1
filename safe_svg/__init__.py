"""
safe_svg — rendu serveur du bloc « SVG icon » (SVG inline + styles du design system).

Usage:
    >>> from safe_svg import LocalMediaLibrary, SvgIconRenderer
    >>> media = LocalMediaLibrary("./media", {42: "logo.svg"})
    >>> html = SvgIconRenderer(media).render({"imageID": 42, "dimensionWidth": 64})

Usage (hooks):
    >>> from safe_svg import RenderHooks
    >>> hooks = RenderHooks()
    >>> hooks.add_inline_class(lambda c: c + " icon")
    >>> html = SvgIconRenderer(media, hooks=hooks).render({"imageID": 42})
"""

from .blocks import BaseBlock, BlockAttributes, SvgIconBlock, SvgIconStyle, SpacingStyle, ColorStyle
from .config import Settings, get_settings, configure_logging
from .core import (
    convert_to_css_variable, preset_color, preset_variable,
    MediaLibrary, LocalMediaLibrary, SVG_MIME_TYPE,
)
from .renderer import (
    BlockRenderer, Escaper, escape_attribute,
    patch_svg_dimensions, format_dimension,
    StylePropertyMap, add_css_property_prefix, render_css_property_string,
    render_inline_css, resolve_style, resolve_style_properties,
    DEFAULT_INLINE_CLASS, RenderHooks, SvgIconRenderer, compose_wrapper,
    is_renderable, load_contents, render_svg_icon_block,
)

__version__ = "0.1.0"

__all__ = [
    # blocs
    "BaseBlock", "BlockAttributes", "SvgIconBlock", "SvgIconStyle", "SpacingStyle", "ColorStyle",
    # config
    "Settings", "get_settings", "configure_logging",
    # core
    "convert_to_css_variable", "preset_color", "preset_variable",
    "MediaLibrary", "LocalMediaLibrary", "SVG_MIME_TYPE",
    # renderer
    "BlockRenderer", "Escaper", "escape_attribute",
    "patch_svg_dimensions", "format_dimension",
    "StylePropertyMap", "add_css_property_prefix", "render_css_property_string",
    "render_inline_css", "resolve_style", "resolve_style_properties",
    "DEFAULT_INLINE_CLASS", "RenderHooks", "SvgIconRenderer", "compose_wrapper",
    "is_renderable", "load_contents", "render_svg_icon_block",
]
