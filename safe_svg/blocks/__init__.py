"""
Blocs — exports publics.
"""
from .base import BaseBlock, BlockAttributes
from .svg_icon import SvgIconBlock, SvgIconStyle, SpacingStyle, ColorStyle

__all__ = [
    # Base
    "BaseBlock", "BlockAttributes",
    # SVG Icon
    "SvgIconBlock", "SvgIconStyle", "SpacingStyle", "ColorStyle",
]
