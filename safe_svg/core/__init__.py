"""Core module pour safe_svg."""
from .design_system import convert_to_css_variable, preset_color, preset_variable
from .media import MediaLibrary, LocalMediaLibrary, SVG_MIME_TYPE

__all__ = [
    "convert_to_css_variable",
    "preset_color",
    "preset_variable",
    "MediaLibrary",
    "LocalMediaLibrary",
    "SVG_MIME_TYPE",
]
