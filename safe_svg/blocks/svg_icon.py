"""Bloc SVG Icon — image SVG inline + espacements/couleurs du design system."""
from typing import Any, Dict, Optional, Union
from pydantic import Field, field_validator

from .base import BaseBlock, BlockAttributes


def _none_as_empty(value: Any) -> Any:
    # null stocké par l'éditeur = clé non fournie
    return {} if value is None else value


class SpacingStyle(BlockAttributes):
    # côté (top, right, bottom, left…) → longueur ou "var:preset|spacing|50"
    padding: Optional[Dict[str, Any]] = None
    margin: Optional[Dict[str, Any]] = None


class ColorStyle(BlockAttributes):
    background: Optional[str] = None
    text: Optional[str] = None


class SvgIconStyle(BlockAttributes):
    spacing: SpacingStyle = SpacingStyle()
    color: ColorStyle = ColorStyle()

    @field_validator("spacing", "color", mode="before")
    @classmethod
    def _default_when_null(cls, value: Any) -> Any:
        return _none_as_empty(value)


class SvgIconBlock(BaseBlock):
    """
    Attributs stockés du bloc safe-svg/svg-icon.

    Exemple (tel que reçu de l'hôte) :
    {
      "imageID": 42,
      "dimensionWidth": 64,
      "align": "wide",
      "className": "foo",
      "backgroundColor": "primary",
      "style": {"spacing": {"padding": {"top": "var:preset|spacing|50"}}}
    }
    """
    image_id: Optional[Union[int, str]] = Field(default=None, alias="imageID")
    dimension_width: Optional[Union[int, float]] = Field(default=None, alias="dimensionWidth")
    dimension_height: Optional[Union[int, float]] = Field(default=None, alias="dimensionHeight")
    background_color: Optional[str] = Field(default=None, alias="backgroundColor")
    text_color: Optional[str] = Field(default=None, alias="textColor")
    style: SvgIconStyle = SvgIconStyle()

    @field_validator("style", mode="before")
    @classmethod
    def _default_when_null(cls, value: Any) -> Any:
        return _none_as_empty(value)
