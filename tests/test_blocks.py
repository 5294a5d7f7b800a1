"""Tests bloc SvgIcon — alias camelCase, valeurs par défaut, clés inconnues."""
import pytest
from pydantic import ValidationError
from safe_svg.blocks import SvgIconBlock


def test_defaults():
    b = SvgIconBlock()
    assert b.image_id is None
    assert b.style.spacing.padding is None
    assert b.style.color.background is None


def test_from_host_attributes():
    b = SvgIconBlock.model_validate({
        "imageID": 42,
        "dimensionWidth": 64,
        "dimensionHeight": 12.5,
        "align": "wide",
        "className": "foo",
        "backgroundColor": "primary",
        "style": {"spacing": {"padding": {"top": "1px"}}, "color": {"text": "#000"}},
        "lock": {"move": True},
    })
    assert b.image_id == 42
    assert b.dimension_width == 64
    assert isinstance(b.dimension_width, int)
    assert b.dimension_height == 12.5
    assert b.class_name == "foo"
    assert b.background_color == "primary"
    assert b.style.spacing.padding == {"top": "1px"}
    assert b.style.color.text == "#000"


def test_populate_by_name():
    assert SvgIconBlock(image_id=3, class_name="x").class_name == "x"


def test_invalid_dimension_rejected():
    with pytest.raises(ValidationError):
        SvgIconBlock.model_validate({"imageID": 1, "dimensionWidth": "large"})
