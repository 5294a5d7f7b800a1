"""Tests styles inline — préfixes, variables, couleurs, ordre des déclarations."""
from safe_svg.blocks import SvgIconBlock
from safe_svg.renderer.css import (
    add_css_property_prefix,
    render_css_property_string,
    render_inline_css,
    resolve_style,
    resolve_style_properties,
)


def block(**attrs) -> SvgIconBlock:
    return SvgIconBlock.model_validate({"imageID": 1, **attrs})


# ── Helpers ──────────────────────────────────────────────────────────────────

def test_add_prefix():
    assert add_css_property_prefix({"top": "1px", "left": "2px"}, "padding") == {
        "padding-top": "1px",
        "padding-left": "2px",
    }


def test_add_prefix_empty():
    assert add_css_property_prefix(None, "margin") == {}
    assert add_css_property_prefix({}, "margin") == {}


def test_property_string():
    assert render_css_property_string("color", "red") == "color: red;"
    assert render_css_property_string("color", "") == ""


def test_render_inline_css_drops_empty():
    assert render_inline_css({"a": "1", "b": "", "c": "3"}) == "a: 1; c: 3;"
    assert render_inline_css({}) == ""


# ── resolve_style ────────────────────────────────────────────────────────────

def test_single_padding_side():
    style = resolve_style(block(style={"spacing": {"padding": {"top": "10px"}}}))
    assert style == "padding-top: 10px;"


def test_background_slot():
    style = resolve_style(block(backgroundColor="red"))
    assert style == "background-color: var(--wp--preset--color--red);"


def test_background_raw_fallback():
    style = resolve_style(block(style={"color": {"background": "#fff"}}))
    assert style == "background-color: #fff;"


def test_slot_wins_over_raw_color():
    style = resolve_style(block(textColor="contrast", style={"color": {"text": "#000"}}))
    assert style == "color: var(--wp--preset--color--contrast);"


def test_spacing_variables_resolved():
    style = resolve_style(block(style={"spacing": {
        "padding": {"top": "var:spacing|50|40", "bottom": "var:bad"},
    }}))
    assert style == "padding-top: var(--wp--preset--spacing--50--40); padding-bottom: var:bad;"


def test_full_order():
    style = resolve_style(block(
        textColor="black",
        style={
            "spacing": {
                "padding": {"top": "1px", "bottom": "2px"},
                "margin": {"left": "var:preset|spacing|20"},
            },
            "color": {"background": "#fff"},
        },
    ))
    assert style == (
        "padding-top: 1px; padding-bottom: 2px; "
        "margin-left: var(--wp--preset--spacing--20); "
        "background-color: #fff; color: var(--wp--preset--color--black);"
    )


def test_empty_block_has_no_style():
    assert resolve_style(block()) == ""


def test_color_keys_always_present():
    props = resolve_style_properties(block())
    assert list(props) == ["background-color", "color"]
    assert props["background-color"] == ""
