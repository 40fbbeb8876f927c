"""Tests for folding declarations into an OutputStyle."""

import pytest

from layoutcss.cascade import assemble, style_from_inline
from layoutcss.cascade.assembler import resolve_declaration
from layoutcss.model.context import UnitContext
from layoutcss.model.properties import PropertyName
from layoutcss.model.style import OutputStyle
from layoutcss.model.tag import TargetTag
from layoutcss.model.values import AUTO, NONE, Color, Keyword, Length, Percentage, Ratio
from layoutcss.parser import parse_declarations, parse_stylesheet

PANEL = TargetTag(id="main", classes=frozenset({"panel"}))


def _style(css: str, tag: TargetTag = PANEL, inline: str = "", context=None, diagnostics=None):
    stylesheet = parse_stylesheet(css)
    return assemble(
        stylesheet.rules, tag, parse_declarations(inline), context, diagnostics
    )


# ---------------------------------------------------------------------------
# Defaults and determinism
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_no_rules_gives_host_defaults(self):
        assert assemble([], PANEL) == OutputStyle()

    def test_non_matching_rules_give_host_defaults(self):
        assert _style(".other { width: 1px } #nope { height: 1px }") == OutputStyle()

    def test_untouched_fields_keep_defaults(self):
        style = _style(".panel { width: 1px }")
        assert style.width == Length(1.0)
        assert style.height is AUTO
        assert style.display == Keyword("flex")
        assert style.color == Color(1.0, 1.0, 1.0, 1.0)

    def test_deterministic(self):
        css = ".panel { width: 10%; margin: 1px 2px } #main { color: red }"
        assert _style(css) == _style(css)


# ---------------------------------------------------------------------------
# Precedence
# ---------------------------------------------------------------------------


class TestPrecedence:
    def test_later_rule_wins(self):
        assert _style(".panel { width: 1px } .panel { width: 2px }").width == Length(2.0)

    def test_later_declaration_wins(self):
        assert _style(".panel { width: 1px; width: 2px }").width == Length(2.0)

    def test_no_specificity(self):
        css = "#main.panel { width: 1px } .panel { width: 2px } * { height: 3px }"
        style = _style(css)
        assert style.width == Length(2.0)
        assert style.height == Length(3.0)

    def test_inline_applies_last(self):
        style = _style("#main { width: 1px; height: 1px }", inline="width: 5px")
        assert style.width == Length(5.0)
        assert style.height == Length(1.0)

    def test_important_has_no_weight(self):
        assert _style(".panel { width: 1px !important } .panel { width: 2px }").width == Length(2.0)

    def test_selector_list(self):
        css = ".other, .panel { width: 1px }"
        assert _style(css).width == Length(1.0)
        assert _style(css, TargetTag(classes=frozenset({"other"}))).width == Length(1.0)


# ---------------------------------------------------------------------------
# Tolerance
# ---------------------------------------------------------------------------


class TestInvalidDeclarations:
    def test_invalid_value_keeps_previous(self):
        diagnostics = []
        style = _style(".panel { width: 10px; width: -3px }", diagnostics=diagnostics)
        assert style.width == Length(10.0)
        assert [d.code for d in diagnostics] == ["invalid_value"]
        assert diagnostics[0].property == "width"
        assert diagnostics[0].selector == ".panel"
        assert diagnostics[0].is_warning

    def test_invalid_value_keeps_default(self):
        assert _style(".panel { display: grid }").display == Keyword("flex")

    def test_one_typo_does_not_block_the_rest(self):
        style = _style(".panel { widht: 1px; width: 2pz; height: 3px } #main { color: nope } #main { flex-grow: 2 }")
        assert style.height == Length(3.0)
        assert style.flex_grow.value == 2.0

    def test_inline_diagnostics_have_no_selector(self):
        diagnostics = []
        _style("", inline="width: wide", diagnostics=diagnostics)
        assert diagnostics[0].selector is None


# ---------------------------------------------------------------------------
# Shorthands
# ---------------------------------------------------------------------------


class TestShorthands:
    def test_margin(self):
        style = _style(".panel { margin: 1px 2px 3px }")
        assert (style.margin_top, style.margin_right, style.margin_bottom, style.margin_left) == (
            Length(1.0), Length(2.0), Length(3.0), Length(2.0),
        )

    def test_longhand_after_shorthand(self):
        style = _style(".panel { padding: 4px; padding-left: 8px }")
        assert style.padding_top == Length(4.0)
        assert style.padding_left == Length(8.0)

    def test_shorthand_after_longhand(self):
        style = _style(".panel { padding-left: 8px; padding: 4px }")
        assert style.padding_left == Length(4.0)

    def test_one_bad_side_drops_whole_shorthand(self):
        diagnostics = []
        style = _style(".panel { margin-left: 5px; margin: 1px bogus }", diagnostics=diagnostics)
        assert style.margin_top == Length(0.0)
        assert style.margin_left == Length(5.0)
        assert [d.code for d in diagnostics] == ["invalid_value"]

    def test_arity(self):
        diagnostics = []
        style = _style(".panel { border-width: 1px 2px 3px 4px 5px }", diagnostics=diagnostics)
        assert style.border_width_top == Length(0.0)
        assert [d.code for d in diagnostics] == ["shorthand_arity"]

    def test_border_alias(self):
        assert _style(".panel { border-top-width: 2px }").border_width_top == Length(2.0)


# ---------------------------------------------------------------------------
# Computed values
# ---------------------------------------------------------------------------


class TestComputedValues:
    def test_units_resolved_with_context(self):
        ctx = UnitContext(font_size_px=10.0, root_font_size_px=20.0, viewport_width_px=500.0)
        style = _style(".panel { width: 2em; height: 1rem; min-width: 10vw }", context=ctx)
        assert style.width == Length(20.0)
        assert style.height == Length(20.0)
        assert style.min_width == Length(50.0)

    def test_percentages_left_for_host(self):
        assert _style(".panel { flex-basis: 40% }").flex_basis == Percentage(40.0)

    def test_degenerate_aspect_ratio(self):
        assert _style(".panel { aspect-ratio: 0 / 1 }").aspect_ratio is AUTO
        assert _style(".panel { aspect-ratio: 3 / 2 }").aspect_ratio == Ratio(3.0, 2.0)

    def test_max_none(self):
        assert _style(".panel { max-width: none }").max_width is NONE

    def test_to_dict(self):
        css = _style(".panel { color: rgb(0 0 0 / 50%); margin: 1cm auto }").to_dict()
        assert css["color"] == "rgba(0, 0, 0, 0.5)"
        assert css["margin-top"] == "37.795276px"
        assert css["margin-right"] == "auto"


class TestResolveDeclaration:
    def test_shorthand_pairs(self):
        (decl,) = parse_declarations("padding: 1px 2px")
        pairs = resolve_declaration(decl)
        assert [p for p, _ in pairs] == [
            PropertyName.PADDING_TOP,
            PropertyName.PADDING_RIGHT,
            PropertyName.PADDING_BOTTOM,
            PropertyName.PADDING_LEFT,
        ]


class TestStyleFromInline:
    def test_inline_only(self):
        style = style_from_inline("width: 2em; color: blue", UnitContext(font_size_px=10.0))
        assert style.width == Length(20.0)
        assert style.color == Color(0.0, 0.0, 1.0, 1.0)

    def test_diagnostics(self):
        diagnostics = []
        style = style_from_inline("float: left; width: -1px", diagnostics=diagnostics)
        assert style == OutputStyle()
        assert [d.code for d in diagnostics] == ["unknown_property", "invalid_value"]

    @pytest.mark.parametrize("text", ["", "   ", ";;"])
    def test_empty(self, text):
        assert style_from_inline(text) == OutputStyle()
