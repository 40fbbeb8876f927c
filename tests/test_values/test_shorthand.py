"""Tests for margin/padding/border-width expansion."""

import pytest
import tinycss2

from layoutcss.model.properties import PropertyName
from layoutcss.values.errors import ResolutionError, ResolutionErrorKind
from layoutcss.values.shorthand import expand

P = PropertyName


def _expand(prop, text) -> list[tuple[PropertyName, str]]:
    tokens = tinycss2.parse_component_value_list(text)
    return [(side, tinycss2.serialize(value)) for side, value in expand(prop, tokens)]


class TestOneToFourRule:
    def test_one_value(self):
        assert _expand(P.MARGIN, "1px") == [
            (P.MARGIN_TOP, "1px"),
            (P.MARGIN_RIGHT, "1px"),
            (P.MARGIN_BOTTOM, "1px"),
            (P.MARGIN_LEFT, "1px"),
        ]

    def test_two_values(self):
        assert _expand(P.PADDING, "1px 2px") == [
            (P.PADDING_TOP, "1px"),
            (P.PADDING_RIGHT, "2px"),
            (P.PADDING_BOTTOM, "1px"),
            (P.PADDING_LEFT, "2px"),
        ]

    def test_three_values(self):
        assert [v for _, v in _expand(P.BORDER_WIDTH, "1px 2px 3px")] == ["1px", "2px", "3px", "2px"]

    def test_four_values(self):
        assert [v for _, v in _expand(P.MARGIN, "1px 2px 3px auto")] == ["1px", "2px", "3px", "auto"]

    def test_comments_and_extra_whitespace(self):
        assert [v for _, v in _expand(P.MARGIN, "  1px /* x */  2px ")] == ["1px", "2px", "1px", "2px"]

    def test_values_not_validated_here(self):
        assert [v for _, v in _expand(P.MARGIN, "bogus")] == ["bogus"] * 4


class TestArity:
    @pytest.mark.parametrize("text", ["", "   ", "1px 2px 3px 4px 5px"])
    def test_wrong_count(self, text):
        with pytest.raises(ResolutionError) as excinfo:
            _expand(P.MARGIN, text)
        assert excinfo.value.kind is ResolutionErrorKind.SHORTHAND_ARITY


class TestLonghands:
    def test_passthrough(self):
        tokens = tinycss2.parse_component_value_list(" 1px 2px ")
        assert expand(P.WIDTH, tokens) == [(P.WIDTH, tokens)]

    def test_expanding_output_again_is_a_noop(self):
        tokens = tinycss2.parse_component_value_list("1px 2px 3px")
        once = expand(P.PADDING, tokens)
        for side, value in once:
            assert expand(side, value) == [(side, value)]
