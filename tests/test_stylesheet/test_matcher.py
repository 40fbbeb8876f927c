"""Tests for selector matching."""

import pytest

from layoutcss.model.tag import TargetTag
from layoutcss.stylesheet import Rule, SimpleSelector, matches, matching_rules


def _sel(id=None, *classes) -> SimpleSelector:
    return SimpleSelector(id=id, classes=frozenset(classes))


TAG = TargetTag(id="main", classes=frozenset({"panel", "wide"}))


# ---------------------------------------------------------------------------
# matches
# ---------------------------------------------------------------------------


class TestMatches:
    @pytest.mark.parametrize(
        "selector",
        [
            _sel(),
            _sel("main"),
            _sel(None, "panel"),
            _sel(None, "panel", "wide"),
            _sel("main", "wide"),
        ],
    )
    def test_matching(self, selector):
        assert matches(selector, TAG)

    @pytest.mark.parametrize(
        "selector",
        [
            _sel("other"),
            _sel(None, "dark"),
            _sel(None, "panel", "dark"),
            _sel("other", "panel"),
        ],
    )
    def test_not_matching(self, selector):
        assert not matches(selector, TAG)

    def test_universal_matches_bare_tag(self):
        assert matches(_sel(), TargetTag())

    def test_id_selector_needs_tag_id(self):
        assert not matches(_sel("main"), TargetTag(classes={"panel"}))

    def test_class_names_are_case_sensitive(self):
        assert not matches(_sel(None, "Panel"), TAG)


# ---------------------------------------------------------------------------
# matching_rules
# ---------------------------------------------------------------------------


class TestMatchingRules:
    def test_filters_and_keeps_order(self):
        rules = [
            Rule(selector=_sel(None, "wide"), declarations=()),
            Rule(selector=_sel("other"), declarations=()),
            Rule(selector=_sel(), declarations=()),
            Rule(selector=_sel("main"), declarations=()),
        ]
        assert list(matching_rules(rules, TAG)) == [rules[0], rules[2], rules[3]]

    def test_empty(self):
        assert list(matching_rules([], TAG)) == []
