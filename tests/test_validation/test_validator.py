"""Tests for stylesheet validation."""

from pathlib import Path

import pytest

from layoutcss.model.context import UnitContext
from layoutcss.model.diagnostic import Severity
from layoutcss.parser import parse_stylesheet
from layoutcss.validation import ValidationError, validate, validate_or_raise

FIXTURES = Path(__file__).parent.parent / "fixtures"


class TestValidate:
    def test_clean_stylesheet(self):
        assert validate((FIXTURES / "panel.css").read_text()) == []

    def test_empty(self):
        assert validate("") == []

    def test_invalid_value_reported(self):
        diagnostics = validate(".a { width: -1px; height: 10px }")
        assert [d.code for d in diagnostics] == ["invalid_value"]
        assert diagnostics[0].severity is Severity.WARNING
        assert diagnostics[0].line == 1
        assert diagnostics[0].selector == ".a"

    def test_selector_list_reported_once(self):
        diagnostics = validate(".a, .b, .c { width: -1px }")
        assert len(diagnostics) == 1

    def test_accepts_parsed_stylesheet(self):
        stylesheet = parse_stylesheet(".a { flex-grow: -2 }")
        assert [d.code for d in validate(stylesheet)] == ["invalid_value"]

    def test_custom_context(self):
        ctx = UnitContext(font_size_px=0.0)
        assert validate(".a { width: 2em }", ctx) == []

    def test_broken_fixture(self):
        diagnostics = validate((FIXTURES / "broken.css").read_text())
        codes = [d.code for d in diagnostics]
        assert codes == [
            "invalid_declaration",
            "invalid_selector",
            "unknown_property",
            "unsupported_at_rule",
            "unclosed_block",
            "invalid_value",
            "invalid_value",
            "shorthand_arity",
        ]


class TestValidateOrRaise:
    def test_raises_on_errors(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_or_raise("div > .a { width: 1px }")
        assert [d.code for d in excinfo.value.diagnostics] == ["invalid_selector"]
        assert "1 error(s)" in str(excinfo.value)

    def test_returns_warnings(self):
        diagnostics = validate_or_raise(".a { width: wide; float: left }")
        assert sorted(d.code for d in diagnostics) == ["invalid_value", "unknown_property"]

    def test_clean(self):
        assert validate_or_raise(".a { width: 1px }") == []
