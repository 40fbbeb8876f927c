from layoutcss.parser.errors import ParseError
from layoutcss.parser.selectors import parse_selector_list
from layoutcss.parser.stylesheet import parse_declarations, parse_stylesheet

__all__ = [
    "ParseError",
    "parse_declarations",
    "parse_selector_list",
    "parse_stylesheet",
]
