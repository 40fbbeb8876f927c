from layoutcss.stylesheet.matcher import matches, matching_rules
from layoutcss.stylesheet.model import Declaration, Rule, SimpleSelector, Stylesheet

__all__ = [
    "Declaration",
    "Rule",
    "SimpleSelector",
    "Stylesheet",
    "matches",
    "matching_rules",
]
