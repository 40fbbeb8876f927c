from layoutcss.cascade.application import StyledTarget, StylesheetApplication
from layoutcss.cascade.assembler import assemble, resolve_declaration, style_from_inline

__all__ = [
    "assemble",
    "resolve_declaration",
    "style_from_inline",
    "StyledTarget",
    "StylesheetApplication",
]
