from opacity_fallback.stylesheet.parser import parse_stylesheet
from opacity_fallback.stylesheet.model import (
    AtRule,
    Comment,
    Declaration,
    Node,
    Rule,
    Stylesheet,
)


def serialize(sheet: Stylesheet) -> str:
    """Render a stylesheet tree back to CSS text."""
    return sheet.to_css()


__all__ = [
    "parse_stylesheet",
    "serialize",
    "Stylesheet",
    "Rule",
    "AtRule",
    "Declaration",
    "Comment",
    "Node",
]
