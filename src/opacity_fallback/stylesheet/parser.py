"""Build a mutable stylesheet tree from CSS source using tinycss2.

Syntax example:
    :root { --brand: #3366ff; }
    .dark { --brand: #112244; }
    @media (hover: hover) { .hover\\:text-brand\\/50:hover { color: var(--brand); } }
"""

from __future__ import annotations

import tinycss2
import tinycss2.ast

from opacity_fallback.errors import StylesheetParseError
from opacity_fallback.stylesheet.model import (
    AtRule,
    Comment,
    Declaration,
    Node,
    Rule,
    Stylesheet,
)

__all__ = ["parse_stylesheet"]

_SIMPLE_BLOCKS = {
    "() block": tinycss2.ast.ParenthesesBlock,
    "[] block": tinycss2.ast.SquareBracketsBlock,
    "{} block": tinycss2.ast.CurlyBracketsBlock,
}


def _raise_parse_error(error: tinycss2.ast.ParseError) -> None:
    raise StylesheetParseError(
        f"{error.message} (line {error.source_line}, column {error.source_column})",
        line=error.source_line,
        column=error.source_column,
    )


def _collapse_whitespace(tokens: list) -> list:
    """Replace each whitespace token with a single space, recursing into blocks.

    String tokens and everything else keep their exact source text.
    """
    collapsed = []
    for token in tokens:
        if token.type == "whitespace":
            token = tinycss2.ast.WhitespaceToken(
                token.source_line, token.source_column, " "
            )
        elif token.type == "function":
            token = tinycss2.ast.FunctionBlock(
                token.source_line,
                token.source_column,
                token.name,
                _collapse_whitespace(token.arguments),
            )
        elif token.type in _SIMPLE_BLOCKS:
            token = _SIMPLE_BLOCKS[token.type](
                token.source_line,
                token.source_column,
                _collapse_whitespace(token.content),
            )
        collapsed.append(token)
    return collapsed


def _serialize_prelude(tokens: list) -> str:
    """Serialize prelude tokens into a single-line selector or at-rule params."""
    return tinycss2.serialize(_collapse_whitespace(tokens)).strip()


def _fill(container: Rule | AtRule, content: list) -> None:
    """Parse the contents of a ``{}`` block into *container*."""
    items = tinycss2.parse_blocks_contents(
        content, skip_comments=False, skip_whitespace=True
    )
    for item in items:
        container.append(_convert(item))


def _convert(item: object) -> Node:
    if isinstance(item, tinycss2.ast.ParseError):
        _raise_parse_error(item)
    if isinstance(item, tinycss2.ast.Declaration):
        # Custom property names are case-sensitive; standard ones are not.
        prop = item.name if item.name.startswith("--") else item.lower_name
        return Declaration(
            prop=prop,
            value=tinycss2.serialize(item.value).strip(),
            important=item.important,
        )
    if isinstance(item, tinycss2.ast.QualifiedRule):
        rule = Rule(selector=_serialize_prelude(item.prelude))
        _fill(rule, item.content)
        return rule
    if isinstance(item, tinycss2.ast.AtRule):
        at_rule = AtRule(
            name=item.at_keyword,
            params=_serialize_prelude(item.prelude),
            nodes=None if item.content is None else [],
        )
        if item.content is not None:
            _fill(at_rule, item.content)
        return at_rule
    if isinstance(item, tinycss2.ast.Comment):
        return Comment(text=item.value)
    raise StylesheetParseError(f"Unexpected CSS node: {type(item).__name__}")


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse CSS source into a :class:`Stylesheet` tree.

    Comments are kept; insignificant whitespace is dropped.  Raises
    :class:`StylesheetParseError` on the first syntax error tinycss2 reports.
    """
    items = tinycss2.parse_stylesheet(
        source, skip_comments=False, skip_whitespace=True
    )
    return Stylesheet(nodes=[_convert(item) for item in items])
