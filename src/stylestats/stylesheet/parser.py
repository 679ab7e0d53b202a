"""Adapter that turns tinycss2 output into the stylestats rule tree.

Only top-level constructs are walked: the rules nested inside ``@media``
or ``@supports`` blocks are not descended into.
"""

from __future__ import annotations

from typing import Any

import tinycss2

from stylestats.stylesheet.errors import ParseError
from stylestats.stylesheet.model import Declaration, Rule, Stylesheet

__all__ = ["parse_stylesheet"]

# At-rules whose block holds declarations rather than nested rules.
_DECLARATION_AT_RULES = frozenset({"font-face", "page"})

_CLOSERS = {"{} block": "}", "[] block": "]", "() block": ")", "function": ")"}


class _SourceText:
    """Source text as tinycss2 sees it, addressable by node line/column."""

    def __init__(self, source: str) -> None:
        self.text = (
            source.replace("\0", "\uFFFD")
            .replace("\r\n", "\n")
            .replace("\r", "\n")
            .replace("\f", "\n")
        )
        self._line_starts = [0]
        self._line_starts.extend(
            i + 1 for i, char in enumerate(self.text) if char == "\n"
        )

    def offset(self, node: Any) -> int:
        return self._line_starts[node.source_line - 1] + node.source_column - 1


def _raise_for(error: Any, source_label: str | None) -> None:
    """Convert a tinycss2 ParseError node into our ParseError."""
    raise ParseError(
        error.message,
        line=error.source_line,
        column=error.source_column,
        source_label=source_label,
    )


def _check_tokens(tokens: list, source_label: str | None) -> None:
    for token in tokens:
        if token.type == "error":
            _raise_for(token, source_label)


def _check_terminated(src: _SourceText, source_label: str | None) -> None:
    """Raise ParseError if the text ends inside an open block or comment.

    tinycss2 closes these silently at end of input.  Anything still open
    there lies on the chain of last tokens, so the text must end with the
    matching closers.
    """
    tokens = tinycss2.parse_component_value_list(src.text)
    chain: list[Any] = []
    node = tokens[-1] if tokens else None
    while node is not None and node.type in _CLOSERS:
        chain.append(node)
        children = node.arguments if node.type == "function" else node.content
        node = children[-1] if children else None

    suffix = ""
    if node is not None and node.type == "comment":
        suffix = f"/*{node.value}*/"
        if not src.text.endswith(suffix):
            raise ParseError(
                "End of comment missing",
                line=node.source_line,
                column=node.source_column,
                source_label=source_label,
            )
    for block in reversed(chain):
        closer = _CLOSERS[block.type]
        suffix += closer
        if not src.text.endswith(suffix):
            raise ParseError(
                f"missing '{closer}'",
                line=block.source_line,
                column=block.source_column,
                source_label=source_label,
            )


def _split_selectors(prelude: list) -> tuple[str, ...]:
    """Split a rule prelude into selectors at top-level commas."""
    groups: list[list] = [[]]
    for token in prelude:
        if token.type == "literal" and token.value == ",":
            groups.append([])
        else:
            groups[-1].append(token)

    selectors: list[str] = []
    for group in groups:
        text = " ".join(tinycss2.serialize(group).split())
        if text:
            selectors.append(text)
    return tuple(selectors)


def _serialize_value(tokens: list, src: _SourceText) -> str:
    value = tinycss2.serialize(tokens).strip()
    first = next((t for t in tokens if t.type not in ("whitespace", "comment")), None)
    if first is not None and first.type == "url":
        # tinycss2 lowercases the url( prefix
        start = src.offset(first)
        value = src.text[start : start + 3] + value[3:]
    return value


def _parse_declarations(
    content: list, src: _SourceText, source_label: str | None
) -> tuple[Declaration, ...]:
    """Parse the body of a rule block into declarations, in source order."""
    declarations: list[Declaration] = []
    nodes = tinycss2.parse_declaration_list(
        content, skip_comments=True, skip_whitespace=True
    )
    for node in nodes:
        if node.type == "error":
            _raise_for(node, source_label)
        if node.type != "declaration":
            continue
        _check_tokens(node.value, source_label)
        declarations.append(
            Declaration(property=node.name, value=_serialize_value(node.value, src))
        )
    return tuple(declarations)


def _convert(node: Any, src: _SourceText, source_label: str | None) -> Rule:
    if node.type == "qualified-rule":
        _check_tokens(node.prelude, source_label)
        selectors = _split_selectors(node.prelude)
        if not selectors:
            raise ParseError(
                "selector missing",
                line=node.source_line,
                column=node.source_column,
                source_label=source_label,
            )
        return Rule(
            type="rule",
            selectors=selectors,
            declarations=_parse_declarations(node.content, src, source_label),
        )

    # at-rule
    keyword = node.lower_at_keyword
    _check_tokens(node.prelude, source_label)
    declarations = None
    if keyword in _DECLARATION_AT_RULES and node.content is not None:
        declarations = _parse_declarations(node.content, src, source_label)
    return Rule(type=keyword, selectors=None, declarations=declarations)


def parse_stylesheet(source: str, source_label: str | None = None) -> Stylesheet:
    """Parse stylesheet text into a Stylesheet.

    Returns a Stylesheet whose ``rules`` are in source order, or ``None``
    when the text holds no top-level constructs.  Raises ParseError on the
    first malformed construct tinycss2 reports, and when the text ends
    inside an unclosed block or comment.
    """
    src = _SourceText(source)
    _check_terminated(src, source_label)
    nodes = tinycss2.parse_stylesheet(
        src.text, skip_comments=True, skip_whitespace=True
    )
    if not nodes:
        return Stylesheet(rules=None, source=source_label)

    rules: list[Rule] = []
    for node in nodes:
        if node.type == "error":
            _raise_for(node, source_label)
        rules.append(_convert(node, src, source_label))
    return Stylesheet(rules=tuple(rules), source=source_label)
