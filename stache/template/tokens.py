"""
Token tree types.

A parsed template is a tuple of immutable tokens. Sections own the
tuple of their children, so the whole structure is a finite tree that
can be cached and shared between renders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Token:
    """Base class for all template tokens."""
    pass


@dataclass(frozen=True)
class Text(Token):
    """Literal text emitted verbatim."""
    literal: str


@dataclass(frozen=True)
class Variable(Token):
    """
    Value substitution.

    ``escape`` is True for ``{{name}}`` and False for ``{{{name}}}`` / ``{{&name}}``.
    """
    name: str
    escape: bool = True


@dataclass(frozen=True)
class Section(Token):
    """Conditional or iterated block ``{{#name}}...{{/name}}`` (``^`` when inverted)."""
    name: str
    inverted: bool = False
    children: Tuple[Token, ...] = ()


@dataclass(frozen=True)
class Partial(Token):
    """Reference to a separately supplied template, ``{{>name}}``."""
    name: str


# Alias for a parsed template
TemplateAST = Tuple[Token, ...]


def iter_tags(ast: TemplateAST) -> Iterator[Tuple[str, str]]:
    """
    Flattens a token tree back into source-order tag descriptors.

    Yields ``(sigil, name)`` pairs: ``""`` for escaped variables, ``"&"`` for
    raw ones, ``"#"``/``"^"`` for section starts, ``"/"`` for section ends
    and ``">"`` for partials. Text tokens are skipped.
    """
    for token in ast:
        if isinstance(token, Variable):
            yield ("" if token.escape else "&", token.name)
        elif isinstance(token, Section):
            yield ("^" if token.inverted else "#", token.name)
            yield from iter_tags(token.children)
            yield ("/", token.name)
        elif isinstance(token, Partial):
            yield (">", token.name)


def to_dict(token: Token) -> dict:
    """JSON-friendly view of a token, used by ``stache parse``."""
    if isinstance(token, Text):
        return {"type": "text", "literal": token.literal}
    if isinstance(token, Variable):
        return {"type": "variable", "name": token.name, "escape": token.escape}
    if isinstance(token, Section):
        return {
            "type": "section",
            "name": token.name,
            "inverted": token.inverted,
            "children": [to_dict(child) for child in token.children],
        }
    if isinstance(token, Partial):
        return {"type": "partial", "name": token.name}
    raise TypeError(f"Unknown token type: {type(token).__name__}")


__all__ = [
    "Token",
    "Text",
    "Variable",
    "Section",
    "Partial",
    "TemplateAST",
    "iter_tags",
    "to_dict",
]
