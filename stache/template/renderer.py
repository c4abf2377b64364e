"""
Tree-walking renderer.

Renders a token tree against a context chain by structural recursion.
Partials are parsed through a TemplateCache with the delimiters of the
template that references them and rendered in the current scope.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from .cache import TemplateCache, default_cache
from .context import Context
from .escaping import html_escape
from .tokens import Partial, Section, TemplateAST, Text, Token, Variable
from .values import ValueKind, as_items, classify, is_empty, to_text
from ..types import DEFAULT_DELIMITERS, Delimiters, Escaper

logger = logging.getLogger(__name__)


class Renderer:
    """
    Renders token trees to text.

    Holds everything that stays fixed for one render call: the partials
    table, the active delimiters, the escaping function and the cache
    used for partial bodies.
    """

    def __init__(
        self,
        partials: Optional[Mapping[str, str]] = None,
        *,
        delimiters: Optional[Delimiters] = None,
        escape: Escaper = html_escape,
        cache: Optional[TemplateCache] = None,
    ):
        self.partials: Mapping[str, str] = partials or {}
        self.delimiters = delimiters or DEFAULT_DELIMITERS
        self.escape = escape
        self.cache = cache if cache is not None else default_cache()

    def render(self, ast: TemplateAST, context: Context) -> str:
        parts: List[str] = []
        for token in ast:
            rendered = self._render_token(token, context)
            if rendered:
                parts.append(rendered)
        return "".join(parts)

    def _render_token(self, token: Token, context: Context) -> str:
        if isinstance(token, Text):
            return token.literal
        if isinstance(token, Variable):
            return self._render_variable(token, context)
        if isinstance(token, Section):
            if token.inverted:
                return self._render_inverted(token, context)
            return self._render_section(token, context)
        if isinstance(token, Partial):
            return self._render_partial(token, context)
        raise TypeError(f"Unknown token type: {type(token).__name__}")

    def _render_variable(self, token: Variable, context: Context) -> str:
        text = to_text(context.lookup(token.name))
        if token.escape and text:
            return self.escape(text)
        return text

    def _render_section(self, token: Section, context: Context) -> str:
        value = context.lookup(token.name)
        kind = classify(value)

        if kind is ValueKind.NULL:
            return ""
        if kind is ValueKind.BOOLEAN:
            return self.render(token.children, context) if value else ""
        if kind is ValueKind.SEQUENCE:
            return "".join(
                self.render(token.children, context.push(item)) for item in as_items(value)
            )
        if kind is ValueKind.KEYED:
            if not value:
                return ""
            return self.render(token.children, context.push(value))
        if kind is ValueKind.RECORD:
            return self.render(token.children, context.push(value))
        # SCALAR: a flag only
        if is_empty(value):
            return ""
        return self.render(token.children, context)

    def _render_inverted(self, token: Section, context: Context) -> str:
        if is_empty(context.lookup(token.name)):
            return self.render(token.children, context)
        return ""

    def _render_partial(self, token: Partial, context: Context) -> str:
        text = self.partials.get(token.name)
        if text is None:
            logger.debug("Partial '%s' not found; rendering nothing", token.name)
            return ""
        ast = self.cache.get_or_parse(text, self.delimiters)
        return self.render(ast, context)


def render_tokens(
    ast: TemplateAST,
    view: Any,
    partials: Optional[Mapping[str, str]] = None,
    **kwargs: Any,
) -> str:
    """Renders an already parsed tree against a view in a fresh root context."""
    return Renderer(partials, **kwargs).render(ast, Context(view))


__all__ = ["Renderer", "render_tokens"]
