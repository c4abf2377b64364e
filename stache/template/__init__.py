"""
Core pipeline of the template engine.

scanner -> tokenizer -> (cache) -> renderer, with name resolution in context.
"""

from __future__ import annotations

from .cache import TemplateCache, clear_default_cache, default_cache
from .context import Context
from .escaping import ESCAPERS, html_escape, resolve_escaper
from .renderer import Renderer, render_tokens
from .scanner import Scanner
from .tokenizer import Tokenizer, tokenize_template
from .tokens import Partial, Section, TemplateAST, Text, Token, Variable
from .values import MISSING, ValueKind, classify

__all__ = [
    "TemplateCache",
    "default_cache",
    "clear_default_cache",
    "Context",
    "ESCAPERS",
    "html_escape",
    "resolve_escaper",
    "Renderer",
    "render_tokens",
    "Scanner",
    "Tokenizer",
    "tokenize_template",
    "Token",
    "Text",
    "Variable",
    "Section",
    "Partial",
    "TemplateAST",
    "MISSING",
    "ValueKind",
    "classify",
]
