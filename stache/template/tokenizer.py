"""
Tokenizer for logic-less templates.

Turns template text plus a delimiter pair into a token tree. Section
nesting is validated on the fly with a stack of open frames; the
innermost frame receives newly produced tokens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .scanner import Scanner
from .tokens import Partial, Section, TemplateAST, Text, Token, Variable
from ..errors import MismatchedSectionError, UnclosedSectionError, UnopenedSectionError
from ..types import DEFAULT_DELIMITERS, Delimiters

logger = logging.getLogger(__name__)

SECTION = "#"
INVERTED = "^"
CLOSE = "/"
UNESCAPED = "&"
COMMENT = "!"
PARTIAL = ">"
SET_DELIMITERS = "="

SIGILS = frozenset((SECTION, INVERTED, CLOSE, UNESCAPED, COMMENT, PARTIAL, SET_DELIMITERS))


@dataclass
class _Frame:
    """Open section while its children are being collected."""
    name: str
    inverted: bool
    position: int
    children: List[Token] = field(default_factory=list)

    def close(self) -> Section:
        return Section(name=self.name, inverted=self.inverted, children=tuple(self.children))


class Tokenizer:
    """
    Single-pass tokenizer.

    One instance may tokenize any number of templates with the same
    delimiter pair; all per-template state lives in ``tokenize``.
    """

    def __init__(self, delimiters: Optional[Delimiters] = None):
        self.delimiters = delimiters or DEFAULT_DELIMITERS

    def tokenize(self, text: str) -> TemplateAST:
        """
        Tokenizes template text into a tree.

        Raises:
            StructuralError: On unbalanced or mismatched section tags
        """
        opening = self.delimiters.open
        closing = self.delimiters.close
        allow_triple = self.delimiters.is_default

        scanner = Scanner(text)
        root: List[Token] = []
        stack: List[_Frame] = []
        current = root

        while not scanner.at_end():
            literal = scanner.scan_until(opening)
            if literal:
                current.append(Text(literal))
            if scanner.at_end():
                break

            tag_position = scanner.position
            scanner.scan_literal_prefix(opening)

            triple = allow_triple and bool(scanner.scan_literal_prefix("{"))

            raw = scanner.scan_until(closing)
            if scanner.at_end():
                # Truncated trailing tag: treated as end of input
                logger.debug("Unterminated tag at offset %d ignored", tag_position)
                break
            scanner.scan_literal_prefix(closing)
            if triple:
                scanner.scan_literal_prefix("}")

            content = raw.strip()
            sigil = content[:1] if content[:1] in SIGILS else ""
            name = content[1:].strip() if sigil else content

            if sigil in (SECTION, INVERTED):
                frame = _Frame(name=name, inverted=sigil == INVERTED, position=tag_position)
                stack.append(frame)
                current = frame.children
            elif sigil == CLOSE:
                if not stack:
                    raise UnopenedSectionError(name=name, position=tag_position)
                frame = stack.pop()
                if frame.name != name:
                    raise MismatchedSectionError(expected=frame.name, found=name, position=tag_position)
                current = stack[-1].children if stack else root
                current.append(frame.close())
            elif sigil == UNESCAPED:
                current.append(Variable(name, escape=False))
            elif sigil == COMMENT:
                pass
            elif sigil == PARTIAL:
                current.append(Partial(name))
            elif sigil == SET_DELIMITERS:
                logger.warning(
                    "Delimiter change tags are not supported; ignoring tag at offset %d", tag_position
                )
            elif triple:
                current.append(Variable(name, escape=False))
            else:
                current.append(Variable(name, escape=True))

        if stack:
            outermost = stack[0]
            raise UnclosedSectionError(name=outermost.name, position=outermost.position)

        return tuple(root)


def tokenize_template(text: str, delimiters: Optional[Delimiters] = None) -> TemplateAST:
    """
    Convenience function for tokenizing a template.

    Args:
        text: Template source
        delimiters: Tag markers, defaults to ``{{`` / ``}}``

    Returns:
        Token tree

    Raises:
        StructuralError: On malformed section nesting
    """
    return Tokenizer(delimiters).tokenize(text)


__all__ = ["Tokenizer", "tokenize_template", "SIGILS"]
