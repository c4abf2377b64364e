"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from StacheUserError.

Programming errors and bugs should NOT inherit from StacheUserError;
they will propagate with full tracebacks.
"""

from __future__ import annotations

from dataclasses import dataclass


class StacheUserError(Exception):
    """
    Base class for all user-facing errors in stache.

    These errors indicate problems that the caller can fix:
    missing arguments, malformed templates, unreadable view files.
    """
    pass


class InputError(StacheUserError, ValueError):
    """Required input is missing or invalid at the public boundary."""
    pass


class StructuralError(StacheUserError):
    """Malformed section nesting found while tokenizing a template."""
    pass


@dataclass
class UnopenedSectionError(StructuralError):
    """Closing tag without any open section."""
    name: str
    position: int = -1

    def __str__(self) -> str:
        return f"Closing tag '{self.name}' at offset {self.position} has no open section"


@dataclass
class MismatchedSectionError(StructuralError):
    """Closing tag whose name differs from the innermost open section."""
    expected: str
    found: str
    position: int = -1

    def __str__(self) -> str:
        return (
            f"Closing tag '{self.found}' at offset {self.position} "
            f"does not match open section '{self.expected}'"
        )


@dataclass
class UnclosedSectionError(StructuralError):
    """Template ended while one or more sections were still open."""
    name: str
    position: int = -1

    def __str__(self) -> str:
        return f"Unclosed section '{self.name}' opened at offset {self.position}"


__all__ = [
    "StacheUserError",
    "InputError",
    "StructuralError",
    "UnopenedSectionError",
    "MismatchedSectionError",
    "UnclosedSectionError",
]
