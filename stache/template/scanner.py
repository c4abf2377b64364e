"""
Text cursor over a single template buffer.

The scanner never looks further ahead than the next occurrence of the
requested pattern, so untagged spans of any length come back whole.
"""

from __future__ import annotations


class Scanner:
    """
    Cursor over template text.

    Keeps the full buffer and a position; everything before the position
    has been consumed.
    """

    def __init__(self, text: str):
        self.text = text
        self.position = 0
        self.length = len(text)

    @property
    def remaining(self) -> str:
        return self.text[self.position:]

    def at_end(self) -> bool:
        return self.position >= self.length

    def peek(self, count: int = 1) -> str:
        """Returns the next ``count`` characters without consuming them."""
        return self.text[self.position:self.position + count]

    def scan_literal_prefix(self, pattern: str) -> str:
        """
        Consumes ``pattern`` if it starts at the current position.

        Returns:
            The consumed text, or an empty string when it does not match
        """
        if not pattern:
            raise ValueError("Scan pattern must not be empty")
        if self.text.startswith(pattern, self.position):
            self.position += len(pattern)
            return pattern
        return ""

    def scan_until(self, pattern: str) -> str:
        """
        Consumes text up to (not including) the next occurrence of ``pattern``.

        When the pattern never occurs, the whole remainder is consumed.
        When it matches immediately, nothing is consumed.
        """
        if not pattern:
            raise ValueError("Scan pattern must not be empty")
        start = self.position
        found = self.text.find(pattern, start)
        end = self.length if found == -1 else found
        self.position = end
        return self.text[start:end]

    def __repr__(self) -> str:
        return f"Scanner(position={self.position}, length={self.length})"


__all__ = ["Scanner"]
