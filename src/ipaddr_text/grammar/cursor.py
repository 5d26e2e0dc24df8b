"""Read position over the address text."""

import string
from typing import FrozenSet, Optional

from ipaddr_text.errors import AddressSyntaxError, Diagnostic, DiagnosticKind

DIGITS: FrozenSet[str] = frozenset(string.digits)
HEX_DIGITS: FrozenSet[str] = frozenset(string.hexdigits)


class Cursor:
    """
    A position in the input text.

    Rules only advance the cursor when they succeed. Lookahead works on
    ``peek``/``match_run``, which never move it.
    """

    def __init__(self, text: str, position: int = 0):
        self.text = text
        self.position = position

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        """Character at ``position + offset``, or ``""`` past the end."""
        index = self.position + offset
        if index < len(self.text):
            return self.text[index]
        return ""

    def match_run(self, charset: FrozenSet[str]) -> str:
        """Longest run of characters from ``charset`` at the position."""
        end = self.position
        while end < len(self.text) and self.text[end] in charset:
            end += 1
        return self.text[self.position:end]

    def startswith(self, literal: str) -> bool:
        return self.text.startswith(literal, self.position)

    def consume(self, literal: str) -> bool:
        """Advance past ``literal`` if it comes next."""
        if not self.startswith(literal):
            return False
        self.position += len(literal)
        return True

    def advance(self, count: int) -> None:
        self.position = min(self.position + count, len(self.text))

    def seek(self, position: int) -> None:
        self.position = position

    def error(
        self,
        kind: DiagnosticKind,
        begin: Optional[int] = None,
        end: Optional[int] = None,
    ) -> AddressSyntaxError:
        """Build the exception for a hard failure; the span defaults to here."""
        if begin is None:
            begin = self.position
        if end is None:
            end = begin
        return AddressSyntaxError(self.text, Diagnostic(kind, begin, end))

    def __repr__(self) -> str:
        return f"Cursor({self.text!r}, position={self.position})"
