"""Diagnostics and exceptions raised while parsing address text."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from ipaddr_text.ip.address import IpAddress


class DiagnosticKind(Enum):
    """Every problem the grammar can report, with its message."""

    EXPECTED_DIGIT = "expected digit"
    EXPECTED_HEX_DIGIT = "expected hex digit"
    LEADING_ZERO = "leading zero"
    INTEGER_OVERFLOW = "integer overflow"
    EXPECTED_PERIOD = "expected '.'"
    EXPECTED_EOF = "expected end of input"

    DUPLICATE_ELISION = "duplicate zero elision"
    MISSING_PIECES = "not enough IPv6 pieces"
    TOO_MANY_PIECES = "too many IPv6 pieces"


@dataclass(frozen=True)
class Diagnostic:
    """A problem found in the input, with the character span that caused it."""

    kind: DiagnosticKind
    begin: int
    end: int

    @property
    def message(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        return f"{self.message} at {self.begin}..{self.end}"


class ParseError(Exception):
    """Base class for address parse failures."""

    def __init__(self, text: str, diagnostics: List[Diagnostic]):
        self.text = text
        self.diagnostics = list(diagnostics)
        super().__init__(
            f"Invalid IP address {text!r}: "
            + "; ".join(str(d) for d in self.diagnostics)
        )


class AddressSyntaxError(ParseError):
    """The text does not have the shape of an IP address; no result exists.

    ``diagnostic`` is the fatal problem. Recoverable problems reported
    earlier in the same scan precede it in ``diagnostics``.
    """

    def __init__(
        self,
        text: str,
        diagnostic: Diagnostic,
        earlier: Sequence[Diagnostic] = (),
    ):
        super().__init__(text, [*earlier, diagnostic])

    @property
    def diagnostic(self) -> Diagnostic:
        return self.diagnostics[-1]


class InvalidAddressError(ParseError):
    """The address was scanned completely but violates a piece-count rule.

    ``address`` holds the best-effort result built despite the problems.
    """

    def __init__(
        self,
        text: str,
        diagnostics: List[Diagnostic],
        address: Optional["IpAddress"] = None,
    ):
        super().__init__(text, diagnostics)
        self.address = address
