"""Entry point that parses one complete IP address."""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from ipaddr_text.errors import (
    AddressSyntaxError,
    Diagnostic,
    DiagnosticKind,
    InvalidAddressError,
)
from ipaddr_text.grammar.cursor import Cursor
from ipaddr_text.grammar.ipv6 import scan_ipv6_address
from ipaddr_text.grammar.rules import ipv4_address_ahead, parse_ipv4_address
from ipaddr_text.ip.address import IpAddress

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """An address plus the recoverable problems found while parsing it."""

    text: str
    address: IpAddress
    diagnostics: Tuple[Diagnostic, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def raise_for_diagnostics(self) -> IpAddress:
        """Return the address, or raise InvalidAddressError if anything was reported."""
        if self.diagnostics:
            raise InvalidAddressError(self.text, list(self.diagnostics), self.address)
        return self.address


def parse_ip_address(text: str) -> ParseResult:
    """
    Parse ``text`` as a single IPv4 or IPv6 address.

    The whole text must be consumed; anything after the address is an error.

    Raises:
        AddressSyntaxError: If the text is not shaped like an address.
        TypeError: If ``text`` is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    cursor = Cursor(text)
    diagnostics: List[Diagnostic] = []

    try:
        if ipv4_address_ahead(cursor):
            logger.debug("Parsing %r as IPv4", text)
            address = parse_ipv4_address(cursor)
        else:
            logger.debug("Parsing %r as IPv6", text)
            address = scan_ipv6_address(cursor, diagnostics)

        if not cursor.at_end:
            raise cursor.error(DiagnosticKind.EXPECTED_EOF, cursor.position, len(text))
    except AddressSyntaxError as exc:
        if diagnostics:
            raise AddressSyntaxError(text, exc.diagnostic, diagnostics) from exc
        raise

    for diagnostic in diagnostics:
        logger.debug("Diagnostic for %r: %s", text, diagnostic)

    return ParseResult(text, address, tuple(diagnostics))


def parse_strict(text: str) -> IpAddress:
    """
    Parse ``text`` and reject it on any problem, recoverable or not.

    Raises:
        AddressSyntaxError: If the text is not shaped like an address.
        InvalidAddressError: If the address breaks a piece-count rule.
    """
    return parse_ip_address(text).raise_for_diagnostics()
