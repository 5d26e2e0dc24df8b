"""Scanner for the IPv6address production."""

import logging
from typing import List

from ipaddr_text.errors import Diagnostic, DiagnosticKind
from ipaddr_text.grammar.cursor import HEX_DIGITS, Cursor
from ipaddr_text.grammar.rules import (
    ipv4_address_ahead,
    parse_ipv4_address,
    parse_ipv6_piece,
)
from ipaddr_text.ip.address import PIECE_COUNT, IpAddress
from ipaddr_text.ip.builder import IPv6Builder

logger = logging.getLogger(__name__)


def scan_ipv6_address(cursor: Cursor, diagnostics: List[Diagnostic]) -> IpAddress:
    """
    Scan an IPv6 address starting at the cursor.

    The piece count rules can only be checked once the whole address has
    been read, so violations of them (and a repeated ``::``) are appended to
    ``diagnostics`` and a best-effort address is still returned. Malformed
    pieces or an embedded IPv4 address that does not parse raise
    ``AddressSyntaxError``.

    Args:
        cursor: Input position; left just after the address on return
        diagnostics: List that recoverable problems are appended to

    Returns:
        The scanned address, version 6
    """
    begin = cursor.position
    builder = IPv6Builder()

    while True:
        elision_begin = cursor.position
        if cursor.consume("::"):
            if not builder.elision():
                diagnostics.append(Diagnostic(
                    DiagnosticKind.DUPLICATE_ELISION, elision_begin, cursor.position
                ))
            # "::" may end the address
            if cursor.peek() not in HEX_DIGITS:
                break
        elif builder.count > 0 and not cursor.consume(":"):
            break

        if ipv4_address_ahead(cursor):
            builder.ipv4(parse_ipv4_address(cursor))
            # Nothing may follow an embedded IPv4 address.
            break

        builder.piece(parse_ipv6_piece(cursor))

    count = builder.count
    if count < PIECE_COUNT and not builder.has_elision:
        diagnostics.append(Diagnostic(
            DiagnosticKind.MISSING_PIECES, begin, cursor.position
        ))
    elif count > PIECE_COUNT or (builder.has_elision and count == PIECE_COUNT):
        diagnostics.append(Diagnostic(
            DiagnosticKind.TOO_MANY_PIECES, begin, cursor.position
        ))

    logger.debug(
        "Scanned %d IPv6 pieces (elision at %s)", count, builder.elision_index
    )
    return builder.finish()
