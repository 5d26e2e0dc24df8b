"""
Leaf rules of the address grammar (draft-main-ipaddr-text-rep-00, section 3).

Each ``parse_*`` rule either advances the cursor past what it recognised
and returns the value, or raises ``AddressSyntaxError`` and leaves the cursor
where it was.
"""

from ipaddr_text.errors import AddressSyntaxError, DiagnosticKind
from ipaddr_text.grammar.cursor import DIGITS, HEX_DIGITS, Cursor
from ipaddr_text.ip.address import IpAddress, ipv4

OCTET_MAX = 0xFF
OCTET_MAX_DIGITS = 3
PIECE_MAX_DIGITS = 4


def parse_ipv4_octet(cursor: Cursor) -> int:
    """d8: a decimal number 0-255 without leading zeros."""
    begin = cursor.position
    digits = cursor.match_run(DIGITS)
    end = begin + len(digits)

    if not digits:
        raise cursor.error(DiagnosticKind.EXPECTED_DIGIT)
    if len(digits) > 1 and digits[0] == "0":
        raise cursor.error(DiagnosticKind.LEADING_ZERO, begin, end)

    # Longer runs are rejected before conversion.
    if len(digits) > OCTET_MAX_DIGITS or int(digits) > OCTET_MAX:
        raise cursor.error(DiagnosticKind.INTEGER_OVERFLOW, begin, end)

    cursor.advance(len(digits))
    return int(digits)


def parse_ipv4_address(cursor: Cursor) -> IpAddress:
    """IPv4address: four octets separated by periods."""
    start = cursor.position
    octets = []
    try:
        for index in range(4):
            if index and not cursor.consume("."):
                raise cursor.error(DiagnosticKind.EXPECTED_PERIOD)
            octets.append(parse_ipv4_octet(cursor))
    except AddressSyntaxError:
        cursor.seek(start)
        raise
    return ipv4(*octets)


def ipv4_address_ahead(cursor: Cursor) -> bool:
    """True when decimal digits followed by a period come next.

    Does not move the cursor.
    """
    digits = cursor.match_run(DIGITS)
    return bool(digits) and cursor.peek(len(digits)) == "."


def parse_ipv6_piece(cursor: Cursor) -> int:
    """h16: one to four hex digits."""
    begin = cursor.position
    digits = cursor.match_run(HEX_DIGITS)

    if not digits:
        raise cursor.error(DiagnosticKind.EXPECTED_HEX_DIGIT)
    if len(digits) > PIECE_MAX_DIGITS:
        raise cursor.error(
            DiagnosticKind.INTEGER_OVERFLOW, begin, begin + len(digits)
        )

    cursor.advance(len(digits))
    return int(digits, 16)
