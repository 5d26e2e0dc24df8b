"""Text-representation parser for IPv4 and IPv6 addresses."""

from ipaddr_text.errors import (
    AddressSyntaxError,
    Diagnostic,
    DiagnosticKind,
    InvalidAddressError,
    ParseError,
)
from ipaddr_text.grammar.parser import ParseResult, parse_ip_address, parse_strict
from ipaddr_text.ip.address import IPVersion, IpAddress

__version__ = "1.0.0"

parse = parse_ip_address

__all__ = [
    "AddressSyntaxError",
    "Diagnostic",
    "DiagnosticKind",
    "IPVersion",
    "InvalidAddressError",
    "IpAddress",
    "ParseError",
    "ParseResult",
    "parse",
    "parse_ip_address",
    "parse_strict",
    "__version__",
]
