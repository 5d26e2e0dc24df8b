"""Recursive-descent grammar for IP address text."""

from ipaddr_text.grammar.cursor import Cursor
from ipaddr_text.grammar.ipv6 import scan_ipv6_address
from ipaddr_text.grammar.parser import ParseResult, parse_ip_address, parse_strict
from ipaddr_text.grammar.rules import (
    ipv4_address_ahead,
    parse_ipv4_address,
    parse_ipv4_octet,
    parse_ipv6_piece,
)

__all__ = [
    "Cursor",
    "ParseResult",
    "ipv4_address_ahead",
    "parse_ip_address",
    "parse_ipv4_address",
    "parse_ipv4_octet",
    "parse_ipv6_piece",
    "parse_strict",
    "scan_ipv6_address",
]
