"""Tests for ipaddr_text.grammar.parser module."""

import ipaddress
import itertools

import pytest

from ipaddr_text import parse_ip_address, parse_strict
from ipaddr_text.errors import (
    AddressSyntaxError,
    DiagnosticKind,
    InvalidAddressError,
    ParseError,
)
from ipaddr_text.ip.address import IPVersion, ipv4


class TestIpv4:
    @pytest.mark.parametrize("octets", [
        (0, 0, 0, 0),
        (127, 0, 0, 1),
        (192, 168, 1, 254),
        (255, 255, 255, 255),
        (10, 20, 30, 40),
    ])
    def test_octets_reconstructed(self, octets):
        result = parse_ip_address(".".join(str(o) for o in octets))
        assert result.ok
        assert result.address.version is IPVersion.V4
        hi, lo = result.address.pieces[:2]
        assert (hi >> 8, hi & 0xFF, lo >> 8, lo & 0xFF) == octets

    def test_leading_zero_is_hard_failure(self):
        with pytest.raises(AddressSyntaxError) as exc_info:
            parse_ip_address("192.168.01.1")
        assert exc_info.value.diagnostic.kind is DiagnosticKind.LEADING_ZERO

    def test_three_octets_rejected(self):
        with pytest.raises(AddressSyntaxError):
            parse_ip_address("10.0.0")

    @pytest.mark.parametrize("text", [
        "9" * 5000 + ".1.1.1",
        "1.1.1." + "1" * 5000,
        "::" + "1" * 5000 + ".1.1.1",
    ])
    def test_very_long_octet_is_overflow(self, text):
        with pytest.raises(AddressSyntaxError) as exc_info:
            parse_ip_address(text)
        assert exc_info.value.diagnostic.kind is DiagnosticKind.INTEGER_OVERFLOW


class TestIpv6:
    def test_canonical_groups_unchanged(self):
        result = parse_ip_address("2001:db8:85a3:0:0:8a2e:370:7334")
        assert result.ok
        assert result.address.pieces == (
            0x2001, 0xDB8, 0x85A3, 0, 0, 0x8A2E, 0x370, 0x7334
        )

    def test_embedded_ipv4(self):
        result = parse_ip_address("::ffff:192.0.2.1")
        assert result.address.version is IPVersion.V6
        assert result.address.pieces[6:] == ipv4(192, 0, 2, 1).pieces[:2]

    def test_group_after_embedded_ipv4_rejected(self):
        with pytest.raises(AddressSyntaxError) as exc_info:
            parse_ip_address("::192.0.2.1:1")
        assert exc_info.value.diagnostic.kind is DiagnosticKind.EXPECTED_EOF

    def test_matches_stdlib(self):
        for text in ("fe80::1", "::", "2001:db8::", "1:0:0:2::3", "::ffff:1.2.3.4"):
            expected = ipaddress.IPv6Address(text)
            assert parse_ip_address(text).address.to_ipaddress() == expected


class TestDiagnostics:
    @pytest.mark.parametrize("text,kinds", [
        ("1::2::3", [DiagnosticKind.DUPLICATE_ELISION]),
        ("1:2:3:4:5:6:7", [DiagnosticKind.MISSING_PIECES]),
        ("1:2:3:4:5:6:7:8:9", [DiagnosticKind.TOO_MANY_PIECES]),
        ("1:2:3:4:5:6:7:8::", [DiagnosticKind.TOO_MANY_PIECES]),
        ("1::2::3:4:5:6:7:8:9", [
            DiagnosticKind.DUPLICATE_ELISION,
            DiagnosticKind.TOO_MANY_PIECES,
        ]),
    ])
    def test_reported_with_result(self, text, kinds):
        result = parse_ip_address(text)
        assert not result.ok
        assert [d.kind for d in result.diagnostics] == kinds
        assert result.address.version is IPVersion.V6

    def test_strict_raises_with_all_diagnostics(self):
        with pytest.raises(InvalidAddressError) as exc_info:
            parse_strict("1::2::3::4")
        exc = exc_info.value
        assert len(exc.diagnostics) == 2
        assert exc.address.pieces == (1, 0, 0, 0, 0, 2, 3, 4)
        assert exc.text == "1::2::3::4"

    def test_strict_returns_address(self):
        assert parse_strict("10.1.2.3") == ipv4(10, 1, 2, 3)

    def test_hard_failure_keeps_earlier_diagnostics(self):
        with pytest.raises(AddressSyntaxError) as exc_info:
            parse_ip_address("1::2::3x")
        kinds = [d.kind for d in exc_info.value.diagnostics]
        assert kinds == [DiagnosticKind.DUPLICATE_ELISION, DiagnosticKind.EXPECTED_EOF]
        assert exc_info.value.diagnostic.kind is DiagnosticKind.EXPECTED_EOF


class TestTrailingInput:
    @pytest.mark.parametrize("text", [
        "127.0.0.1x",
        "127.0.0.1 ",
        "1.2.3.4.5",
        "::1 ",
        "1::2%eth0",
        "10.0.0.0/8",
        "1:::2",
    ])
    def test_rejected(self, text):
        with pytest.raises(AddressSyntaxError) as exc_info:
            parse_ip_address(text)
        diag = exc_info.value.diagnostic
        assert diag.kind is DiagnosticKind.EXPECTED_EOF
        assert diag.end == len(text)

    def test_syntax_error_is_parse_error(self):
        with pytest.raises(ParseError):
            parse_ip_address("127.0.0.1x")


class TestRoundTrip:
    @pytest.mark.parametrize("text", [
        "0.0.0.0",
        "203.0.113.9",
        "::",
        "::1",
        "1::",
        "2001:DB8::8:800:200C:417A",
        "0:0:0:0:0:0:13.1.68.3",
        "::ffff:129.144.52.38",
        "fe80:0:0:0:0:0:0:1",
        "1:0:0:2:0:0:0:3",
    ])
    def test_format_then_parse_is_stable(self, text):
        first = parse_strict(text)
        second = parse_strict(str(first))
        assert second == first
        assert parse_strict(str(second)) == second

    def test_exhaustive_short_elisions(self):
        for left, right in itertools.product(range(4), range(4)):
            if left + right > 7:
                continue
            groups = [f"{i + 1:x}" for i in range(left + right)]
            text = ":".join(groups[:left]) + "::" + ":".join(groups[left:])
            address = parse_strict(text)
            assert parse_strict(str(address)) == address
            assert address.pieces.count(0) >= 8 - left - right


def test_rejects_non_string():
    with pytest.raises(TypeError):
        parse_ip_address(b"127.0.0.1")
