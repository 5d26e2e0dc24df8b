"""The parsed IP address value."""

import ipaddress
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple, Union

PIECE_COUNT = 8
PIECE_MAX = 0xFFFF


class IPVersion(IntEnum):
    V4 = 4
    V6 = 6


@dataclass(frozen=True)
class IpAddress:
    """
    An IPv4 or IPv6 address as eight 16-bit pieces.

    For IPv4 only the first two pieces are meaningful: they hold the four
    octets as big-endian halves. The remaining six pieces are zero.
    """

    version: IPVersion
    pieces: Tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, "version", IPVersion(self.version))
        object.__setattr__(self, "pieces", tuple(self.pieces))
        if len(self.pieces) != PIECE_COUNT:
            raise ValueError(
                f"IpAddress needs {PIECE_COUNT} pieces, got {len(self.pieces)}"
            )
        for piece in self.pieces:
            if not 0 <= piece <= PIECE_MAX:
                raise ValueError(f"Piece {piece!r} is not a 16-bit value")

    @property
    def meaningful_pieces(self) -> Tuple[int, ...]:
        """The pieces defined for this version: 2 for IPv4, 8 for IPv6."""
        if self.version is IPVersion.V4:
            return self.pieces[:2]
        return self.pieces

    def octets(self) -> Tuple[int, int, int, int]:
        """Return the four octets of an IPv4 address."""
        if self.version is not IPVersion.V4:
            raise ValueError("octets() is only defined for IPv4 addresses")
        hi, lo = self.pieces[0], self.pieces[1]
        return (hi >> 8, hi & 0xFF, lo >> 8, lo & 0xFF)

    @property
    def packed(self) -> bytes:
        """Network-order bytes: 4 for IPv4, 16 for IPv6."""
        return b"".join(p.to_bytes(2, "big") for p in self.meaningful_pieces)

    def __int__(self) -> int:
        return int.from_bytes(self.packed, "big")

    def hex(self) -> str:
        """Pieces as one ``0x``-prefixed string, four hex digits per piece."""
        return "0x" + "".join(f"{p:04x}" for p in self.meaningful_pieces)

    def to_ipaddress(self) -> Union[ipaddress.IPv4Address, ipaddress.IPv6Address]:
        if self.version is IPVersion.V4:
            return ipaddress.IPv4Address(self.packed)
        return ipaddress.IPv6Address(self.packed)

    def __str__(self) -> str:
        # ipaddress renders IPv6 in the RFC 5952 compressed form.
        return str(self.to_ipaddress())


def ipv4(a: int, b: int, c: int, d: int) -> IpAddress:
    """Construct an IPv4 address from its four octets."""
    for octet in (a, b, c, d):
        if not 0 <= octet <= 0xFF:
            raise ValueError(f"Octet {octet!r} is out of range")
    pieces = [(a << 8) | b, (c << 8) | d] + [0] * (PIECE_COUNT - 2)
    return IpAddress(IPVersion.V4, tuple(pieces))
