"""IP address value type and the IPv6 piece builder."""

from ipaddr_text.ip.address import IPVersion, IpAddress, ipv4
from ipaddr_text.ip.builder import IPv6Builder

__all__ = [
    "IPVersion",
    "IpAddress",
    "IPv6Builder",
    "ipv4",
]
