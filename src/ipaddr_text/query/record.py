"""Serialized record sent for every successfully parsed address."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

import msgpack

from ipaddr_text.ip.address import IpAddress
from ipaddr_text.query.timestamp import Timestamp

CONTENT_TYPE = "application/msgpack"

_FIELDS = ("timestamp", "version", "pieces", "address")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class QueryRecord:
    """One address query: when it was made and what it parsed to."""

    timestamp: str
    version: int
    pieces: List[int] = field(default_factory=list)
    address: str = ""

    @classmethod
    def build(cls, address: IpAddress, timestamp: Timestamp) -> "QueryRecord":
        return cls(
            timestamp=str(timestamp),
            version=int(address.version),
            pieces=list(address.pieces),
            address=str(address),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def encode(self) -> bytes:
        return msgpack.packb(self.to_dict(), use_bin_type=True)

    @classmethod
    def decode(cls, data: bytes) -> "QueryRecord":
        """
        Unpack a record produced by ``encode``.

        Raises:
            ValueError: If the payload is not a msgpack map with the record fields.
        """
        try:
            payload = msgpack.unpackb(data, raw=False)
        except ValueError as exc:
            raise ValueError(f"Malformed query record: {exc}") from exc

        if not isinstance(payload, dict):
            raise ValueError("Malformed query record: expected a map")
        missing = [name for name in _FIELDS if name not in payload]
        if missing:
            raise ValueError(f"Malformed query record: missing {', '.join(missing)}")

        pieces = payload["pieces"]
        wrong = [
            name for name, ok in (
                ("timestamp", isinstance(payload["timestamp"], str)),
                ("version", _is_int(payload["version"])),
                ("pieces", isinstance(pieces, list) and all(_is_int(p) for p in pieces)),
                ("address", isinstance(payload["address"], str)),
            )
            if not ok
        ]
        if wrong:
            raise ValueError(f"Malformed query record: bad type for {', '.join(wrong)}")

        return cls(**{name: payload[name] for name in _FIELDS})
