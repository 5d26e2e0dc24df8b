"""Accumulates IPv6 pieces while an address is being scanned."""

from typing import List, Optional

from ipaddr_text.ip.address import PIECE_COUNT, IPVersion, IpAddress


class IPv6Builder:
    """
    Collects the pieces of one IPv6 address and expands ``::`` on finish.

    Pieces beyond the eighth are counted but not stored, so the scanner can
    still tell how many groups the text held after the buffer is full.
    """

    def __init__(self):
        self._pieces: List[int] = [0] * PIECE_COUNT
        self._count = 0
        self._elision_index: Optional[int] = None
        self._finished = False

    @property
    def count(self) -> int:
        return self._count

    @property
    def has_elision(self) -> bool:
        return self._elision_index is not None

    @property
    def elision_index(self) -> Optional[int]:
        return self._elision_index

    def elision(self) -> bool:
        """
        Mark a zero run at the current position.

        Returns:
            False if an elision was already recorded, True otherwise
        """
        self._check_open()
        if self.has_elision:
            return False
        self._elision_index = self._count
        return True

    def piece(self, value: int) -> None:
        self._check_open()
        if self._count < PIECE_COUNT:
            self._pieces[self._count] = value
        self._count += 1

    def ipv4(self, address: IpAddress) -> None:
        """Append an embedded IPv4 address as two pieces."""
        self._check_open()
        if address.version is not IPVersion.V4:
            raise ValueError("Embedded address must be IPv4")
        if self._count <= PIECE_COUNT - 2:
            self._pieces[self._count] = address.pieces[0]
            self._pieces[self._count + 1] = address.pieces[1]
        self._count += 2

    def finish(self) -> IpAddress:
        """
        Produce the final address. The builder cannot be used afterwards.

        With an elision, ``8 - count`` zero pieces are inserted at the
        elision point; without one the buffer is taken as it is.
        """
        self._check_open()
        self._finished = True

        stored = min(self._count, PIECE_COUNT)
        if self._elision_index is None:
            return IpAddress(IPVersion.V6, tuple(self._pieces))

        split = min(self._elision_index, stored)
        zeros = max(0, PIECE_COUNT - self._count)
        pieces = self._pieces[:split] + [0] * zeros + self._pieces[split:stored]
        return IpAddress(IPVersion.V6, tuple(pieces[:PIECE_COUNT]))

    def _check_open(self) -> None:
        if self._finished:
            raise RuntimeError("IPv6Builder has already been finished")
