"""A fixed-size set of bits whose length is rounded up to a multiple of eight."""

from __future__ import annotations

_ALIGN = 8


class Bitmap:
    """Bit set of at least ``nbits`` bits, stored as bytes.

    The number of usable bits is ``nbits`` rounded up to a multiple of eight.
    Bit ``pos`` lives in byte ``pos // 8`` at bit ``pos % 8`` (least significant first).
    """

    def __init__(self, nbits: int) -> None:
        if nbits < 0:
            raise ValueError("number of bits must not be negative")
        self._size = (nbits + _ALIGN - 1) // _ALIGN * _ALIGN
        self._bytes = bytearray(self._size // _ALIGN)

    def __len__(self) -> int:
        return self._size

    def _locate(self, pos: int) -> tuple[int, int]:
        if not 0 <= pos < self._size:
            raise IndexError("Out Of Range")
        return divmod(pos, _ALIGN)

    def count(self) -> int:
        """Return the number of bits that are set."""
        return sum(bin(byte).count("1") for byte in self._bytes)

    def test(self, pos: int) -> bool:
        """Return whether the bit at ``pos`` is set."""
        index, bit = self._locate(pos)
        return bool(self._bytes[index] >> bit & 1)

    def any(self) -> bool:
        """Return whether at least one bit is set."""
        return any(self._bytes)

    def none(self) -> bool:
        """Return whether no bit is set."""
        return not self.any()

    def all(self) -> bool:
        """Return whether every bit is set."""
        return all(byte == 0xFF for byte in self._bytes)

    def set(self, pos: int | None = None, value: bool = True) -> Bitmap:
        """Set the bit at ``pos`` to ``value``; with no position, set every bit."""
        if pos is None:
            fill = 0xFF if value else 0
            self._bytes[:] = bytes([fill]) * len(self._bytes)
            return self
        index, bit = self._locate(pos)
        if value:
            self._bytes[index] |= 1 << bit
        else:
            self._bytes[index] &= ~(1 << bit) & 0xFF
        return self

    def reset(self, pos: int | None = None) -> Bitmap:
        """Clear the bit at ``pos``; with no position, clear every bit."""
        return self.set(pos, False)

    def flip(self, pos: int | None = None) -> Bitmap:
        """Toggle the bit at ``pos``; with no position, toggle every bit."""
        if pos is None:
            self._bytes[:] = bytes(~byte & 0xFF for byte in self._bytes)
            return self
        index, bit = self._locate(pos)
        self._bytes[index] ^= 1 << bit
        return self

    def to_string(self) -> str:
        """Return the bits as '0'/'1' characters, lowest position first."""
        return "".join(
            "1" if byte >> bit & 1 else "0"
            for byte in self._bytes
            for bit in range(_ALIGN)
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Bitmap({self._size}, bits={self.to_string()!r})"