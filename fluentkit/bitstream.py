"""Growable sequence of bits, written most significant bit first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

__all__ = ["BitStream"]


class BitStream:
    """A sequence of bits that can be appended to and packed into bytes."""

    __slots__ = ("_bits",)

    def __init__(self) -> None:
        self._bits = bytearray()

    @classmethod
    def from_bits(cls, bits: Iterable[int]) -> BitStream:
        """Build a stream from an iterable of 0/1 values."""
        stream = cls()
        data = bytearray(bits)
        if any(b not in (0, 1) for b in data):
            raise ValueError("bits must be 0 or 1")
        stream._bits = data
        return stream

    def append(self, other: BitStream) -> None:
        """Append all bits of another stream."""
        if not isinstance(other, BitStream):
            raise TypeError("can only append a BitStream")
        self._bits.extend(other._bits)

    def append_num(self, bits: int, num: int) -> None:
        """Append the lowest ``bits`` bits of ``num``, most significant first."""
        if bits < 0:
            raise ValueError("bit count must not be negative")
        self._bits.extend((num >> shift) & 1 for shift in range(bits - 1, -1, -1))

    def append_bytes(self, data: bytes) -> None:
        """Append every byte of ``data`` as eight bits, most significant first."""
        for byte in bytes(data):
            self._bits.extend((byte >> shift) & 1 for shift in range(7, -1, -1))

    def to_bytes(self) -> bytes:
        """Pack the bits into bytes, padding the last byte with zero bits."""
        out = bytearray()
        for start in range(0, len(self._bits), 8):
            chunk = self._bits[start:start + 8]
            value = 0
            for bit in chunk:
                value = (value << 1) | bit
            out.append(value << (8 - len(chunk)))
        return bytes(out)

    def reset(self) -> None:
        """Discard all bits."""
        self._bits.clear()

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitStream):
            return NotImplemented
        return self._bits == other._bits

    def __repr__(self) -> str:
        return f"BitStream('{''.join(map(str, self._bits))}')"