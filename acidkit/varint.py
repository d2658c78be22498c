"""ZigZag and base-128 varint encoding."""

from __future__ import annotations

from collections.abc import Iterable

_BITS = frozenset({32, 64})


def _check_bits(bits: int) -> None:
    if bits not in _BITS:
        raise ValueError(f"unsupported width: {bits} (expected 32 or 64)")


def encode_zigzag(value: int, bits: int) -> int:
    """Map a signed integer of ``bits`` width to an unsigned one."""
    _check_bits(bits)
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if not low <= value <= high:
        raise ValueError(f"{value} does not fit in a signed {bits}-bit integer")
    mask = (1 << bits) - 1
    if value < 0:
        return ((-value) * 2 - 1) & mask
    return (value * 2) & mask


def decode_zigzag(value: int, bits: int) -> int:
    """Map an unsigned ZigZag value of ``bits`` width back to a signed one."""
    _check_bits(bits)
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{value} does not fit in an unsigned {bits}-bit integer")
    return (value >> 1) ^ -(value & 1)


def encode_varint(value: int) -> bytes:
    """Encode a non-negative integer as a little-endian base-128 varint."""
    if value < 0:
        raise ValueError("varint value must be non-negative")
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def decode_varint(data: Iterable[int], bits: int) -> tuple[int, int]:
    """Decode a varint of at most ``bits`` width.

    Returns the value and the number of bytes consumed. Raises ValueError if
    the data ends before the varint is complete.
    """
    _check_bits(bits)
    mask = (1 << bits) - 1
    result = 0
    consumed = 0
    it = iter(data)
    for shift in range(0, bits, 7):
        try:
            byte = next(it)
        except StopIteration:
            raise ValueError("not enough data for varint") from None
        consumed += 1
        if byte < 0x80:
            result |= (byte << shift) & mask
            break
        result |= ((byte & 0x7F) << shift) & mask
    return result, consumed