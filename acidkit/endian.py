"""Byte-order helpers for fixed-width integers."""

from __future__ import annotations

import sys

_SIZES = frozenset({1, 2, 4, 8})


def _check_size(size: int) -> None:
    if size not in _SIZES:
        raise ValueError(f"unsupported integer size: {size} (expected 1, 2, 4 or 8)")


def byte_swap(value: int, size: int) -> int:
    """Reverse the byte order of a ``size``-byte integer.

    Negative values are treated as two's complement signed integers and the
    result is returned signed; non-negative values are treated as unsigned.
    """
    _check_size(size)
    signed = value < 0
    try:
        raw = value.to_bytes(size, "big", signed=signed)
    except OverflowError as exc:
        raise ValueError(f"{value} does not fit in {size} byte(s)") from exc
    return int.from_bytes(raw, "little", signed=signed)


def endian_cast(value: int, size: int) -> int:
    """Convert between host and network (big-endian) byte order."""
    _check_size(size)
    if size == 1 or sys.byteorder == "big":
        return value
    return byte_swap(value, size)