import sys

import pytest

from acidkit.endian import byte_swap, endian_cast


def test_byte_swap_pinned_value():
    assert byte_swap(0x12345678, 4) == 0x78563412


@pytest.mark.parametrize(
    "value,size",
    [(0x1234, 2), (0xDEADBEEF, 4), (0x0102030405060708, 8), (0xFFFF, 2), (0, 4)],
)
def test_byte_swap_matches_reversed_bytes(value, size):
    swapped = byte_swap(value, size)
    assert swapped.to_bytes(size, "big") == value.to_bytes(size, "little")


@pytest.mark.parametrize("value,size", [(0xAB, 1), (0x1234, 2), (0x89ABCDEF, 4), (2**64 - 1, 8)])
def test_byte_swap_is_an_involution(value, size):
    assert byte_swap(byte_swap(value, size), size) == value


def test_byte_swap_single_byte_is_identity():
    assert byte_swap(0x7F, 1) == 0x7F


def test_byte_swap_signed_roundtrip():
    assert byte_swap(byte_swap(-2, 4), 4) == -2


def test_byte_swap_rejects_bad_size():
    with pytest.raises(ValueError):
        byte_swap(1, 3)


def test_byte_swap_rejects_overflow():
    with pytest.raises(ValueError):
        byte_swap(0x10000, 2)


def test_endian_cast_single_byte_unchanged():
    assert endian_cast(0x42, 1) == 0x42


def test_endian_cast_matches_host_order():
    value = 0x01020304
    expected = value if sys.byteorder == "big" else byte_swap(value, 4)
    assert endian_cast(value, 4) == expected


def test_endian_cast_roundtrip():
    assert endian_cast(endian_cast(0x0A0B0C0D0E0F1011, 8), 8) == 0x0A0B0C0D0E0F1011


def test_endian_cast_rejects_bad_size():
    with pytest.raises(ValueError):
        endian_cast(1, 16)