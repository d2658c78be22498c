import math

import pytest

from acidkit.byte_array import ByteArray


FIXED = [
    ("fint8", -128),
    ("fint8", 127),
    ("fuint8", 255),
    ("fint16", -32768),
    ("fuint16", 65535),
    ("fint32", -123456789),
    ("fuint32", 0xFFFFFFFF),
    ("fint64", -(1 << 63)),
    ("fuint64", (1 << 64) - 1),
    ("int32", -(1 << 31)),
    ("int32", (1 << 31) - 1),
    ("uint32", 0xFFFFFFFF),
    ("int64", -(1 << 63)),
    ("int64", 12345678901234),
    ("uint64", (1 << 64) - 1),
]


@pytest.mark.parametrize("little", [False, True])
@pytest.mark.parametrize("kind,value", FIXED)
def test_round_trip_across_blocks(kind, value, little):
    ba = ByteArray(3)
    ba.little_endian = little
    for _ in range(10):
        getattr(ba, f"write_{kind}")(value)
    ba.position = 0
    assert [getattr(ba, f"read_{kind}")() for _ in range(10)] == [value] * 10
    assert ba.read_size == 0


def test_big_endian_wire_bytes():
    ba = ByteArray()
    ba.write_fuint32(0x01020304)
    ba.position = 0
    assert ba.to_bytes() == b"\x01\x02\x03\x04"


def test_little_endian_wire_bytes():
    ba = ByteArray()
    ba.little_endian = True
    ba.write_fuint16(0x0102)
    ba.position = 0
    assert ba.to_bytes() == b"\x02\x01"


def test_varint_wire_bytes():
    ba = ByteArray()
    ba.write_uint32(300)
    ba.write_int32(-1)
    ba.position = 0
    assert ba.to_bytes() == b"\xac\x02\x01"


def test_float_and_double():
    ba = ByteArray(5)
    ba.write_float(1.5)
    ba.write_double(math.pi)
    ba.position = 0
    assert ba.read_float() == 1.5
    assert ba.read_double() == math.pi


@pytest.mark.parametrize("kind", ["f16", "f32", "f64", "vint"])
def test_strings_round_trip(kind):
    ba = ByteArray(4)
    getattr(ba, f"write_string_{kind}")("hello world")
    getattr(ba, f"write_string_{kind}")(b"")
    ba.position = 0
    assert getattr(ba, f"read_string_{kind}")() == b"hello world"
    assert getattr(ba, f"read_string_{kind}")() == b""


def test_string_without_length():
    ba = ByteArray(2)
    ba.write_string_without_length("abcde")
    assert ba.size == 5
    ba.position = 0
    assert ba.read(5) == b"abcde"


def test_read_past_end_raises():
    ba = ByteArray()
    ba.write_fuint8(1)
    ba.position = 0
    ba.read_fuint8()
    with pytest.raises(IndexError):
        ba.read_fuint8()


def test_truncated_varint_raises():
    ba = ByteArray()
    ba.write(b"\x80\x80")
    ba.position = 0
    with pytest.raises(IndexError):
        ba.read_uint32()


def test_out_of_range_value_raises():
    ba = ByteArray()
    with pytest.raises(OverflowError):
        ba.write_fuint8(256)
    with pytest.raises(OverflowError):
        ba.write_uint32(1 << 32)
    assert ba.size == 0


def test_position_beyond_capacity_raises():
    ba = ByteArray(4)
    ba.position = 4
    assert ba.size == 4
    with pytest.raises(IndexError):
        ba.position = 5


def test_position_extends_size():
    ba = ByteArray(8)
    ba.position = 5
    assert ba.size == 5
    assert ba.read_size == 0


def test_clear_resets_state_and_capacity():
    ba = ByteArray(4)
    ba.write(b"x" * 20)
    ba.clear()
    assert (ba.size, ba.position, ba.read_size) == (0, 0, 0)
    with pytest.raises(IndexError):
        ba.position = 5


def test_peek_does_not_move_cursor():
    ba = ByteArray(3)
    ba.write(b"abcdefgh")
    assert ba.peek(4, 2) == b"cdef"
    assert ba.position == 8
    with pytest.raises(IndexError):
        ba.peek(7, 2)


def test_to_bytes_from_cursor():
    ba = ByteArray(3)
    ba.write(b"0123456789")
    ba.position = 4
    assert ba.to_bytes() == b"456789"
    assert ba.position == 4


def test_hex_string():
    ba = ByteArray()
    ba.write(b"\x00\xff")
    ba.position = 0
    assert ba.to_hex_string() == "00 ff "


def test_hex_string_breaks_every_32_bytes():
    ba = ByteArray()
    ba.write(bytes(range(40)))
    ba.position = 0
    lines = ba.to_hex_string().split("\n")
    assert len(lines) == 2
    assert len(lines[0].split()) == 32
    assert len(lines[1].split()) == 8


def test_file_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    src = ByteArray(7)
    payload = bytes(range(256)) * 3
    src.write(payload)
    src.position = 10
    src.write_to_file(path)
    assert path.read_bytes() == payload[10:]

    dst = ByteArray(16)
    dst.read_from_file(path)
    dst.position = 0
    assert dst.to_bytes() == payload[10:]


def test_read_missing_file_raises(tmp_path):
    ba = ByteArray()
    with pytest.raises(OSError):
        ba.read_from_file(tmp_path / "missing.bin")


def test_write_buffers_fill_and_read_back():
    ba = ByteArray(4)
    buffers = ba.get_write_buffers(10)
    assert sum(len(b) for b in buffers) == 10
    assert all(len(b) <= 4 for b in buffers)
    data = b"abcdefghij"
    offset = 0
    for view in buffers:
        view[:] = data[offset:offset + len(view)]
        offset += len(view)
    ba.position = 10
    ba.position = 0
    assert ba.read(10) == data


def test_read_buffers_cover_data():
    ba = ByteArray(4)
    ba.write(b"0123456789")
    ba.position = 1
    views = ba.get_read_buffers()
    assert b"".join(bytes(v) for v in views) == b"123456789"
    limited = ba.get_read_buffers(3)
    assert b"".join(bytes(v) for v in limited) == b"123"
    at = ba.get_read_buffers(100, 6)
    assert b"".join(bytes(v) for v in at) == b"6789"


def test_invalid_base_size():
    with pytest.raises(ValueError):
        ByteArray(0)