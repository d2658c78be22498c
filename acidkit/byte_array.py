"""Growable binary buffer with typed, endian-aware reads and writes."""

from __future__ import annotations

import math
import os
import struct
from collections.abc import Iterator

from acidkit.varint import decode_varint, decode_zigzag, encode_varint, encode_zigzag

BytesLike = bytes | bytearray | memoryview


def _as_bytes(value: str | BytesLike) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


class ByteArray:
    """Byte buffer stored in fixed-size blocks, with a shared read/write cursor.

    Fixed-width values are big-endian unless ``little_endian`` is set.
    Reading past the end of the data raises IndexError.
    """

    def __init__(self, base_size: int = 4096) -> None:
        if base_size < 1:
            raise ValueError("base_size must be at least 1")
        self._base_size = base_size
        self._nodes: list[bytearray] = [bytearray(base_size)]
        self._position = 0
        self._size = 0
        self._little_endian = False

    # ------------------------------------------------------------------
    # state
    # ------------------------------------------------------------------
    @property
    def position(self) -> int:
        """Current cursor position."""
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        if value < 0 or value > self._capacity:
            raise IndexError("set_position out of range")
        self._position = value
        if self._position > self._size:
            self._size = self._position

    @property
    def base_size(self) -> int:
        """Size of each storage block."""
        return self._base_size

    @property
    def read_size(self) -> int:
        """Bytes left to read from the cursor to the end of the data."""
        return self._size - self._position

    @property
    def size(self) -> int:
        """Total length of the data."""
        return self._size

    @property
    def little_endian(self) -> bool:
        """Whether fixed-width values use little-endian byte order."""
        return self._little_endian

    @little_endian.setter
    def little_endian(self, value: bool) -> None:
        self._little_endian = bool(value)

    @property
    def _capacity(self) -> int:
        return len(self._nodes) * self._base_size

    @property
    def _order(self) -> str:
        return "little" if self._little_endian else "big"

    # ------------------------------------------------------------------
    # block management
    # ------------------------------------------------------------------
    def _add_capacity(self, size: int) -> None:
        free = self._capacity - self._position
        if size <= 0 or free >= size:
            return
        count = math.ceil((size - free) / self._base_size)
        self._nodes.extend(bytearray(self._base_size) for _ in range(count))

    def _spans(self, position: int, length: int) -> Iterator[tuple[bytearray, int, int]]:
        """Yield (block, offset, length) pieces covering [position, position+length)."""
        while length > 0:
            index, offset = divmod(position, self._base_size)
            chunk = min(self._base_size - offset, length)
            yield self._nodes[index], offset, chunk
            position += chunk
            length -= chunk

    def _copy_out(self, position: int, length: int) -> bytes:
        return b"".join(
            bytes(node[offset:offset + chunk])
            for node, offset, chunk in self._spans(position, length)
        )

    # ------------------------------------------------------------------
    # raw I/O
    # ------------------------------------------------------------------
    def clear(self) -> None:
        """Drop all data and extra blocks; reset the cursor."""
        self._position = 0
        self._size = 0
        del self._nodes[1:]

    def write(self, data: BytesLike) -> None:
        """Write raw bytes at the cursor and advance it."""
        view = memoryview(data).cast("B")
        if not len(view):
            return
        self._add_capacity(len(view))
        done = 0
        for node, offset, chunk in self._spans(self._position, len(view)):
            node[offset:offset + chunk] = view[done:done + chunk]
            done += chunk
        self._position += len(view)
        if self._position > self._size:
            self._size = self._position

    def read(self, size: int) -> bytes:
        """Read ``size`` bytes at the cursor and advance it."""
        if size > self.read_size:
            raise IndexError("not enough len")
        data = self._copy_out(self._position, size)
        self._position += size
        return data

    def peek(self, size: int, position: int) -> bytes:
        """Read ``size`` bytes starting at ``position`` without moving the cursor."""
        if position < 0 or size > self._size - position:
            raise IndexError("not enough len")
        return self._copy_out(position, size)

    # ------------------------------------------------------------------
    # fixed-width integers
    # ------------------------------------------------------------------
    def _write_int(self, value: int, width: int, signed: bool) -> None:
        self.write(value.to_bytes(width, self._order, signed=signed))

    def _read_int(self, width: int, signed: bool) -> int:
        return int.from_bytes(self.read(width), self._order, signed=signed)

    def write_fint8(self, value: int) -> None:
        self._write_int(value, 1, True)

    def write_fuint8(self, value: int) -> None:
        self._write_int(value, 1, False)

    def write_fint16(self, value: int) -> None:
        self._write_int(value, 2, True)

    def write_fuint16(self, value: int) -> None:
        self._write_int(value, 2, False)

    def write_fint32(self, value: int) -> None:
        self._write_int(value, 4, True)

    def write_fuint32(self, value: int) -> None:
        self._write_int(value, 4, False)

    def write_fint64(self, value: int) -> None:
        self._write_int(value, 8, True)

    def write_fuint64(self, value: int) -> None:
        self._write_int(value, 8, False)

    def read_fint8(self) -> int:
        return self._read_int(1, True)

    def read_fuint8(self) -> int:
        return self._read_int(1, False)

    def read_fint16(self) -> int:
        return self._read_int(2, True)

    def read_fuint16(self) -> int:
        return self._read_int(2, False)

    def read_fint32(self) -> int:
        return self._read_int(4, True)

    def read_fuint32(self) -> int:
        return self._read_int(4, False)

    def read_fint64(self) -> int:
        return self._read_int(8, True)

    def read_fuint64(self) -> int:
        return self._read_int(8, False)

    # ------------------------------------------------------------------
    # varints
    # ------------------------------------------------------------------
    def _write_varuint(self, value: int, bits: int) -> None:
        if not 0 <= value < (1 << bits):
            raise OverflowError(f"{value} does not fit in an unsigned {bits}-bit integer")
        self.write(encode_varint(value))

    def _byte_stream(self) -> Iterator[int]:
        while True:
            yield self.read_fuint8()

    def write_int32(self, value: int) -> None:
        self.write(encode_varint(encode_zigzag(value, 32)))

    def write_uint32(self, value: int) -> None:
        self._write_varuint(value, 32)

    def write_int64(self, value: int) -> None:
        self.write(encode_varint(encode_zigzag(value, 64)))

    def write_uint64(self, value: int) -> None:
        self._write_varuint(value, 64)

    def read_int32(self) -> int:
        return decode_zigzag(self.read_uint32(), 32)

    def read_uint32(self) -> int:
        value, _ = decode_varint(self._byte_stream(), 32)
        return value

    def read_int64(self) -> int:
        return decode_zigzag(self.read_uint64(), 64)

    def read_uint64(self) -> int:
        value, _ = decode_varint(self._byte_stream(), 64)
        return value

    # ------------------------------------------------------------------
    # floating point
    # ------------------------------------------------------------------
    def _prefix(self) -> str:
        return "<" if self._little_endian else ">"

    def write_float(self, value: float) -> None:
        self.write(struct.pack(self._prefix() + "f", value))

    def write_double(self, value: float) -> None:
        self.write(struct.pack(self._prefix() + "d", value))

    def read_float(self) -> float:
        return struct.unpack(self._prefix() + "f", self.read(4))[0]

    def read_double(self) -> float:
        return struct.unpack(self._prefix() + "d", self.read(8))[0]

    # ------------------------------------------------------------------
    # strings
    # ------------------------------------------------------------------
    def write_string_f16(self, value: str | BytesLike) -> None:
        data = _as_bytes(value)
        self.write_fuint16(len(data))
        self.write(data)

    def write_string_f32(self, value: str | BytesLike) -> None:
        data = _as_bytes(value)
        self.write_fuint32(len(data))
        self.write(data)

    def write_string_f64(self, value: str | BytesLike) -> None:
        data = _as_bytes(value)
        self.write_fuint64(len(data))
        self.write(data)

    def write_string_vint(self, value: str | BytesLike) -> None:
        data = _as_bytes(value)
        self.write_uint64(len(data))
        self.write(data)

    def write_string_without_length(self, value: str | BytesLike) -> None:
        self.write(_as_bytes(value))

    def read_string_f16(self) -> bytes:
        return self.read(self.read_fuint16())

    def read_string_f32(self) -> bytes:
        return self.read(self.read_fuint32())

    def read_string_f64(self) -> bytes:
        return self.read(self.read_fuint64())

    def read_string_vint(self) -> bytes:
        return self.read(self.read_uint64())

    # ------------------------------------------------------------------
    # views and files
    # ------------------------------------------------------------------
    def to_bytes(self) -> bytes:
        """Data from the cursor to the end, without moving the cursor."""
        return self._copy_out(self._position, self.read_size)

    def to_hex_string(self) -> str:
        """Readable data as two-digit hex bytes, 32 per line."""
        parts = []
        for i, byte in enumerate(self.to_bytes()):
            if i and i % 32 == 0:
                parts.append("\n")
            parts.append(f"{byte:02x} ")
        return "".join(parts)

    def write_to_file(self, path: str | os.PathLike[str]) -> None:
        """Write the readable data to ``path``, truncating it."""
        with open(path, "wb") as fh:
            for node, offset, chunk in self._spans(self._position, self.read_size):
                fh.write(memoryview(node)[offset:offset + chunk])

    def read_from_file(self, path: str | os.PathLike[str]) -> None:
        """Append the whole content of ``path`` at the cursor."""
        with open(path, "rb") as fh:
            while block := fh.read(self._base_size):
                self.write(block)

    def get_read_buffers(
        self, length: int | None = None, position: int | None = None
    ) -> list[memoryview]:
        """Views over readable data, one per block touched.

        ``length`` is clipped to the data available from ``position``
        (the cursor by default).
        """
        start = self._position if position is None else position
        available = max(self._size - start, 0)
        length = available if length is None else min(length, available)
        return [
            memoryview(node)[offset:offset + chunk]
            for node, offset, chunk in self._spans(start, length)
        ]

    def get_write_buffers(self, length: int) -> list[memoryview]:
        """Writable views of ``length`` bytes from the cursor, growing as needed.

        The cursor does not move; set ``position`` after filling the views.
        """
        if length <= 0:
            return []
        self._add_capacity(length)
        return [
            memoryview(node)[offset:offset + chunk]
            for node, offset, chunk in self._spans(self._position, length)
        ]