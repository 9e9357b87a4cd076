"""
Linear byte container used by the transfer codec.

All integers are little-endian. Booleans are written as 32-bit 0/1, strings
and blobs as a 32-bit byte length followed by the bytes, with length -1
standing for None.
"""

import struct
from typing import Optional

from wifimigrate.errors import MalformedTransferDataError

_INT32 = struct.Struct("<i")
_UINT16 = struct.Struct("<H")
_UINT8 = struct.Struct("<B")

NULL_LENGTH = -1


class Parcel:
    """Append-only writer, or sequential reader over existing bytes."""

    def __init__(self, data: bytes = b""):
        self._buffer = bytearray(data)
        self._position = 0

    # ---------------- writing ----------------
    def write_raw(self, data: bytes) -> None:
        self._buffer.extend(data)

    def write_uint8(self, value: int) -> None:
        self._buffer.extend(_UINT8.pack(value))

    def write_uint16(self, value: int) -> None:
        self._buffer.extend(_UINT16.pack(value))

    def write_int32(self, value: int) -> None:
        self._buffer.extend(_INT32.pack(value))

    def write_bool(self, value: bool) -> None:
        self.write_int32(1 if value else 0)

    def write_blob(self, data: Optional[bytes]) -> None:
        if data is None:
            self.write_int32(NULL_LENGTH)
            return
        self.write_int32(len(data))
        self._buffer.extend(data)

    def write_string(self, value: Optional[str]) -> None:
        self.write_blob(None if value is None else value.encode("utf-8"))

    def to_bytes(self) -> bytes:
        return bytes(self._buffer)

    # ---------------- reading ----------------
    @property
    def remaining(self) -> int:
        return len(self._buffer) - self._position

    def _take(self, size: int, what: str) -> bytes:
        if self.remaining < size:
            raise MalformedTransferDataError(
                f"truncated data reading {what}: need {size} bytes at offset "
                f"{self._position}, have {self.remaining}"
            )
        chunk = bytes(self._buffer[self._position : self._position + size])
        self._position += size
        return chunk

    def read_raw(self, size: int, what: str = "raw bytes") -> bytes:
        return self._take(size, what)

    def read_uint8(self, what: str = "uint8") -> int:
        return _UINT8.unpack(self._take(_UINT8.size, what))[0]

    def read_uint16(self, what: str = "uint16") -> int:
        return _UINT16.unpack(self._take(_UINT16.size, what))[0]

    def read_int32(self, what: str = "int32") -> int:
        return _INT32.unpack(self._take(_INT32.size, what))[0]

    def read_bool(self, what: str = "bool") -> bool:
        value = self.read_int32(what)
        if value not in (0, 1):
            raise MalformedTransferDataError(f"invalid {what} flag: {value}")
        return value == 1

    def read_length(self, what: str) -> int:
        """Read a length prefix, returning -1 for None."""
        length = self.read_int32(f"{what} length")
        if length < NULL_LENGTH:
            raise MalformedTransferDataError(f"negative {what} length: {length}")
        return length

    def read_blob(self, what: str = "blob") -> Optional[bytes]:
        length = self.read_length(what)
        if length == NULL_LENGTH:
            return None
        return self._take(length, what)

    def read_string(self, what: str = "string") -> Optional[str]:
        data = self.read_blob(what)
        if data is None:
            return None
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedTransferDataError(f"{what} is not valid UTF-8") from e

    def expect_end(self) -> None:
        if self.remaining:
            raise MalformedTransferDataError(
                f"{self.remaining} trailing bytes after payload"
            )
