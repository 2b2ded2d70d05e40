"""Bounds-checked big-endian reader over an in-memory buffer.

Sample files are small and always loaded whole, so decoding walks a
bytes object with an explicit offset instead of a file handle.
"""

from __future__ import annotations

import struct

from core.constants import (
    COORDINATE_STRUCT_FORMAT,
    COUNT_STRUCT_FORMAT,
    STRING_LENGTH_STRUCT_FORMAT,
    TIMESTAMP_STRUCT_FORMAT,
)
from core.errors import BaroFormatError


class ByteReader:
    """Sequential reader that never reads past the end of its buffer."""

    def __init__(self, payload: bytes) -> None:
        self._payload = memoryview(payload)
        self._offset = 0

    @property
    def offset(self) -> int:
        """Return the number of bytes consumed so far."""
        return self._offset

    @property
    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._payload) - self._offset

    def read_exact(self, size: int, field_name: str) -> bytes:
        """Consume exactly ``size`` bytes.

        Args:
            size: Number of bytes to read.
            field_name: Field being decoded, for error messages.

        Returns:
            The consumed bytes.

        Raises:
            BaroFormatError: If fewer than ``size`` bytes remain.
        """
        if size > self.remaining:
            raise BaroFormatError(
                f"Unexpected end of data reading {field_name} at offset {self._offset}: "
                f"need {size} bytes, {self.remaining} remain."
            )
        start = self._offset
        self._offset += size
        return bytes(self._payload[start : self._offset])

    def read_u16(self, field_name: str) -> int:
        """Read a big-endian unsigned 16-bit integer."""
        return self._unpack(STRING_LENGTH_STRUCT_FORMAT, field_name)

    def read_u32(self, field_name: str) -> int:
        """Read a big-endian unsigned 32-bit integer."""
        return self._unpack(COUNT_STRUCT_FORMAT, field_name)

    def read_i32(self, field_name: str) -> int:
        """Read a big-endian signed 32-bit integer."""
        return self._unpack(COORDINATE_STRUCT_FORMAT, field_name)

    def read_u64(self, field_name: str) -> int:
        """Read a big-endian unsigned 64-bit integer."""
        return self._unpack(TIMESTAMP_STRUCT_FORMAT, field_name)

    def _unpack(self, struct_format: str, field_name: str) -> int:
        raw = self.read_exact(struct.calcsize(struct_format), field_name)
        return int(struct.unpack(struct_format, raw)[0])
