"""
Bounds-checked sequential reads over a seekable binary stream.
"""

import os
from io import IOBase
from struct import unpack

from .errors import DecodeError, ErrorKind


# ============================================================================
# FIELD DECODING
# ============================================================================

def decode_u8(data: bytes) -> int:
    """Decode a single unsigned byte."""
    if len(data) != 1:
        raise ValueError(f'Expected 1 byte, got {len(data)}')
    return unpack('<B', data)[0]


def decode_u16(data: bytes) -> int:
    """Decode a 2-byte little-endian unsigned integer."""
    if len(data) != 2:
        raise ValueError(f'Expected 2 bytes, got {len(data)}')
    return unpack('<H', data)[0]


def decode_u64(data: bytes) -> int:
    """Decode an 8-byte little-endian unsigned integer."""
    if len(data) != 8:
        raise ValueError(f'Expected 8 bytes, got {len(data)}')
    return unpack('<Q', data)[0]


# ============================================================================
# BOUNDED READER
# ============================================================================

class BoundedReader(object):
    """
    Sequential reader that never consumes bytes it cannot fully read.

    Every read checks the remaining length first and raises
    DecodeError(TRUNCATED) instead of returning a short buffer. The cursor
    only moves when a read succeeds.
    """

    def __init__(self, fp: IOBase):
        self._fp = fp

    def tell(self) -> int:
        try:
            return self._fp.tell()
        except OSError as e:
            raise DecodeError(ErrorKind.IO_ERROR, f'Failed to read file: {e}') from e

    def remaining(self) -> int:
        """Number of bytes left after the current position."""
        try:
            pos = self._fp.tell()
            end = self._fp.seek(0, os.SEEK_END)
            self._fp.seek(pos)
        except OSError as e:
            raise DecodeError(ErrorKind.IO_ERROR, f'Failed to read file: {e}') from e
        return max(end - pos, 0)

    def can_read(self, n: int) -> bool:
        """Whether at least `n` more bytes can be read."""
        return n >= 0 and self.remaining() >= n

    def require(self, n: int, what: str = 'data') -> None:
        """Fail fast if fewer than `n` bytes remain."""
        if not self.can_read(n):
            raise DecodeError(
                ErrorKind.TRUNCATED,
                f'Not enough bytes left in the file for {what}: '
                f'need {n}, have {self.remaining()}',
            )

    def read_exact(self, n: int, what: str = 'data') -> bytes:
        """Read exactly `n` bytes or raise without moving the cursor."""
        self.require(n, what)
        pos = self.tell()
        try:
            data = self._fp.read(n)
        except OSError as e:
            self._fp.seek(pos)
            raise DecodeError(ErrorKind.IO_ERROR, f'Failed to read file: {e}') from e
        if data is None or len(data) != n:
            self._fp.seek(pos)
            raise DecodeError(ErrorKind.TRUNCATED, f'Short read for {what}')
        return data

    def read_u8(self, what: str = 'u8') -> int:
        return decode_u8(self.read_exact(1, what))

    def read_u16(self, what: str = 'u16') -> int:
        return decode_u16(self.read_exact(2, what))

    def read_u64(self, what: str = 'u64') -> int:
        return decode_u64(self.read_exact(8, what))
