"""
Removal of characters that are illegal in XML 1.0.

Real-world WordPress exports occasionally contain stray control characters
(usually pasted in from word processors).  A strict XML parser rejects the
whole document when it meets one, so the raw byte stream goes through
:class:`ControlCharacterFilter` before it reaches the decoder.

Only single bytes below ``0x20`` are removed (tab, LF and CR excepted).  In
UTF-8 those bytes never occur inside a multi-byte sequence, so the filter can
work chunk by chunk without decoding.
"""

from __future__ import annotations

import io
from typing import BinaryIO

_INVALID_BYTES = bytes(b for b in range(0x20) if b not in (0x09, 0x0A, 0x0D))

DEFAULT_CHUNK_SIZE = 64 * 1024


def strip_control_characters(data: bytes) -> bytes:
    """Return ``data`` without XML-illegal control bytes."""
    return data.translate(None, _INVALID_BYTES)


class ControlCharacterFilter(io.RawIOBase):
    """Read-only binary stream that drops XML-illegal control bytes.

    Wraps any object with a ``read(n)`` method returning ``bytes``.  At most
    ``chunk_size`` bytes are pulled from the source per call, so the input is
    never held in memory as a whole.
    """

    def __init__(self, raw: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        super().__init__()
        self._raw = raw
        self._chunk_size = max(1, chunk_size)
        self._pending = b""
        self.removed = 0

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        size = len(buffer)
        if size == 0:
            return 0
        # A chunk made only of control bytes filters down to b"", which must
        # not be returned as EOF while the source still has data.
        while not self._pending:
            chunk = self._raw.read(self._chunk_size)
            if not chunk:
                return 0
            cleaned = strip_control_characters(chunk)
            self.removed += len(chunk) - len(cleaned)
            self._pending = cleaned
        n = min(size, len(self._pending))
        buffer[:n] = self._pending[:n]
        self._pending = self._pending[n:]
        return n
