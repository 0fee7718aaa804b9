"""Little-endian loading and storing of fixed-width unsigned integers."""

from __future__ import annotations

import struct

_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_MASK32 = 0xFFFFFFFF
_MASK48 = (1 << 48) - 1
_MASK64 = (1 << 64) - 1


def load32(data: bytes, offset: int = 0) -> int:
    """Read an unsigned 32-bit little-endian word at ``offset``."""
    return _U32.unpack_from(data, offset)[0]


def load48(data: bytes, offset: int = 0) -> int:
    """Read an unsigned 48-bit little-endian word at ``offset``."""
    if offset < 0 or offset + 6 > len(data):
        raise ValueError("not enough data for a 48-bit word")
    return int.from_bytes(bytes(data[offset:offset + 6]), "little")


def load64(data: bytes, offset: int = 0) -> int:
    """Read an unsigned 64-bit little-endian word at ``offset``."""
    return _U64.unpack_from(data, offset)[0]


def store32(value: int) -> bytes:
    """Encode the low 32 bits of ``value`` little-endian."""
    return _U32.pack(value & _MASK32)


def store48(value: int) -> bytes:
    """Encode the low 48 bits of ``value`` little-endian."""
    return (value & _MASK48).to_bytes(6, "little")


def store64(value: int) -> bytes:
    """Encode the low 64 bits of ``value`` little-endian."""
    return _U64.pack(value & _MASK64)