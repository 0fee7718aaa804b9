"""Deterministic byte stream produced by repeated BLAKE2b-512 hashing."""

from __future__ import annotations

from .blake2 import blake2b
from .endian import load32, store32

MAX_SEED_SIZE = 60
_STATE_SIZE = 64


class Blake2Generator:
    """Pseudo-random generator seeded with up to 60 bytes and a 32-bit nonce."""

    def __init__(self, seed: bytes, nonce: int = 0) -> None:
        seed = bytes(seed[:MAX_SEED_SIZE])
        self._data = seed.ljust(MAX_SEED_SIZE, b"\0") + store32(nonce)
        self._index = _STATE_SIZE

    def _ensure(self, needed: int) -> None:
        if self._index + needed > _STATE_SIZE:
            self._data = blake2b(self._data, _STATE_SIZE)
            self._index = 0

    def get_byte(self) -> int:
        """Return the next byte of the stream."""
        self._ensure(1)
        value = self._data[self._index]
        self._index += 1
        return value

    def get_uint32(self) -> int:
        """Return the next four bytes as a little-endian unsigned integer."""
        self._ensure(4)
        value = load32(self._data, self._index)
        self._index += 4
        return value