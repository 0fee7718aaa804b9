"""BLAKE2b hashing with the variable-length extension used by Argon2."""

from __future__ import annotations

import struct

BLOCK_BYTES = 128
OUT_BYTES = 64
KEY_BYTES = 64
SALT_BYTES = 16
PERSONAL_BYTES = 16

_MASK64 = (1 << 64) - 1
_UINT32_MAX = 0xFFFFFFFF

IV = (
    0x6A09E667F3BCC908,
    0xBB67AE8584CAA73B,
    0x3C6EF372FE94F82B,
    0xA54FF53A5F1D36F1,
    0x510E527FADE682D1,
    0x9B05688C2B3E6C1F,
    0x1F83D9ABFB41BD6B,
    0x5BE0CD19137E2179,
)

SIGMA = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
    (11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4),
    (7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8),
    (9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13),
    (2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9),
    (12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11),
    (13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10),
    (6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5),
    (10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0),
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
)

# Column steps followed by diagonal steps of one round.
_G_LANES = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)

# digest_length, key_length, fanout, depth, leaf_length, node_offset,
# node_depth, inner_length, reserved[14], salt[16], personal[16]
_PARAM_BLOCK = struct.Struct("<4BIQ2B14x16x16x")


def rotr64(value: int, count: int) -> int:
    """Rotate a 64-bit word right by ``count`` bits."""
    value &= _MASK64
    count &= 63
    return ((value >> count) | (value << (64 - count))) & _MASK64


def _compress(h: list[int], block: bytes, counter: int, last: bool) -> list[int]:
    m = struct.unpack("<16Q", block)
    v = list(h) + list(IV)
    v[12] ^= counter & _MASK64
    v[13] ^= (counter >> 64) & _MASK64
    if last:
        v[14] ^= _MASK64
    mask = _MASK64
    for sigma in SIGMA:
        for step, (a, b, c, d) in enumerate(_G_LANES):
            va, vb, vc, vd = v[a], v[b], v[c], v[d]
            va = (va + vb + m[sigma[2 * step]]) & mask
            x = vd ^ va
            vd = ((x >> 32) | (x << 32)) & mask
            vc = (vc + vd) & mask
            x = vb ^ vc
            vb = ((x >> 24) | (x << 40)) & mask
            va = (va + vb + m[sigma[2 * step + 1]]) & mask
            x = vd ^ va
            vd = ((x >> 16) | (x << 48)) & mask
            vc = (vc + vd) & mask
            x = vb ^ vc
            vb = ((x >> 63) | (x << 1)) & mask
            v[a], v[b], v[c], v[d] = va, vb, vc, vd
    return [h[i] ^ v[i] ^ v[i + 8] for i in range(8)]


class Blake2b:
    """Streaming BLAKE2b state; ``digest`` finalises it for good."""

    def __init__(self, digest_size: int = OUT_BYTES, key: bytes = b"") -> None:
        key = bytes(key or b"")
        if not 1 <= digest_size <= OUT_BYTES:
            raise ValueError(f"digest size must be between 1 and {OUT_BYTES}")
        if len(key) > KEY_BYTES:
            raise ValueError(f"key must be at most {KEY_BYTES} bytes")
        self.digest_size = digest_size
        param = _PARAM_BLOCK.pack(digest_size, len(key), 1, 1, 0, 0, 0, 0)
        self._h = [iv ^ word for iv, word in zip(IV, struct.unpack("<8Q", param))]
        self._counter = 0
        self._buffer = bytearray()
        self._finalized = False
        if key:
            self.update(key.ljust(BLOCK_BYTES, b"\0"))

    def update(self, data: bytes) -> None:
        """Absorb more input."""
        data = bytes(data)
        if not data:
            return
        if self._finalized:
            raise ValueError("hash state has already been finalised")
        buffer = self._buffer
        buffer += data
        if len(buffer) <= BLOCK_BYTES:
            return
        # Always keep the last (possibly full) block for finalisation.
        full = (len(buffer) - 1) // BLOCK_BYTES * BLOCK_BYTES
        for start in range(0, full, BLOCK_BYTES):
            self._counter += BLOCK_BYTES
            self._h = _compress(
                self._h, bytes(buffer[start:start + BLOCK_BYTES]), self._counter, False
            )
        del buffer[:full]

    def digest(self) -> bytes:
        """Finalise the state and return the digest."""
        if self._finalized:
            raise ValueError("hash state has already been finalised")
        self._finalized = True
        self._counter += len(self._buffer)
        block = bytes(self._buffer).ljust(BLOCK_BYTES, b"\0")
        self._h = _compress(self._h, block, self._counter, True)
        self._buffer.clear()
        return struct.pack("<8Q", *self._h)[: self.digest_size]


def blake2b(data: bytes, digest_size: int = OUT_BYTES, key: bytes = b"") -> bytes:
    """Return the BLAKE2b digest of ``data``."""
    state = Blake2b(digest_size, key)
    state.update(data)
    return state.digest()


def blake2b_long(data: bytes, digest_size: int) -> bytes:
    """Variable-length BLAKE2b (the Argon2 ``H'`` function)."""
    if digest_size > _UINT32_MAX:
        raise ValueError("digest size does not fit in 32 bits")
    if digest_size < 1:
        raise ValueError("digest size must be positive")
    prefix = struct.pack("<I", digest_size)
    if digest_size <= OUT_BYTES:
        state = Blake2b(digest_size)
        state.update(prefix)
        state.update(data)
        return state.digest()

    state = Blake2b(OUT_BYTES)
    state.update(prefix)
    state.update(data)
    block = state.digest()
    half = OUT_BYTES // 2
    parts = [block[:half]]
    remaining = digest_size - half
    while remaining > OUT_BYTES:
        block = blake2b(block, OUT_BYTES)
        parts.append(block[:half])
        remaining -= half
    parts.append(blake2b(block, remaining))
    return b"".join(parts)