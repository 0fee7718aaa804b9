"""AES-round based hashing and fill generators with four parallel lanes.

These functions use single AES rounds for speed. They are not meant as
general-purpose hash functions or random generators.
"""

from __future__ import annotations

import struct

_WORDS = struct.Struct("<4I")
_LANES = struct.Struct("<16I")


def _xtime(value: int) -> int:
    value <<= 1
    if value & 0x100:
        value ^= 0x11B
    return value & 0xFF


def _gmul(a: int, b: int) -> int:
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = _xtime(a)
        b >>= 1
    return result


def _build_sboxes() -> tuple[tuple[int, ...], tuple[int, ...]]:
    sbox = [0] * 256
    for x in range(256):
        inverse = 0
        if x:
            inverse = next(y for y in range(1, 256) if _gmul(x, y) == 1)
        s = inverse
        for shift in range(1, 5):
            s ^= ((inverse << shift) | (inverse >> (8 - shift))) & 0xFF
        sbox[x] = s ^ 0x63
    inv_sbox = [0] * 256
    for x, s in enumerate(sbox):
        inv_sbox[s] = x
    return tuple(sbox), tuple(inv_sbox)


_SBOX, _INV_SBOX = _build_sboxes()


def _table(box: tuple[int, ...], factors: tuple[int, int, int, int]) -> tuple[int, ...]:
    return tuple(
        sum(_gmul(s, f) << (8 * k) for k, f in enumerate(factors)) for s in box
    )


# Column contribution tables, bytes listed in little-endian (row) order.
_TE = (
    _table(_SBOX, (2, 1, 1, 3)),
    _table(_SBOX, (3, 2, 1, 1)),
    _table(_SBOX, (1, 3, 2, 1)),
    _table(_SBOX, (1, 1, 3, 2)),
)
_TD = (
    _table(_INV_SBOX, (14, 9, 13, 11)),
    _table(_INV_SBOX, (11, 14, 9, 13)),
    _table(_INV_SBOX, (13, 11, 14, 9)),
    _table(_INV_SBOX, (9, 13, 11, 14)),
)

_State = tuple[int, int, int, int]


def _enc(w: _State, k: _State) -> _State:
    t0, t1, t2, t3 = _TE
    return tuple(
        t0[w[c] & 0xFF]
        ^ t1[(w[(c + 1) & 3] >> 8) & 0xFF]
        ^ t2[(w[(c + 2) & 3] >> 16) & 0xFF]
        ^ t3[w[(c + 3) & 3] >> 24]
        ^ k[c]
        for c in range(4)
    )


def _dec(w: _State, k: _State) -> _State:
    t0, t1, t2, t3 = _TD
    return tuple(
        t0[w[c] & 0xFF]
        ^ t1[(w[(c - 1) & 3] >> 8) & 0xFF]
        ^ t2[(w[(c - 2) & 3] >> 16) & 0xFF]
        ^ t3[w[(c - 3) & 3] >> 24]
        ^ k[c]
        for c in range(4)
    )


def _vec(i3: int, i2: int, i1: int, i0: int) -> _State:
    """Build a 128-bit vector from four words given highest first."""
    return (i0, i1, i2, i3)


def _check_block(value: bytes, name: str) -> bytes:
    value = bytes(value)
    if len(value) != 16:
        raise ValueError(f"{name} must be 16 bytes")
    return value


def aesenc(state: bytes, key: bytes) -> bytes:
    """One AES encryption round: MixColumns(SubBytes(ShiftRows(state))) ^ key."""
    s = _WORDS.unpack(_check_block(state, "state"))
    k = _WORDS.unpack(_check_block(key, "key"))
    return _WORDS.pack(*_enc(s, k))


def aesdec(state: bytes, key: bytes) -> bytes:
    """One AES decryption round with the inverse transformations, then ^ key."""
    s = _WORDS.unpack(_check_block(state, "state"))
    k = _WORDS.unpack(_check_block(key, "key"))
    return _WORDS.pack(*_dec(s, k))


_HASH_STATE = (
    _vec(0xD7983AAD, 0xCC82DB47, 0x9FA856DE, 0x92B52C0D),
    _vec(0xACE78057, 0xF59E125A, 0x15C7B798, 0x338D996E),
    _vec(0xE8A07CE4, 0x5079506B, 0xAE62C7D0, 0x6A770017),
    _vec(0x7E994948, 0x79A10005, 0x07AD828D, 0x630A240C),
)
_HASH_XKEY0 = _vec(0x06890201, 0x90DC56BF, 0x8B24949F, 0xF6FA8389)
_HASH_XKEY1 = _vec(0xED18F99B, 0xEE1043C6, 0x51F4E03C, 0x61B263D1)

_GEN1R_KEYS = (
    _vec(0xB4F44917, 0xDBB5552B, 0x62716609, 0x6DACA553),
    _vec(0x0DA1DC4E, 0x1725D378, 0x846A710D, 0x6D7CAF07),
    _vec(0x3E20E345, 0xF4C0794F, 0x9F947EC6, 0x3F1262F1),
    _vec(0x49169154, 0x16314C88, 0xB1BA317C, 0x6AEF8135),
)

_GEN4R_KEYS = (
    _vec(0x99E5D23F, 0x2F546D2B, 0xD1833DDB, 0x6421AADD),
    _vec(0xA5DFCDE5, 0x06F79D53, 0xB6913F55, 0xB20E3450),
    _vec(0x171C02BF, 0x0AA4679F, 0x515E7BAF, 0x5C3ED904),
    _vec(0xD8DED291, 0xCD673785, 0xE78F5D08, 0x85623763),
    _vec(0x229EFFB4, 0x3D518B6D, 0xE3D6A7A6, 0xB5826F73),
    _vec(0xB272B7D2, 0xE9024D4E, 0x9C10B3D9, 0xC7566BF3),
    _vec(0xF63BEFA7, 0x2BA9660A, 0xF765A38B, 0xF273C9E7),
    _vec(0xC0B0762D, 0x0C06D1FD, 0x915839DE, 0x7A7CD609),
)


def _split(block: bytes, offset: int = 0) -> list[_State]:
    words = _LANES.unpack_from(block, offset)
    return [words[i:i + 4] for i in range(0, 16, 4)]


def _join(lanes: list[_State]) -> bytes:
    return _LANES.pack(*(w for lane in lanes for w in lane))


def _check_multiple(size: int, name: str) -> None:
    if size < 0 or size % 64:
        raise ValueError(f"{name} must be a non-negative multiple of 64")


def _load_state(state: bytes) -> list[_State]:
    state = bytes(state)
    if len(state) != 64:
        raise ValueError("state must be 64 bytes")
    return _split(state)


def hash_aes_1rx4(data: bytes) -> bytes:
    """Return a 64-byte hash of ``data``, whose length must be a multiple of 64.

    The input is used as round keys for four AES lanes, followed by two
    extra rounds for full diffusion.
    """
    data = bytes(data)
    _check_multiple(len(data), "input size")
    s0, s1, s2, s3 = _HASH_STATE
    for offset in range(0, len(data), 64):
        in0, in1, in2, in3 = _split(data, offset)
        s0 = _enc(s0, in0)
        s1 = _dec(s1, in1)
        s2 = _enc(s2, in2)
        s3 = _dec(s3, in3)
    for xkey in (_HASH_XKEY0, _HASH_XKEY1):
        s0 = _enc(s0, xkey)
        s1 = _dec(s1, xkey)
        s2 = _enc(s2, xkey)
        s3 = _dec(s3, xkey)
    return _join([s0, s1, s2, s3])


def fill_aes_1rx4(state: bytes, size: int) -> tuple[bytes, bytes]:
    """Generate ``size`` bytes from a 64-byte state, one AES round per 16 bytes.

    Returns ``(new_state, output)``; feeding ``new_state`` back continues
    the stream.
    """
    _check_multiple(size, "output size")
    s0, s1, s2, s3 = _load_state(state)
    k0, k1, k2, k3 = _GEN1R_KEYS
    chunks = []
    for _ in range(size // 64):
        s0 = _dec(s0, k0)
        s1 = _enc(s1, k1)
        s2 = _dec(s2, k2)
        s3 = _enc(s3, k3)
        chunks.append(_join([s0, s1, s2, s3]))
    return _join([s0, s1, s2, s3]), b"".join(chunks)


def fill_aes_4rx4(state: bytes, size: int) -> bytes:
    """Generate ``size`` bytes from a 64-byte state using four AES rounds per 16 bytes."""
    _check_multiple(size, "output size")
    s0, s1, s2, s3 = _load_state(state)
    k = _GEN4R_KEYS
    rounds = tuple((k[r], k[r + 4]) for r in range(4))
    chunks = []
    for _ in range(size // 64):
        for key_a, key_b in rounds:
            s0 = _dec(s0, key_a)
            s1 = _enc(s1, key_a)
            s2 = _dec(s2, key_b)
            s3 = _enc(s3, key_b)
        chunks.append(_join([s0, s1, s2, s3]))
    return b"".join(chunks)