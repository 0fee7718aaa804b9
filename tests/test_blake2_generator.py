import hashlib

from rxhash.blake2_generator import Blake2Generator


def _take_bytes(gen, count):
    return bytes(gen.get_byte() for _ in range(count))


def test_first_block_is_hash_of_padded_seed_and_nonce():
    seed = b"test key 000"
    gen = Blake2Generator(seed, 7)
    state = seed.ljust(60, b"\0") + (7).to_bytes(4, "little")
    expected = hashlib.blake2b(state, digest_size=64).digest()
    assert _take_bytes(gen, 64) == expected


def test_second_block_rehashes_first():
    gen = Blake2Generator(b"seed", 0)
    first = _take_bytes(gen, 64)
    second = _take_bytes(gen, 64)
    assert second == hashlib.blake2b(first, digest_size=64).digest()


def test_same_seed_gives_same_stream():
    a = Blake2Generator(b"abc", 3)
    b = Blake2Generator(b"abc", 3)
    assert [a.get_uint32() for _ in range(40)] == [b.get_uint32() for _ in range(40)]


def test_nonce_changes_stream():
    a = Blake2Generator(b"abc", 0)
    b = Blake2Generator(b"abc", 1)
    assert _take_bytes(a, 32) != _take_bytes(b, 32)


def test_long_seed_is_truncated_to_60_bytes():
    seed = bytes(range(80))
    a = Blake2Generator(seed)
    b = Blake2Generator(seed[:60])
    assert _take_bytes(a, 100) == _take_bytes(b, 100)


def test_uint32_matches_little_endian_bytes():
    a = Blake2Generator(b"xyz", 5)
    b = Blake2Generator(b"xyz", 5)
    values = [a.get_uint32() for _ in range(16)]
    raw = _take_bytes(b, 64)
    assert values == [int.from_bytes(raw[i:i + 4], "little") for i in range(0, 64, 4)]


def test_uint32_skips_tail_when_block_exhausted():
    a = Blake2Generator(b"q")
    first = _take_bytes(a, 62)
    value = a.get_uint32()
    next_block = hashlib.blake2b(
        first + _take_bytes(Blake2Generator(b"q"), 64)[62:], digest_size=64
    ).digest()
    assert value == int.from_bytes(next_block[:4], "little")


def test_negative_nonce_wraps_to_32_bits():
    a = Blake2Generator(b"n", -1)
    b = Blake2Generator(b"n", 0xFFFFFFFF)
    assert _take_bytes(a, 16) == _take_bytes(b, 16)