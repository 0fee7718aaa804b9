import pytest

from rxhash.aes_hash import (
    aesdec,
    aesenc,
    fill_aes_1rx4,
    fill_aes_4rx4,
    hash_aes_1rx4,
)

ZERO16 = bytes(16)
STATE = bytes(range(64))

# 128-bit register values, written most significant byte first.
INTEL_STATE = bytes.fromhex("7b5b54657374566563746f725d53475d")[::-1]
INTEL_KEY = bytes.fromhex("48692853686179295b477565726f6e5d")[::-1]


def _xor(a, b):
    return bytes(x ^ y for x, y in zip(a, b))


def test_aesenc_intel_example():
    expected = bytes.fromhex("a8311c2f9fdba3c58b104b58ded7e595")[::-1]
    assert aesenc(INTEL_STATE, INTEL_KEY) == expected


def test_aesdec_intel_example():
    expected = bytes.fromhex("138ac342faea2787b58eb95eb730392a")[::-1]
    assert aesdec(INTEL_STATE, INTEL_KEY) == expected


def test_aesenc_zero_state_is_sbox_of_zero():
    assert aesenc(ZERO16, ZERO16) == b"\x63" * 16


@pytest.mark.parametrize("round_fn", [aesenc, aesdec])
def test_round_key_is_xored_last(round_fn):
    key_a = bytes(range(16))
    key_b = bytes(range(100, 116))
    diff = _xor(round_fn(INTEL_STATE, key_a), round_fn(INTEL_STATE, key_b))
    assert diff == _xor(key_a, key_b)


@pytest.mark.parametrize("round_fn", [aesenc, aesdec])
def test_round_rejects_wrong_sizes(round_fn):
    with pytest.raises(ValueError):
        round_fn(bytes(15), ZERO16)
    with pytest.raises(ValueError):
        round_fn(ZERO16, bytes(17))


def test_hash_length_and_determinism():
    data = bytes(range(256)) * 2
    first = hash_aes_1rx4(data)
    assert len(first) == 64
    assert hash_aes_1rx4(data) == first


def test_hash_sensitive_to_every_lane():
    data = bytearray(128)
    base = hash_aes_1rx4(bytes(data))
    for position in (0, 16, 32, 48, 64, 127):
        changed = bytearray(data)
        changed[position] ^= 1
        assert hash_aes_1rx4(bytes(changed)) != base


def test_hash_empty_input_differs_from_zero_block():
    assert hash_aes_1rx4(b"") != hash_aes_1rx4(bytes(64))


@pytest.mark.parametrize("size", [1, 63, 65, 100])
def test_hash_rejects_bad_length(size):
    with pytest.raises(ValueError):
        hash_aes_1rx4(bytes(size))


def test_fill_1r_chaining_matches_single_call():
    state, whole = fill_aes_1rx4(STATE, 192)
    mid_state, first = fill_aes_1rx4(STATE, 64)
    end_state, rest = fill_aes_1rx4(mid_state, 128)
    assert first + rest == whole
    assert end_state == state


def test_fill_1r_state_is_last_output_block():
    state, output = fill_aes_1rx4(STATE, 256)
    assert len(output) == 256
    assert state == output[-64:]


def test_fill_1r_zero_size_keeps_state():
    state, output = fill_aes_1rx4(STATE, 0)
    assert output == b""
    assert state == STATE


def test_fill_4r_length_prefix_property():
    long_output = fill_aes_4rx4(STATE, 256)
    assert len(long_output) == 256
    assert fill_aes_4rx4(STATE, 128) == long_output[:128]


def test_fill_4r_differs_from_fill_1r():
    _, one_round = fill_aes_1rx4(STATE, 64)
    assert fill_aes_4rx4(STATE, 64) != one_round


def test_fill_4r_blocks_do_not_repeat():
    output = fill_aes_4rx4(STATE, 128)
    assert output[:64] != output[64:]


@pytest.mark.parametrize("fill", [fill_aes_1rx4, fill_aes_4rx4])
def test_fill_rejects_bad_size(fill):
    with pytest.raises(ValueError):
        fill(STATE, 65)


@pytest.mark.parametrize("fill", [fill_aes_1rx4, fill_aes_4rx4])
def test_fill_rejects_bad_state(fill):
    with pytest.raises(ValueError):
        fill(bytes(32), 64)