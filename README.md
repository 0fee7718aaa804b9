# rxhash

Pure-Python building blocks of a memory-hard proof-of-work hash. The
package has no runtime dependencies and favours clarity over speed.

## Modules

- `rxhash.blake2`: BLAKE2b.
  - `Blake2b(digest_size=64, key=b"")`: streaming state with `update(data)`
    and `digest()`. Digests of 1 to 64 bytes, keys of up to 64 bytes.
    `digest()` finalises the state; calling `update` with non-empty data or
    `digest` again afterwards raises `ValueError`.
  - `blake2b(data, digest_size=64, key=b"")`: one-shot digest.
  - `blake2b_long(data, digest_size)`: variable-length BLAKE2b (the Argon2
    `H'` construction) for any positive size that fits in 32 bits.
  - `rotr64(value, count)`: 64-bit right rotation.
- `rxhash.endian`: little-endian helpers. `load32`, `load48` and `load64`
  read an unsigned word from `data` at `offset` (default 0); `store32`,
  `store48` and `store64` encode the low bits of an integer to bytes.
- `rxhash.blake2_generator`: `Blake2Generator(seed, nonce=0)`, a
  deterministic stream. The seed is cut to 60 bytes and padded with zeros,
  the nonce is appended as a 32-bit word, and the 64-byte state is
  re-hashed with BLAKE2b-512 whenever it runs out. `get_byte()` returns the
  next byte, `get_uint32()` the next four bytes as a little-endian integer.
- `rxhash.aes_hash`: single-round AES primitives in four 16-byte lanes.
  - `aesenc(state, key)` and `aesdec(state, key)`: one AES encryption or
    decryption round on 16-byte blocks.
  - `hash_aes_1rx4(data)`: 64-byte hash of input whose length is a multiple
    of 64.
  - `fill_aes_1rx4(state, size)`: from a 64-byte state, returns
    `(new_state, output)` with `size` bytes of output; passing `new_state`
    back continues the stream.
  - `fill_aes_4rx4(state, size)`: returns `size` bytes generated with four
    AES rounds per 16 bytes.

  These are tuned for speed and are not general-purpose hash functions or
  random generators.

## Installation

```
pip install .
```

## Examples

```python
from rxhash.blake2 import Blake2b, blake2b, blake2b_long

digest = blake2b(b"abc", 64, b"")

hasher = Blake2b(32, b"")
hasher.update(b"a")
hasher.update(b"bc")
short_digest = hasher.digest()

block = blake2b_long(b"seed material", 1024)
```

```python
from rxhash.blake2_generator import Blake2Generator

gen = Blake2Generator(b"seed", 0)
first_byte = gen.get_byte()
word = gen.get_uint32()
```

```python
from rxhash.aes_hash import fill_aes_1rx4, fill_aes_4rx4, hash_aes_1rx4

digest = hash_aes_1rx4(bytes(64))
state, output = fill_aes_1rx4(bytes(64), 128)
more_state, more_output = fill_aes_1rx4(state, 64)
scratch = fill_aes_4rx4(bytes(64), 256)
```

## Errors

Invalid arguments raise `ValueError`: out-of-range digest or key sizes,
reuse of a finalised `Blake2b`, AES blocks that are not 16 bytes, AES
states that are not 64 bytes, sizes that are not a non-negative multiple
of 64, and `load48` reads past the end of the data. `load32` and `load64`
on too little data raise `struct.error`.

## What this package does not do

It provides primitives only. It does not fill Argon2 memory, compute a
complete proof-of-work hash, or offer a command-line tool.

## Running the tests

```
pip install .[test]
pytest
```