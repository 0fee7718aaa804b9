"""Blake2b, little-endian helpers, a Blake2b byte generator and AES-round hashing."""

__version__ = "0.1.0"

__all__ = [
    "aes_hash",
    "blake2",
    "blake2_generator",
    "endian",
]