"""
Cryptographic utilities: hash primitives and hex helpers.
"""
from .hashing import (
    HASH_FUNCTIONS,
    HashFunction,
    from_hex,
    get_hash_function,
    hash_canonical,
    hash_concat,
    keccak256,
    sha256,
    sha3_256,
    to_hex,
)

__all__ = [
    "HASH_FUNCTIONS",
    "HashFunction",
    "from_hex",
    "get_hash_function",
    "hash_canonical",
    "hash_concat",
    "keccak256",
    "sha256",
    "sha3_256",
    "to_hex",
]
