"""
Hashing Utilities
Hash primitives and canonical hashing for Merkle leaves and nodes.

This module provides:
- Keccak-256 (Ethereum legacy Keccak), SHA-256 and SHA3-256 over raw bytes
- A name registry so configuration files can select a hash function
- Canonical hashing for structured objects (via dumps_canonical)
- Hex encoding/decoding with 0x prefix

Security/Determinism Notes:
- Always hash raw bytes exactly as given
- Keccak-256 is NOT hashlib.sha3_256; the padding differs
- All operations are deterministic
"""
from __future__ import annotations

import hashlib
from typing import Any, Callable

from eth_utils import keccak

from merkletree.schemas.canonical import dumps_canonical
from merkletree.schemas.errors import ConfigurationException


HashFunction = Callable[[bytes], bytes]


def keccak256(data: bytes) -> bytes:
    """
    Compute the legacy Keccak-256 hash of raw bytes.

    Example:
        >>> keccak256(b"").hex()
        'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
    """
    return keccak(data)


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def sha3_256(data: bytes) -> bytes:
    """Compute the FIPS-202 SHA3-256 hash of raw bytes."""
    return hashlib.sha3_256(data).digest()


HASH_FUNCTIONS: dict[str, HashFunction] = {
    "keccak256": keccak256,
    "sha256": sha256,
    "sha3_256": sha3_256,
}


def get_hash_function(name: str) -> HashFunction:
    """
    Resolve a registered hash function by name.

    Raises:
        ConfigurationException: If no hash function is registered under ``name``.
    """
    try:
        return HASH_FUNCTIONS[name.lower()]
    except KeyError:
        raise ConfigurationException(
            f"Unknown hash algorithm: {name!r}",
            field_path="hash_algorithm",
            details={"available": sorted(HASH_FUNCTIONS)},
        ) from None


def hash_canonical(obj: Any, hash_function: HashFunction = keccak256) -> bytes:
    """
    Hash an object using canonical JSON serialization.

    Rule: leaf = hash_function(dumps_canonical(obj).encode("utf-8"))

    Raises:
        CanonicalizationException: If the object cannot be canonically serialized
    """
    canonical_json = dumps_canonical(obj)
    return hash_function(canonical_json.encode("utf-8"))


def hash_concat(left: bytes, right: bytes, hash_function: HashFunction = keccak256) -> bytes:
    """Hash the concatenation of two byte sequences: hash_function(left + right)."""
    return hash_function(left + right)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "HashFunction",
    "HASH_FUNCTIONS",
    "keccak256",
    "sha256",
    "sha3_256",
    "get_hash_function",
    "hash_canonical",
    "hash_concat",
    "to_hex",
    "from_hex",
]
