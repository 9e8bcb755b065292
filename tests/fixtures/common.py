"""
Common test fixtures shared by all test modules.

Provides factory functions for:
- Content items (BytesContent lists)
- Built trees under a chosen TreeConfig
- Bit-flipping helper for tamper tests
"""

from typing import Optional

from merkletree.crypto.hashing import sha256
from merkletree.merkle import (
    BytesContent,
    MerkleTree,
    TreeConfig,
    build_tree,
    by_position,
)


def make_items(count: int, prefix: str = "leaf") -> list[BytesContent]:
    """Create ``count`` distinct BytesContent items."""
    return [BytesContent(f"{prefix}{i}".encode()) for i in range(count)]


def make_abc_items() -> list[BytesContent]:
    """Create the three items A, B, C."""
    return [BytesContent(b"A"), BytesContent(b"B"), BytesContent(b"C")]


def make_tree(count: int, config: Optional[TreeConfig] = None) -> MerkleTree:
    """Build a tree over ``make_items(count)``."""
    return build_tree(make_items(count), config)


def make_positional_sha256_config() -> TreeConfig:
    """Config matching plain sha256(left + right) trees."""
    return TreeConfig(hash=sha256, order=by_position)


def flip_bit(data: bytes, bit: int = 0) -> bytes:
    """Return ``data`` with a single bit flipped."""
    buf = bytearray(data)
    buf[bit // 8] ^= 1 << (bit % 8)
    return bytes(buf)
