"""
Merkle Leaf Content
The capability a value needs to become a Merkle leaf, plus stock implementations.

Any object with ``digest()`` and ``equals(other)`` can be used as tree
content; no base class is required. The tree keeps only the digests.

Stock content kinds:
- BytesContent: raw bytes hashed with a chosen hash function
- CanonicalContent: dicts / Pydantic models hashed via canonical JSON
- DigestContent: an already-computed leaf digest
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from merkletree.crypto.hashing import HashFunction, hash_canonical, keccak256
from merkletree.schemas.canonical import canonical_equals
from merkletree.schemas.errors import (
    CanonicalizationException,
    HashException,
    TypeMismatchException,
)


@runtime_checkable
class Content(Protocol):
    """Anything that can digest itself and compare against its own kind."""

    def digest(self) -> bytes:
        """Return the deterministic leaf digest. Raises HashException on failure."""
        ...

    def equals(self, other: Any) -> bool:
        """Return True if ``other`` is the same content. Raises TypeMismatchException across kinds."""
        ...


def _require_same_kind(this: Any, other: Any) -> None:
    if type(other) is not type(this):
        raise TypeMismatchException(
            f"Cannot compare {type(this).__name__} with {type(other).__name__}",
            details={"expected": type(this).__name__, "actual": type(other).__name__},
        )


@dataclass(frozen=True)
class BytesContent:
    """Raw bytes as leaf content, digested with ``hash_function``."""
    data: bytes
    hash_function: HashFunction = field(default=keccak256, compare=False, repr=False)

    def digest(self) -> bytes:
        try:
            return self.hash_function(self.data)
        except Exception as e:
            raise HashException(f"Failed to digest {len(self.data)} content bytes: {e}") from e

    def equals(self, other: Any) -> bool:
        _require_same_kind(self, other)
        return self.data == other.data


@dataclass(frozen=True)
class CanonicalContent:
    """
    Structured content digested through canonical JSON.

    Two objects with the same canonical form (e.g. dicts differing only in
    key order) produce the same leaf.
    """
    obj: Any
    hash_function: HashFunction = field(default=keccak256, compare=False, repr=False)

    def digest(self) -> bytes:
        try:
            return hash_canonical(self.obj, self.hash_function)
        except CanonicalizationException as e:
            raise HashException(
                f"Content cannot be canonicalized: {e.message}",
                details=e.details,
            ) from e

    def equals(self, other: Any) -> bool:
        _require_same_kind(self, other)
        try:
            return canonical_equals(self.obj, other.obj)
        except CanonicalizationException as e:
            raise HashException(
                f"Content cannot be canonicalized: {e.message}",
                details=e.details,
            ) from e


@dataclass(frozen=True)
class DigestContent:
    """A precomputed leaf digest."""
    value: bytes

    def digest(self) -> bytes:
        if not isinstance(self.value, (bytes, bytearray)):
            raise HashException(
                f"Precomputed digest must be bytes, got {type(self.value).__name__}",
                details={"type": type(self.value).__name__},
            )
        return bytes(self.value)

    def equals(self, other: Any) -> bool:
        _require_same_kind(self, other)
        return self.value == other.value


__all__ = [
    "Content",
    "BytesContent",
    "CanonicalContent",
    "DigestContent",
]
