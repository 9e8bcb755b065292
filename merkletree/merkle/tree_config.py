"""
Tree Configuration
Hash function and pair ordering shared by tree construction and proof verification.

A TreeConfig is resolved once and reused unchanged: every proof generated
from a tree must be verified with the config the tree was built with.
"""
from __future__ import annotations

from dataclasses import dataclass

from merkletree.crypto.hashing import (
    HashFunction,
    get_hash_function,
    hash_concat,
    keccak256,
)
from merkletree.merkle.ordering import (
    PairOrdering,
    get_pair_ordering,
    order_pair,
    sort_by_digest,
)
from merkletree.schemas.errors import (
    HashException,
    InvalidDigestLengthException,
    MerkleException,
)


@dataclass(frozen=True)
class TreeConfig:
    """
    Hash/ordering configuration for a Merkle tree.

    Attributes:
        hash: Function from bytes to a fixed-length digest
        order: Pair ordering applied before every combination
        digest_size: Length in bytes of every leaf and node digest
    """
    hash: HashFunction = keccak256
    order: PairOrdering = sort_by_digest
    digest_size: int = 32

    def __post_init__(self) -> None:
        if self.digest_size <= 0:
            raise ValueError(f"Digest size must be positive, got {self.digest_size}")

    @classmethod
    def from_names(
        cls,
        hash_algorithm: str = "keccak256",
        pair_ordering: str = "sorted",
        digest_size: int = 32,
    ) -> "TreeConfig":
        """
        Build a config from registered hash and ordering names.

        Raises:
            ConfigurationException: If either name is not registered
        """
        return cls(
            hash=get_hash_function(hash_algorithm),
            order=get_pair_ordering(pair_ordering),
            digest_size=digest_size,
        )

    def check_digest(self, digest: bytes, role: str = "digest") -> None:
        """
        Ensure ``digest`` is bytes of exactly ``digest_size`` length.

        Raises:
            InvalidDigestLengthException: On any other length or type
        """
        if not isinstance(digest, (bytes, bytearray)):
            raise InvalidDigestLengthException(
                f"{role} must be bytes, got {type(digest).__name__}",
                expected=self.digest_size,
            )
        if len(digest) != self.digest_size:
            raise InvalidDigestLengthException(
                f"{role} has {len(digest)} bytes, expected {self.digest_size}",
                expected=self.digest_size,
                actual=len(digest),
            )

    def combine(
        self,
        left: bytes,
        right: bytes,
        left_hint: int = 0,
        right_hint: int = 1,
    ) -> bytes:
        """
        Compute the parent digest of a sibling pair.

        parent = hash(first + second), (first, second) = order(left, right)

        Raises:
            ConfigurationException: If the pair ordering returns hints
                other than the two it was given
            HashException: If the ordering or hash function fails, or the
                hash returns a digest of the wrong size
        """
        try:
            first, second = order_pair(self.order, left_hint, left, right_hint, right)
            parent = hash_concat(bytes(first), bytes(second), self.hash)
        except MerkleException:
            raise
        except Exception as e:
            raise HashException(f"Failed to combine sibling digests: {e}") from e
        if not isinstance(parent, bytes):
            raise HashException(
                f"Hash function returned {type(parent).__name__}, expected bytes"
            )
        if len(parent) != self.digest_size:
            raise HashException(
                f"Hash function returned {len(parent)} bytes, expected {self.digest_size}",
                details={"digest_size": self.digest_size},
            )
        return parent


DEFAULT_TREE_CONFIG = TreeConfig()


__all__ = [
    "TreeConfig",
    "DEFAULT_TREE_CONFIG",
]
