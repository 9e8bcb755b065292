"""
Merkle Tree Implementation
Deterministic Merkle tree construction and proof generation over caller content.

This module provides:
- MerkleTree: immutable tree snapshot with O(1) root lookup
- build_tree: construct a tree from Content items and a TreeConfig
- MerkleTree.generate_path: inclusion proof for a content item
- verify_tree: recompute a tree from its leaves and check the stored root

Commitment Rules (Hard Contracts):
1. Leaf digest: Content.digest(), unmodified
2. Parent digest: config.hash(first + second), where (first, second) is
   the sibling pair as ordered by config.order
3. Padding rule: duplicate the last node whenever a level has an odd count
4. Single leaf: root = leaf digest, proof is empty
5. Empty input is rejected

Storage:
- Each level is a tuple of digests including its padding duplicate
- Node (level, i) has sibling (level, i ^ 1) and parent (level + 1, i // 2)
- Leaf order is significant and never sorted
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from merkletree.crypto.hashing import HashFunction, to_hex
from merkletree.merkle.content import Content, DigestContent
from merkletree.merkle.ordering import PairOrdering
from merkletree.merkle.tree_config import DEFAULT_TREE_CONFIG, TreeConfig
from merkletree.schemas.errors import (
    EmptyInputException,
    HashException,
    MerkleException,
    NotFoundException,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MerkleProof:
    """
    A Merkle proof for a single leaf in a Merkle tree.

    The proof carries no left/right position bits. Under a commutative
    pair ordering it verifies from the siblings alone; otherwise the
    index is used to reconstruct positions.

    Attributes:
        leaf: The leaf digest being proven
        index: The 0-based index of the leaf in the original item list
        siblings: Sibling digests from leaf level up to (excluding) the root
        root: The Merkle root this proof is against
    """
    leaf: bytes
    index: int
    siblings: tuple[bytes, ...]
    root: bytes

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Leaf index must be non-negative, got {self.index}")
        object.__setattr__(self, "siblings", tuple(self.siblings))


@dataclass(frozen=True)
class MerkleTree:
    """
    Immutable Merkle tree built from an ordered sequence of content digests.

    Attributes:
        levels: Digest tuples from the leaf level (index 0) to the root level
        leaf_count: Number of real leaves, excluding padding
        config: The TreeConfig the tree was built with
    """
    levels: tuple[tuple[bytes, ...], ...]
    leaf_count: int
    config: TreeConfig

    @property
    def root(self) -> bytes:
        """The Merkle root digest."""
        return self.levels[-1][0]

    @property
    def depth(self) -> int:
        """Number of levels, leaf level and root level included."""
        return len(self.levels)

    @property
    def leaves(self) -> tuple[bytes, ...]:
        """Leaf digests in input order, without padding."""
        return self.levels[0][: self.leaf_count]

    def leaf_digest(self, index: int) -> bytes:
        """
        Digest of the real leaf at ``index``.

        Raises:
            IndexError: If index does not name a real (non-padding) leaf
        """
        if index < 0 or index >= self.leaf_count:
            raise IndexError(
                f"Leaf index {index} out of range for {self.leaf_count} leaves"
            )
        return self.levels[0][index]

    def node_digest(self, level: int, index: int) -> bytes:
        """Digest of the node at ``index`` within ``level`` (0 = leaves)."""
        return self.levels[level][index]

    def index_of(self, target: Content) -> int:
        """
        Return the index of the first leaf whose digest equals ``target.digest()``.

        Raises:
            NotFoundException: If no leaf matches
            HashException: If the target cannot be digested
        """
        digest = _content_digest(target)
        for index, leaf in enumerate(self.leaves):
            if leaf == digest:
                return index
        logger.debug("No leaf matches digest %s", to_hex(digest))
        raise NotFoundException(
            "Content is not part of this Merkle tree",
            digest=digest,
        )

    def proof_for_index(self, index: int) -> MerkleProof:
        """
        Generate the proof for the leaf at ``index``.

        Walks from the leaf to the root, recording the sibling at each
        level; the root itself is not part of the proof.

        Raises:
            IndexError: If index is out of range
        """
        leaf = self.leaf_digest(index)
        siblings: list[bytes] = []
        current_index = index
        for level in self.levels[:-1]:
            siblings.append(level[current_index ^ 1])
            current_index //= 2
        return MerkleProof(
            leaf=leaf,
            index=index,
            siblings=tuple(siblings),
            root=self.root,
        )

    def generate_path(self, target: Content) -> tuple[MerkleProof, int]:
        """
        Generate the Merkle path for ``target``.

        When the same content appears more than once, the first matching
        leaf is used.

        Returns:
            (proof, leaf_index)

        Raises:
            NotFoundException: If no leaf matches the target digest
            HashException: If the target cannot be digested
        """
        index = self.index_of(target)
        return self.proof_for_index(index), index

    def __str__(self) -> str:
        lines = [f"MerkleTree(leaves={self.leaf_count}, depth={self.depth})"]
        for index, leaf in enumerate(self.leaves):
            lines.append(f"  leaf[{index}]: {to_hex(leaf)}")
        lines.append(f"  root: {to_hex(self.root)}")
        return "\n".join(lines)


def _content_digest(item: Content, index: Optional[int] = None) -> bytes:
    try:
        digest = item.digest()
    except MerkleException:
        raise
    except Exception as e:
        raise HashException(
            f"Content digest failed: {e}",
            item_index=index,
        ) from e
    if not isinstance(digest, (bytes, bytearray)):
        raise HashException(
            f"Content digest must be bytes, got {type(digest).__name__}",
            item_index=index,
        )
    return bytes(digest)


def _build_levels(
    leaves: list[bytes],
    config: TreeConfig,
) -> tuple[tuple[bytes, ...], ...]:
    levels: list[tuple[bytes, ...]] = []
    current_level = list(leaves)

    while len(current_level) > 1:
        # Pad with duplicate of last node if odd
        if len(current_level) % 2 == 1:
            current_level.append(current_level[-1])
        levels.append(tuple(current_level))

        current_level = [
            config.combine(current_level[i], current_level[i + 1], i, i + 1)
            for i in range(0, len(current_level), 2)
        ]

    levels.append(tuple(current_level))
    return tuple(levels)


def build_tree(
    items: Iterable[Content],
    config: Optional[TreeConfig] = None,
    *,
    hash_function: Optional[HashFunction] = None,
    pair_ordering: Optional[PairOrdering] = None,
) -> MerkleTree:
    """
    Build a Merkle tree from an ordered sequence of content.

    Algorithm:
    1. Digest every item (leaf digest = item.digest())
    2. While more than one node remains:
       - If odd number of nodes, duplicate the last node
       - Combine adjacent pairs with config.combine
    3. The remaining node is the root

    Example: [a, b, c] -> [a, b, c, c] -> [ab, cc] -> [root]

    Args:
        items: Content items; order determines tree shape
        config: Hash/ordering configuration (defaults to Keccak-256 + sorted pairs)
        hash_function: Overrides config.hash
        pair_ordering: Overrides config.order

    Returns:
        The immutable MerkleTree

    Raises:
        EmptyInputException: If items is empty
        HashException: If any digest computation fails
        InvalidDigestLengthException: If a leaf digest has the wrong size
    """
    config = config or DEFAULT_TREE_CONFIG
    if hash_function is not None:
        config = replace(config, hash=hash_function)
    if pair_ordering is not None:
        config = replace(config, order=pair_ordering)

    items = list(items)
    if not items:
        raise EmptyInputException()

    leaves: list[bytes] = []
    for index, item in enumerate(items):
        digest = _content_digest(item, index)
        config.check_digest(digest, f"Leaf digest {index}")
        leaves.append(digest)

    tree = MerkleTree(
        levels=_build_levels(leaves, config),
        leaf_count=len(leaves),
        config=config,
    )
    logger.debug(
        "Built Merkle tree: %d leaves, depth %d, root %s",
        tree.leaf_count,
        tree.depth,
        to_hex(tree.root),
    )
    return tree


def build_merkle_root(
    digests: Iterable[bytes],
    config: Optional[TreeConfig] = None,
) -> bytes:
    """
    Compute the Merkle root of precomputed leaf digests.

    Raises:
        EmptyInputException: If digests is empty
        HashException: If a digest is not bytes
    """
    return build_tree([DigestContent(d) for d in digests], config).root


def verify_tree(tree: MerkleTree) -> bool:
    """
    Recompute every level from the stored leaves and compare.

    Returns:
        True if all stored intermediate digests and the root are consistent
    """
    expected = _build_levels(list(tree.leaves), tree.config)
    if expected != tree.levels:
        logger.debug("Merkle tree integrity check failed for root %s", to_hex(tree.root))
        return False
    return True


def compute_tree_depth(num_leaves: int) -> int:
    """
    Compute the depth of a Merkle tree with given number of leaves.

    Depth is the number of levels from leaves to root (inclusive).
    A single leaf has depth 1, two leaves have depth 2, etc.

    Returns:
        Tree depth (0 for empty tree)
    """
    if num_leaves == 0:
        return 0

    depth = 1
    n = num_leaves
    while n > 1:
        # Account for padding
        if n % 2 == 1:
            n += 1
        n = n // 2
        depth += 1

    return depth


__all__ = [
    "MerkleProof",
    "MerkleTree",
    "build_tree",
    "build_merkle_root",
    "verify_tree",
    "compute_tree_depth",
]
