"""
Merkle Tree and Inclusion Proofs
Deterministic Merkle tree construction + proof generation/verification.

This module provides:
- Content: leaf capability (digest + equals) and stock content kinds
- TreeConfig: pluggable hash function and sibling pair ordering
- build_tree / MerkleTree: immutable tree with O(1) root lookup
- MerkleTree.generate_path: inclusion proof for a content item
- verify_merkle_path / verify_merkle_proof: root recomputation

Commitment Rules:
1. Leaf digest: Content.digest(), unmodified
2. Parent digest: hash(first + second), pair ordered by TreeConfig.order
3. Padding: Duplicate last node if odd number at any level
4. Single leaf: root = leaf
5. Default config: Keccak-256, smaller digest first

Usage:
    from merkletree.merkle import BytesContent, build_tree, verify_merkle_path

    items = [BytesContent(b"a"), BytesContent(b"b"), BytesContent(b"c")]
    tree = build_tree(items)

    proof, index = tree.generate_path(items[1])
    assert verify_merkle_path(items[1].digest(), proof.siblings, tree.root)
"""
from .content import (
    BytesContent,
    CanonicalContent,
    Content,
    DigestContent,
)

from .ordering import (
    PAIR_ORDERINGS,
    PairOrdering,
    by_position,
    get_pair_ordering,
    sort_by_digest,
)

from .tree_config import (
    DEFAULT_TREE_CONFIG,
    TreeConfig,
)

from .merkle_tree import (
    MerkleProof,
    MerkleTree,
    build_merkle_root,
    build_tree,
    compute_tree_depth,
    verify_tree,
)

from .merkle_proofs import (
    MerkleProver,
    MerkleVerifier,
    verify_content,
    verify_merkle_path,
    verify_merkle_proof,
)


__all__ = [
    # Content
    "Content",
    "BytesContent",
    "CanonicalContent",
    "DigestContent",
    # Configuration
    "PairOrdering",
    "PAIR_ORDERINGS",
    "sort_by_digest",
    "by_position",
    "get_pair_ordering",
    "TreeConfig",
    "DEFAULT_TREE_CONFIG",
    # Tree
    "MerkleProof",
    "MerkleTree",
    "build_tree",
    "build_merkle_root",
    "compute_tree_depth",
    "verify_tree",
    # Proofs
    "verify_merkle_path",
    "verify_merkle_proof",
    "verify_content",
    "MerkleProver",
    "MerkleVerifier",
]
