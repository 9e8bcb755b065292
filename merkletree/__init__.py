"""
merkletree - generic Merkle trees with position-independent inclusion proofs.

Usage:
    from merkletree import BytesContent, build_tree, verify_merkle_path

    items = [BytesContent(b"a"), BytesContent(b"b"), BytesContent(b"c")]
    tree = build_tree(items)
    proof, index = tree.generate_path(items[1])
    assert verify_merkle_path(items[1].digest(), proof.siblings, tree.root)
"""

from merkletree.merkle import (
    BytesContent,
    CanonicalContent,
    Content,
    DEFAULT_TREE_CONFIG,
    DigestContent,
    MerkleProof,
    MerkleProver,
    MerkleTree,
    MerkleVerifier,
    TreeConfig,
    build_merkle_root,
    build_tree,
    by_position,
    compute_tree_depth,
    sort_by_digest,
    verify_content,
    verify_merkle_path,
    verify_merkle_proof,
    verify_tree,
)
from merkletree.schemas.errors import (
    EmptyInputException,
    HashException,
    InvalidDigestLengthException,
    MerkleException,
    NotFoundException,
    TypeMismatchException,
)

__version__ = "0.1.0"

__all__ = [
    "BytesContent",
    "CanonicalContent",
    "Content",
    "DEFAULT_TREE_CONFIG",
    "DigestContent",
    "MerkleProof",
    "MerkleProver",
    "MerkleTree",
    "MerkleVerifier",
    "TreeConfig",
    "build_merkle_root",
    "build_tree",
    "by_position",
    "compute_tree_depth",
    "sort_by_digest",
    "verify_content",
    "verify_merkle_path",
    "verify_merkle_proof",
    "verify_tree",
    "EmptyInputException",
    "HashException",
    "InvalidDigestLengthException",
    "MerkleException",
    "NotFoundException",
    "TypeMismatchException",
]
