"""
Merkle Proof Verification
Recompute a root from a leaf digest and its sibling path.

This module provides:
- verify_merkle_path: verify raw components (leaf, siblings, root)
- verify_merkle_proof: verify a MerkleProof against its own claimed root
- verify_content: check that a content item is committed by a tree
- MerkleProver / MerkleVerifier: class-based convenience wrappers

Verification applies the same TreeConfig the tree was built with:
    acc = leaf
    for sibling in siblings: acc = hash(order(acc, sibling))
    valid = acc == root

A mismatch returns False. Malformed digests raise
InvalidDigestLengthException so callers can tell bad input from a bad proof.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Union

from merkletree.crypto.hashing import to_hex
from merkletree.merkle.content import Content, DigestContent
from merkletree.merkle.merkle_tree import MerkleProof, MerkleTree, build_tree
from merkletree.merkle.tree_config import DEFAULT_TREE_CONFIG, TreeConfig
from merkletree.schemas.errors import NotFoundException


logger = logging.getLogger(__name__)


def verify_merkle_path(
    leaf_digest: bytes,
    proof: Union[MerkleProof, Sequence[bytes]],
    root_digest: bytes,
    config: Optional[TreeConfig] = None,
    leaf_index: Optional[int] = None,
) -> bool:
    """
    Verify that ``leaf_digest`` is committed by ``root_digest``.

    Algorithm:
    1. Start with the leaf digest
    2. For each sibling (bottom-up): acc = config.combine(acc, sibling)
       - With a leaf index, the hints are (index, index ^ 1) and the
         index halves at each level
       - Without one, the hints are (0, 1); enough for any ordering that
         does not depend on position
    3. Compare against the root

    Args:
        leaf_digest: Digest of the content being proven
        proof: MerkleProof or raw sibling digests, leaf to root
        root_digest: Trusted Merkle root
        config: Config the tree was built with
        leaf_index: Leaf position, required for position-aware orderings;
            taken from ``proof`` when it is a MerkleProof

    Returns:
        True if the recomputed root matches, False otherwise

    Raises:
        InvalidDigestLengthException: If any digest has the wrong length
    """
    config = config or DEFAULT_TREE_CONFIG

    if isinstance(proof, MerkleProof):
        siblings = proof.siblings
        if leaf_index is None:
            leaf_index = proof.index
    else:
        siblings = tuple(proof)

    config.check_digest(leaf_digest, "Leaf digest")
    config.check_digest(root_digest, "Root digest")
    for position, sibling in enumerate(siblings):
        config.check_digest(sibling, f"Proof element {position}")

    computed = bytes(leaf_digest)
    current_index = leaf_index
    for sibling in siblings:
        if current_index is None:
            computed = config.combine(computed, sibling)
        else:
            computed = config.combine(computed, sibling, current_index, current_index ^ 1)
            current_index //= 2

    if computed != root_digest:
        logger.debug(
            "Merkle path mismatch: computed %s, expected %s",
            to_hex(computed),
            to_hex(root_digest),
        )
        return False
    return True


def verify_merkle_proof(proof: MerkleProof, config: Optional[TreeConfig] = None) -> bool:
    """Verify a MerkleProof against the root it claims."""
    return verify_merkle_path(proof.leaf, proof, proof.root, config, proof.index)


def verify_content(tree: MerkleTree, content: Content) -> bool:
    """
    Check that ``content`` is committed by ``tree``.

    Returns:
        False if the content is absent or its path does not reach the root
    """
    try:
        proof, index = tree.generate_path(content)
    except NotFoundException:
        return False
    return verify_merkle_path(proof.leaf, proof, tree.root, tree.config, index)


class MerkleProver:
    """
    Convenience class for building trees and generating proofs in one call.

    Example:
        >>> items = [BytesContent(b"a"), BytesContent(b"b"), BytesContent(b"c")]
        >>> proof, index = MerkleProver.prove(items, items[1])
        >>> index
        1
    """

    @staticmethod
    def prove(
        items: Iterable[Content],
        target: Content,
        config: Optional[TreeConfig] = None,
    ) -> tuple[MerkleProof, int]:
        """
        Build a tree over ``items`` and generate the path for ``target``.

        Raises:
            EmptyInputException: If items is empty
            NotFoundException: If target is not among items
        """
        return build_tree(items, config).generate_path(target)

    @staticmethod
    def prove_index(
        digests: Sequence[bytes],
        index: int,
        config: Optional[TreeConfig] = None,
    ) -> MerkleProof:
        """Generate a proof for the precomputed leaf digest at ``index``."""
        tree = build_tree([DigestContent(d) for d in digests], config)
        return tree.proof_for_index(index)

    @staticmethod
    def compute_root(
        items: Iterable[Content],
        config: Optional[TreeConfig] = None,
    ) -> bytes:
        return build_tree(items, config).root


class MerkleVerifier:
    """
    Convenience class for verifying Merkle proofs.

    Example:
        >>> proof, _ = MerkleProver.prove(items, items[1])
        >>> MerkleVerifier.verify(proof)
        True
    """

    @staticmethod
    def verify(proof: MerkleProof, config: Optional[TreeConfig] = None) -> bool:
        return verify_merkle_proof(proof, config)

    @staticmethod
    def verify_leaf_in_root(
        leaf: bytes,
        siblings: Sequence[bytes],
        root: bytes,
        config: Optional[TreeConfig] = None,
        index: Optional[int] = None,
    ) -> bool:
        """Verify a leaf digest against a root using raw components."""
        return verify_merkle_path(leaf, siblings, root, config, index)

    @staticmethod
    def verify_content_in_root(
        content: Content,
        siblings: Sequence[bytes],
        root: bytes,
        config: Optional[TreeConfig] = None,
        index: Optional[int] = None,
    ) -> bool:
        """
        Verify a content item against a root.

        The content is digested to produce the leaf; digest failures
        propagate as HashException.
        """
        return verify_merkle_path(content.digest(), siblings, root, config, index)


__all__ = [
    "verify_merkle_path",
    "verify_merkle_proof",
    "verify_content",
    "MerkleProver",
    "MerkleVerifier",
]
