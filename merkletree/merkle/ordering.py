"""
Sibling Pair Ordering
Decides the order in which two sibling digests are concatenated before hashing.

An ordering receives both siblings together with an index hint for each
and returns the two hints in concatenation order:

    order(left_hint, left_digest, right_hint, right_digest) -> (first_hint, second_hint)

During construction the hints are the node positions within their level.
During verification they are reconstructed from the leaf index, or are
the fixed pair (0, 1) when no index is available.

Orderings:
- sort_by_digest: smaller digest first (bytewise). Commutative, so proofs
  verify without any position information. This is the default.
- by_position: keep position order. Proofs need the leaf index to verify.
"""
from __future__ import annotations

from typing import Callable

from merkletree.schemas.errors import ConfigurationException


PairOrdering = Callable[[int, bytes, int, bytes], tuple[int, int]]


def sort_by_digest(
    left_hint: int,
    left_digest: bytes,
    right_hint: int,
    right_digest: bytes,
) -> tuple[int, int]:
    """
    Place the lexicographically smaller digest first.

    Identical digests (duplicate padding) keep their given order, which
    yields the same concatenation either way.
    """
    if left_digest > right_digest:
        return right_hint, left_hint
    return left_hint, right_hint


def by_position(
    left_hint: int,
    left_digest: bytes,
    right_hint: int,
    right_digest: bytes,
) -> tuple[int, int]:
    """Place the sibling with the smaller position hint first."""
    if left_hint > right_hint:
        return right_hint, left_hint
    return left_hint, right_hint


PAIR_ORDERINGS: dict[str, PairOrdering] = {
    "sorted": sort_by_digest,
    "positional": by_position,
}


def get_pair_ordering(name: str) -> PairOrdering:
    """
    Resolve a registered pair ordering by name.

    Raises:
        ConfigurationException: If no ordering is registered under ``name``.
    """
    try:
        return PAIR_ORDERINGS[name.lower()]
    except KeyError:
        raise ConfigurationException(
            f"Unknown pair ordering: {name!r}",
            field_path="pair_ordering",
            details={"available": sorted(PAIR_ORDERINGS)},
        ) from None


def order_pair(
    order: PairOrdering,
    left_hint: int,
    left_digest: bytes,
    right_hint: int,
    right_digest: bytes,
) -> tuple[bytes, bytes]:
    """
    Apply ``order`` and map the returned hints back to digests.

    Raises:
        ConfigurationException: If the hints coincide, or the ordering
            returns hints that are not the two it was given.
    """
    if left_hint == right_hint:
        raise ConfigurationException(
            f"Sibling hints must differ, got {left_hint} twice",
            field_path="pair_ordering",
        )
    by_hint = {left_hint: left_digest, right_hint: right_digest}
    first, second = order(left_hint, left_digest, right_hint, right_digest)
    if {first, second} != {left_hint, right_hint}:
        raise ConfigurationException(
            f"Pair ordering returned hints ({first}, {second}), "
            f"expected a permutation of ({left_hint}, {right_hint})",
            field_path="pair_ordering",
            details={"returned": [first, second], "given": [left_hint, right_hint]},
        )
    return by_hint[first], by_hint[second]


__all__ = [
    "PairOrdering",
    "PAIR_ORDERINGS",
    "sort_by_digest",
    "by_position",
    "get_pair_ordering",
    "order_pair",
]
