"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Veritree, a product of Garudex Labs

Inclusion proof generation.

A proof is the ordered list of sibling digests on the path from a leaf
to the root, leaf-level sibling first. Because sibling pairs are sorted
by digest before hashing, the proof carries no left/right directions.
"""

from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence

from veritree.exceptions import ValidationError
from veritree.logging_config import get_logger, log_proof_generation
from veritree.merkle.digest import ItemLike
from veritree.merkle.node import InternalNode, Node

if TYPE_CHECKING:
    from veritree.merkle.tree import MerkleTree

logger = get_logger(__name__)


class ProofGenerator:
    """
    Locate a value's leaf and collect the sibling digests above it.

    The search is a top-down depth-first traversal (left child first), so
    no parent links are needed. If several leaves carry the target digest,
    the first one reached is used.

    Example:
        >>> generator = ProofGenerator(tree)
        >>> proof = generator.find(b"item")
        >>> proof is None  # value not in tree
        False
    """

    def __init__(self, tree: "MerkleTree"):
        self.tree = tree

    def find(self, value: ItemLike) -> Optional[List[bytes]]:
        """
        Generate the proof for a value.

        Args:
            value: Raw item to look up (hashed with the tree's algorithm)

        Returns:
            Sibling digests ordered leaf level first, an empty list for a
            single-item tree, or None if the value is not in the tree
        """
        target = self.tree.digest(value)
        proof = self._search(self.tree.root, target)

        log_proof_generation(
            logger,
            merkle_root=self.tree.root_hex,
            found=proof is not None,
            proof_length=len(proof) if proof is not None else 0,
        )

        return proof

    def _search(self, node: Node, target: bytes) -> Optional[List[bytes]]:
        # Recursion depth is bounded by the tree depth
        if not isinstance(node, InternalNode):
            return [] if node.digest == target else None

        for child, sibling in ((node.left, node.right), (node.right, node.left)):
            proof = self._search(child, target)
            if proof is not None:
                proof.append(sibling.digest)
                return proof

        return None


def encode_proof(proof: Sequence[bytes]) -> List[str]:
    """Encode proof digests as lowercase hex strings."""
    return [entry.hex() for entry in proof]


def decode_proof(entries: Iterable[str]) -> List[bytes]:
    """
    Decode hex strings into proof digests.

    An optional "0x" prefix is accepted on each entry.

    Raises:
        ValidationError: If an entry is not a hex string
    """
    proof = []
    for position, entry in enumerate(entries):
        if not isinstance(entry, str):
            raise ValidationError(
                f"Proof entry {position} must be a hex string, got {type(entry).__name__}"
            )
        text = entry[2:] if entry.lower().startswith("0x") else entry
        try:
            proof.append(bytes.fromhex(text))
        except ValueError as e:
            raise ValidationError(f"Proof entry {position} is not valid hex: {e}")
    return proof
