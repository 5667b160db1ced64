"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Veritree, a product of Garudex Labs

Immutable Merkle tree.

A MerkleTree is a root node plus the hash algorithm it was built with.
It is never modified after construction, so it can be shared freely
between threads for concurrent proof generation and verification.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from veritree.merkle.digest import Digest, HashAlgorithm, ItemLike, get_digest
from veritree.merkle.node import Leaf, Node
from veritree.merkle.proof import ProofGenerator
from veritree.merkle.verifier import MerkleVerifier


@dataclass(frozen=True)
class MerkleTree:
    """
    Binary Merkle tree over an ordered collection of items.

    Build one with TreeBuilder or build_tree():

    Example:
        >>> tree = build_tree([b"a", b"b", b"c"])
        >>> proof = tree.get_proof(b"b")
        >>> tree.verify(proof, b"b")
        True

    Attributes:
        root: Root node (a Leaf for single-item trees)
        algorithm: Hash algorithm used for every node
        leaf_count: Number of input items
    """
    root: Node
    algorithm: HashAlgorithm
    leaf_count: int

    @property
    def digest(self) -> Digest:
        return get_digest(self.algorithm)

    @property
    def root_digest(self) -> bytes:
        return self.root.digest

    @property
    def root_hex(self) -> str:
        return self.root.hex()

    @property
    def depth(self) -> int:
        """Number of levels above the leaves (0 for a single-item tree)."""
        depth = 0
        node = self.root
        while not node.is_leaf:
            node = node.left
            depth += 1
        return depth

    def get_root(self) -> bytes:
        """
        Get the Merkle root hash.

        Returns:
            Root digest of the tree
        """
        return self.root.digest

    def leaves(self) -> Iterator[Leaf]:
        """Yield leaves left to right, including padding duplicates."""
        return self.root.iter_leaves()

    def get_proof(self, value: ItemLike) -> Optional[List[bytes]]:
        """
        Generate an inclusion proof for a value.

        Returns:
            Sibling digests, leaf level first, or None if the value is absent
        """
        return ProofGenerator(self).find(value)

    def verify(self, proof: Sequence[bytes], value: ItemLike) -> bool:
        """Verify a proof for a value against this tree's root."""
        return MerkleVerifier(self.algorithm).verify(self.root_digest, proof, value)

    def render(self) -> str:
        """Render the tree as an ASCII structure, one node per line."""
        return self.root.render("", last=True)

    def __str__(self) -> str:
        return self.render()


def root_digest(tree: MerkleTree) -> bytes:
    """Return the root digest of a tree."""
    return tree.root_digest
