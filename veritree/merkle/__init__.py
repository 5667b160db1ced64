"""
Merkle tree construction, inclusion proofs and proof verification.

This module provides the public operations of Veritree: building a tree
from ordered items, generating a proof for an item, and verifying a proof
against a root digest.
"""

from veritree.merkle.builder import TreeBuilder, build_tree, pair_up
from veritree.merkle.digest import (
    DEFAULT_ALGORITHM,
    Digest,
    HashAlgorithm,
    get_digest,
)
from veritree.merkle.node import InternalNode, Leaf, Node
from veritree.merkle.proof import ProofGenerator, decode_proof, encode_proof
from veritree.merkle.tree import MerkleTree, root_digest
from veritree.merkle.verifier import MerkleVerifier, verify


def get_proof(tree: MerkleTree, value):
    """Generate an inclusion proof for value, or None if it is absent."""
    return tree.get_proof(value)


__all__ = [
    "DEFAULT_ALGORITHM",
    "Digest",
    "HashAlgorithm",
    "get_digest",
    "Node",
    "Leaf",
    "InternalNode",
    "MerkleTree",
    "TreeBuilder",
    "ProofGenerator",
    "MerkleVerifier",
    "build_tree",
    "get_proof",
    "verify",
    "root_digest",
    "pair_up",
    "encode_proof",
    "decode_proof",
]
