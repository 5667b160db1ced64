"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Veritree, a product of Garudex Labs

Veritree - Merkle trees with compact inclusion proofs.

Veritree builds a binary hash tree over an ordered collection of items,
generates inclusion proofs for individual items, and verifies those proofs
against a known root digest without access to the full data set.
"""

from veritree._version import __version__
from veritree.exceptions import InputError, ValidationError, VeritreeError
from veritree.merkle import (
    HashAlgorithm,
    MerkleTree,
    build_tree,
    get_proof,
    root_digest,
    verify,
)

__all__ = [
    "__version__",
    "HashAlgorithm",
    "MerkleTree",
    "build_tree",
    "get_proof",
    "root_digest",
    "verify",
    "VeritreeError",
    "InputError",
    "ValidationError",
]
