"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Veritree, a product of Garudex Labs

Merkle proof verification.

Verification recomputes the root from a value and its proof and compares
it with a known root digest. It only needs the root digest, never the
tree itself, so it can run against untrusted proofs from anywhere.
"""

import time
from typing import Iterable, Optional, Sequence, Union

from veritree.exceptions import ValidationError
from veritree.logging_config import get_logger, log_merkle_verification
from veritree.merkle.digest import (
    DEFAULT_ALGORITHM,
    HashAlgorithm,
    ItemLike,
    get_digest,
)

logger = get_logger(__name__)


class MerkleVerifier:
    """
    Verify inclusion proofs for a given hash algorithm.

    A mismatched proof, value or root yields False; the verifier never
    reports why. Only a proof entry that is not a digest of the
    algorithm's fixed size raises ValidationError.

    Example:
        >>> verifier = MerkleVerifier(HashAlgorithm.SHA3_256)
        >>> verifier.verify(tree.get_root(), proof, b"item")
        True
    """

    def __init__(self, algorithm: Union[HashAlgorithm, str] = DEFAULT_ALGORITHM):
        self.digest = get_digest(algorithm)

    def compute_root(self, proof: Sequence[bytes], value: ItemLike) -> bytes:
        """
        Fold a proof over a value's digest.

        Args:
            proof: Sibling digests, leaf level first
            value: Raw item claimed to be in the tree

        Returns:
            The root digest implied by the value and proof

        Raises:
            ValidationError: If a proof entry has the wrong type or length
        """
        digest_size = self.digest.digest_size
        acc = self.digest(value)

        for position, entry in enumerate(proof):
            if not isinstance(entry, (bytes, bytearray, memoryview)):
                raise ValidationError(
                    f"Proof entry {position} must be bytes, got {type(entry).__name__}"
                )
            sibling = bytes(entry)
            if len(sibling) != digest_size:
                raise ValidationError(
                    f"Proof entry {position} is {len(sibling)} bytes, "
                    f"expected {digest_size} for {self.digest.name}"
                )
            left, right = sorted((acc, sibling))
            acc = self.digest(left, right)

        return acc

    def verify(self, root_digest: bytes, proof: Optional[Iterable[bytes]], value: ItemLike) -> bool:
        """
        Verify that a value is included under a root digest.

        Args:
            root_digest: Known root digest
            proof: Sibling digests, leaf level first; None (no proof found) never verifies
            value: Raw item claimed to be in the tree

        Returns:
            True if the recomputed root equals root_digest, False otherwise

        Raises:
            ValidationError: If a proof entry has the wrong type or length
        """
        if proof is None:
            return False
        try:
            proof = list(proof)
        except TypeError:
            return False

        start_time = time.perf_counter()

        computed_root = self.compute_root(proof, value)
        result = (
            isinstance(root_digest, (bytes, bytearray, memoryview))
            and computed_root == bytes(root_digest)
        )

        log_merkle_verification(
            logger,
            success=result,
            proof_length=len(proof),
            algorithm=self.digest.name,
            duration_ms=(time.perf_counter() - start_time) * 1000,
        )

        return result


def verify(
    root_digest: bytes,
    proof: Optional[Iterable[bytes]],
    value: ItemLike,
    algorithm: Optional[Union[HashAlgorithm, str]] = None,
) -> bool:
    """
    Verify an inclusion proof against a root digest.

    Args:
        root_digest: Known root digest
        proof: Sibling digests, leaf level first, or None
        value: Raw item claimed to be in the tree
        algorithm: Hash algorithm the tree was built with (default SHA3-256)

    Returns:
        True if the proof reproduces root_digest, False otherwise
    """
    return MerkleVerifier(algorithm or DEFAULT_ALGORITHM).verify(root_digest, proof, value)
