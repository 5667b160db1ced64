"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Veritree, a product of Garudex Labs

Digest functions for Merkle tree hashing.

The hash algorithm is always passed explicitly to the builder, tree and
verifier, so trees built under different algorithms cannot be silently
cross-verified.
"""

import hashlib
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional, Union

from veritree.exceptions import InputError, UnsupportedAlgorithmError


class HashAlgorithm(Enum):
    """Supported hash algorithms (values are hashlib constructor names)."""
    SHA256 = "sha256"
    SHA3_256 = "sha3_256"
    BLAKE2B = "blake2b"
    BLAKE2S = "blake2s"
    SHA512 = "sha512"

    @classmethod
    def parse(cls, value: Union["HashAlgorithm", str]) -> "HashAlgorithm":
        """
        Resolve an algorithm from an enum member or a name.

        Names are case-insensitive and accept "-" in place of "_",
        so "SHA3-256" resolves to SHA3_256.

        Raises:
            UnsupportedAlgorithmError: If the name is not recognized
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnsupportedAlgorithmError(f"Unsupported hash algorithm: {value!r}")

        normalized = value.strip().lower().replace("-", "_")
        for algorithm in cls:
            if algorithm.value == normalized:
                return algorithm

        supported = ", ".join(a.value for a in cls)
        raise UnsupportedAlgorithmError(
            f"Unsupported hash algorithm: {value!r} (supported: {supported})"
        )


DEFAULT_ALGORITHM = HashAlgorithm.SHA3_256

ItemLike = Union[bytes, bytearray, memoryview, str]


def to_bytes(item: ItemLike) -> bytes:
    """
    Coerce a tree item to bytes.

    Strings are encoded as UTF-8; bytes-like objects are used as-is.

    Raises:
        InputError: If the item is neither bytes-like nor a string
    """
    if isinstance(item, bytes):
        return item
    if isinstance(item, (bytearray, memoryview)):
        return bytes(item)
    if isinstance(item, str):
        return item.encode("utf-8")
    raise InputError(
        f"Unsupported item type {type(item).__name__}; expected bytes or str"
    )


@dataclass(frozen=True)
class Digest:
    """
    Deterministic, order-sensitive digest over one or more byte buffers.

    Each item is fed into a single hash object in order, without
    separators, so digest(a, b) equals digest(a + b) and in general
    differs from digest(b, a).

    Example:
        >>> digest = Digest(HashAlgorithm.SHA256)
        >>> digest(b"foo", b"bar") == digest(b"foobar")
        True
    """
    algorithm: HashAlgorithm = DEFAULT_ALGORITHM

    @property
    def name(self) -> str:
        return self.algorithm.value

    @property
    def digest_size(self) -> int:
        """Fixed output length in bytes."""
        return hashlib.new(self.algorithm.value).digest_size

    def __call__(self, *items: ItemLike) -> bytes:
        hasher = hashlib.new(self.algorithm.value)
        for item in items:
            hasher.update(to_bytes(item))
        return hasher.digest()


@lru_cache(maxsize=None)
def _digest_for(algorithm: HashAlgorithm) -> Digest:
    return Digest(algorithm)


def get_digest(algorithm: Optional[Union[HashAlgorithm, str]] = None) -> Digest:
    """
    Get the Digest for an algorithm.

    Args:
        algorithm: Enum member or name; None selects DEFAULT_ALGORITHM

    Returns:
        Digest instance (shared per algorithm)

    Raises:
        UnsupportedAlgorithmError: If the algorithm name is not recognized
    """
    if algorithm is None:
        return _digest_for(DEFAULT_ALGORITHM)
    return _digest_for(HashAlgorithm.parse(algorithm))
