"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Veritree, a product of Garudex Labs

Merkle tree construction.

Trees are built bottom-up, one level per iteration:
- Each input item becomes a Leaf holding digest(item)
- Each level is split into consecutive pairs, left to right
- If a level has an odd number of nodes, the last node is paired with itself
- Each pair is sorted by digest and combined into an InternalNode

Large levels can be combined on a thread pool; the result is identical
to the sequential path.
"""

import concurrent.futures
import time
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from veritree.exceptions import InputError, InvalidConfigurationError
from veritree.logging_config import get_logger, log_merkle_root_computation
from veritree.merkle.digest import (
    DEFAULT_ALGORITHM,
    HashAlgorithm,
    ItemLike,
    get_digest,
)
from veritree.merkle.node import Leaf, Node
from veritree.merkle.tree import MerkleTree

if TYPE_CHECKING:
    from veritree.config.settings import TreeConfig

logger = get_logger(__name__)


def pair_up(nodes: Sequence[Node]) -> Iterator[Tuple[Node, Node]]:
    """
    Split a level into consecutive pairs, duplicating an odd last node.

    Args:
        nodes: Nodes of the current level, in order

    Yields:
        (first, second) pairs; the final pair is (last, last) for odd counts
    """
    for i in range(0, len(nodes), 2):
        first = nodes[i]
        second = nodes[i + 1] if i + 1 < len(nodes) else first
        yield first, second


class TreeBuilder:
    """
    Builder for Merkle trees.

    Example:
        >>> builder = TreeBuilder(HashAlgorithm.SHA256)
        >>> tree = builder.build([b"data1", b"data2", b"data3"])
        >>> root = tree.get_root()
    """

    # Use parallel processing for levels at least this large
    PARALLEL_THRESHOLD = 100

    MAX_WORKERS = 4

    def __init__(
        self,
        algorithm: Union[HashAlgorithm, str] = DEFAULT_ALGORITHM,
        use_parallel: bool = True,
        parallel_threshold: int = PARALLEL_THRESHOLD,
        max_workers: int = MAX_WORKERS,
    ):
        """
        Initialize the tree builder.

        Args:
            algorithm: Hash algorithm for leaves and internal nodes
            use_parallel: Enable thread pool hashing for large levels
            parallel_threshold: Minimum level size for parallel hashing
            max_workers: Thread pool size

        Raises:
            InvalidConfigurationError: If parallel_threshold or max_workers is below 1
        """
        if parallel_threshold < 1:
            raise InvalidConfigurationError(
                f"parallel_threshold must be at least 1, got {parallel_threshold}"
            )
        if max_workers < 1:
            raise InvalidConfigurationError(f"max_workers must be at least 1, got {max_workers}")

        self.algorithm = HashAlgorithm.parse(algorithm)
        self.digest = get_digest(self.algorithm)
        self.use_parallel = use_parallel
        self.parallel_threshold = parallel_threshold
        self.max_workers = max_workers

    @classmethod
    def from_config(cls, config: "TreeConfig") -> "TreeBuilder":
        """Create a builder from the tree section of the configuration."""
        return cls(
            algorithm=config.hash_algorithm,
            use_parallel=config.parallel_enabled,
            parallel_threshold=config.parallel_threshold,
            max_workers=config.max_workers,
        )

    def build(self, items: Iterable[ItemLike]) -> MerkleTree:
        """
        Build a Merkle tree from an ordered collection of items.

        Args:
            items: Raw items (bytes or str), at least one

        Returns:
            Immutable MerkleTree

        Raises:
            InputError: If items is empty or holds an unsupported type
        """
        items = list(items)
        if not items:
            raise InputError("Cannot build Merkle tree from empty items list")

        start_time = time.perf_counter()

        level: List[Node] = self._hash_leaves(items)
        while len(level) > 1:
            level = self._build_level(level)

        tree = MerkleTree(root=level[0], algorithm=self.algorithm, leaf_count=len(items))

        log_merkle_root_computation(
            logger,
            leaf_count=len(items),
            merkle_root=tree.root_hex,
            algorithm=self.algorithm.value,
            duration_ms=(time.perf_counter() - start_time) * 1000,
        )

        return tree

    def _parallel(self, size: int) -> bool:
        return self.use_parallel and size >= self.parallel_threshold

    def _hash_leaves(self, items: List[ItemLike]) -> List[Node]:
        if self._parallel(len(items)):
            with concurrent.futures.ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return list(executor.map(self._create_leaf, items))
        return [self._create_leaf(item) for item in items]

    def _create_leaf(self, item: ItemLike) -> Leaf:
        return Node.create_leaf(item, self.digest)

    def _combine(self, pair: Tuple[Node, Node]) -> Node:
        return Node.combine(pair[0], pair[1], self.digest)

    def _build_level(self, level: List[Node]) -> List[Node]:
        """
        Combine one level into the next.

        Args:
            level: Current level, at least two nodes

        Returns:
            Next level, ceil(len(level) / 2) nodes
        """
        if self._parallel(len(level)):
            with concurrent.futures.ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return list(executor.map(self._combine, pair_up(level)))
        return [self._combine(pair) for pair in pair_up(level)]


def build_tree(
    items: Iterable[ItemLike],
    algorithm: Optional[Union[HashAlgorithm, str]] = None,
) -> MerkleTree:
    """
    Build a Merkle tree with default builder settings.

    Args:
        items: Raw items (bytes or str), at least one
        algorithm: Hash algorithm (default SHA3-256)

    Raises:
        InputError: If items is empty
    """
    return TreeBuilder(algorithm or DEFAULT_ALGORITHM).build(items)
