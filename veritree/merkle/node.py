"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Veritree, a product of Garudex Labs

Merkle tree nodes.

A node is either a Leaf wrapping the digest of one input item, or an
InternalNode wrapping two children and the digest derived from them.
Children are ordered by ascending digest before hashing, so the same two
child digests always combine into the same parent digest regardless of
their original positions.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator, List

from veritree.merkle.digest import Digest, ItemLike


@dataclass(frozen=True)
class Node(ABC):
    """
    Base tree node.

    Nodes are immutable and compare equal when their digests match.
    """
    digest: bytes

    @property
    def is_leaf(self) -> bool:
        return False

    def hex(self) -> str:
        return self.digest.hex()

    def iter_leaves(self) -> Iterator["Leaf"]:
        """Yield the leaves under this node, left to right."""
        stack: List[Node] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, InternalNode):
                stack.append(node.right)
                stack.append(node.left)
            else:
                yield node

    @abstractmethod
    def render(self, indent: str = "", last: bool = True) -> str:
        """
        Render this subtree as ASCII lines of "+- <hex>".

        Args:
            indent: Prefix carried down from the parent
            last: Whether this node is the last child of its parent
        """

    @staticmethod
    def create_leaf(item: ItemLike, digest: Digest) -> "Leaf":
        return Leaf(digest(item))

    @staticmethod
    def combine(first: "Node", second: "Node", digest: Digest) -> "InternalNode":
        """
        Combine two nodes into their parent.

        The pair is sorted by ascending digest first, so
        combine(a, b) and combine(b, a) produce the same node.
        """
        left, right = sorted((first, second), key=lambda node: node.digest)
        return InternalNode(digest(left.digest, right.digest), left, right)


@dataclass(frozen=True)
class Leaf(Node):
    """Leaf node holding the digest of one input item."""

    @property
    def is_leaf(self) -> bool:
        return True

    def render(self, indent: str = "", last: bool = True) -> str:
        return f"{indent}+- {self.hex()}"


@dataclass(frozen=True)
class InternalNode(Node):
    """Internal node with exactly two children, left.digest <= right.digest."""
    left: Node = field(compare=False, repr=False)
    right: Node = field(compare=False, repr=False)

    def render(self, indent: str = "", last: bool = True) -> str:
        lines = [f"{indent}+- {self.hex()}"]
        child_indent = indent + ("   " if last else "|  ")
        lines.append(self.left.render(child_indent, last=False))
        lines.append(self.right.render(child_indent, last=True))
        return "\n".join(lines)
