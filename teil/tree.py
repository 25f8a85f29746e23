"""Decision tree prediction over linked or array-encoded trees."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(eq=False)
class OutputNode:
    """A leaf value: a class or a regression output, with optional probabilities."""

    output: Union[int, float]
    probability: Optional[Sequence[float]] = None


@dataclass(eq=False)
class TreeNode:
    """A node of a linked tree; a node without a right child is a leaf."""

    threshold: float = 0.0
    feature: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None
    output: Optional[OutputNode] = None


@dataclass(eq=False)
class ArrayNode:
    """A node of an array-encoded tree.

    The left child is the next node in the array and the right child is at
    ``right_node``, unless the matching output is set, which ends the descent.
    """

    threshold: float
    feature: int
    right_node: int = 0
    output_left: Optional[OutputNode] = None
    output_right: Optional[OutputNode] = None


def predict_linked(root: TreeNode, sample: Sequence[float]) -> TreeNode:
    """Walk the tree from ``root`` and return the leaf reached by ``sample``.

    A sample value below the threshold goes left, otherwise right.
    """
    node = root
    while node.right is not None:
        if sample[node.feature] < node.threshold:
            if node.left is None:
                raise ValueError("inner node has no left child")
            node = node.left
        else:
            node = node.right
    return node


def predict_array(nodes: Sequence[ArrayNode], sample: Sequence[float]) -> OutputNode:
    """Walk an array-encoded tree from its first node and return the output reached."""
    if not nodes:
        raise ValueError("tree has no nodes")
    visited: set[int] = set()
    index = 0
    while True:
        if not 0 <= index < len(nodes):
            raise ValueError(f"node index {index} is outside the tree")
        if index in visited:
            raise ValueError(f"tree loops back to node {index}")
        visited.add(index)
        node = nodes[index]
        if sample[node.feature] < node.threshold:
            if node.output_left is not None:
                return node.output_left
            index += 1
        else:
            if node.output_right is not None:
                return node.output_right
            index = node.right_node