"""Binary tree nodes, traversals and a binary search tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in left, root, right order."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in root, left, right order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in left, right, root order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: Optional[TreeNode]) -> list[Any]:
    """Return values level by level, each level from left to right."""
    return [node.value for level in _levels(root) for node in level]


def height(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    return sum(1 for _ in _levels(root))


class BinarySearchTree:
    """A binary search tree that ignores duplicate values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[TreeNode] = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert ``value`` unless it is already present."""
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right
            else:
                return

    def __iter__(self) -> Iterator[Any]:
        return iter(inorder(self.root))

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False