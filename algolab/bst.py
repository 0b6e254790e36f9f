"""An unbalanced binary search tree whose nodes know their parent."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class TreeNode:
    """A tree node; smaller values go left, equal or larger values go right."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: Any, parent: TreeNode | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: TreeNode | None = None
        self.right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"

    def insert(self, value: Any) -> TreeNode:
        """Place ``value`` in this subtree and return the new node."""
        node = self
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value, node)
                    return node.left
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value, node)
                    return node.right
                node = node.right

    def search(self, value: Any) -> TreeNode | None:
        """Return the first node in this subtree holding ``value``, or ``None``."""
        node: TreeNode | None = self
        while node is not None:
            if node.value == value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def maximum(self) -> TreeNode:
        """Return the node holding the largest value in this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node

    def minimum(self) -> TreeNode:
        """Return the node holding the smallest value in this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node

    def in_order(self) -> Iterator[Any]:
        """Yield the values of this subtree in ascending order."""
        stack: list[TreeNode] = []
        node: TreeNode | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right


class BinarySearchTree:
    """A binary search tree of comparable values; duplicates are kept."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        if self.root is None:
            self.root = TreeNode(value)
        else:
            self.root.insert(value)

    def search(self, value: Any) -> TreeNode | None:
        """Return a node holding ``value``, or ``None`` if there is none."""
        if self.root is None:
            return None
        return self.root.search(value)

    def delete(self, value: Any) -> None:
        """Remove one occurrence of ``value``; nothing happens if it is absent.

        A node with a left subtree takes the largest value found there;
        otherwise it takes the smallest value of its right subtree.
        """
        node = self.search(value)
        if node is None:
            return
        if node.left is not None:
            replacement = node.left.maximum()
            self._splice(replacement, replacement.left)
        elif node.right is not None:
            replacement = node.right.minimum()
            self._splice(replacement, replacement.right)
        else:
            self._splice(node, None)
            return
        node.value = replacement.value

    def _splice(self, node: TreeNode, child: TreeNode | None) -> None:
        """Put ``child`` where ``node`` hangs in the tree."""
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = None

    def description(self) -> str:
        """Return the values in ascending order, each followed by ``", "``."""
        return "".join(f"{value}, " for value in self)

    def __iter__(self) -> Iterator[Any]:
        if self.root is None:
            return iter(())
        return self.root.in_order()