"""Binary search tree of integers with traversals and root-to-leaf paths."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A node holding an integer and its two children."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _delete(node: TreeNode | None, key: int) -> TreeNode | None:
    if node is None:
        return None
    if key < node.data:
        node.left = _delete(node.left, key)
    elif key > node.data:
        node.right = _delete(node.right, key)
    elif node.right is None:
        return node.left
    elif node.left is None:
        return node.right
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.data = successor.data
        node.right = _delete(node.right, node.data)
    return node


class Tree:
    """Binary search tree that ignores duplicate keys."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, key: int) -> None:
        """Add *key* unless it is already present."""
        if self.root is None:
            self.root = TreeNode(key)
            return
        node = self.root
        while True:
            if key < node.data:
                if node.left is None:
                    node.left = TreeNode(key)
                    return
                node = node.left
            elif key > node.data:
                if node.right is None:
                    node.right = TreeNode(key)
                    return
                node = node.right
            else:
                return

    def search(self, key: int) -> bool:
        """Return whether *key* is in the tree."""
        node = self.root
        while node is not None:
            if key == node.data:
                return True
            node = node.left if key < node.data else node.right
        return False

    __contains__ = search

    def delete(self, key: int) -> None:
        """Remove *key* if present, replacing an inner node by its in-order successor."""
        self.root = _delete(self.root, key)

    def _walk_in_order(self) -> Iterator[int]:
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __iter__(self) -> Iterator[int]:
        return self._walk_in_order()

    def in_order(self) -> list[int]:
        """Keys in left, node, right order."""
        return list(self._walk_in_order())

    def pre_order(self) -> list[int]:
        """Keys in node, left, right order."""
        result: list[int] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> list[int]:
        """Keys in left, right, node order."""
        reversed_result: list[int] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            reversed_result.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed_result[::-1]

    def paths(self) -> list[str]:
        """Every root-to-leaf path as keys joined by '->', leftmost first."""
        if self.root is None:
            return []
        result: list[str] = []
        stack = [(self.root, [str(self.root.data)])]
        while stack:
            node, trail = stack.pop()
            if node.is_leaf:
                result.append("->".join(trail))
                continue
            if node.right is not None:
                stack.append((node.right, [*trail, str(node.right.data)]))
            if node.left is not None:
                stack.append((node.left, [*trail, str(node.left.data)]))
        return result

    def min(self) -> int:
        """Smallest key; raises ValueError on an empty tree."""
        if self.root is None:
            raise ValueError("min of an empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.data

    def max(self) -> int:
        """Largest key; raises ValueError on an empty tree."""
        if self.root is None:
            raise ValueError("max of an empty tree")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.data


def build_tree(values: Iterable[int | None]) -> Tree:
    """Build a tree from a level-order list where None marks a missing child.

    The result keeps the given shape and need not be a search tree.
    """
    items = list(values)
    tree = Tree()
    if not items or items[0] is None:
        return tree
    tree.root = TreeNode(items[0])
    pending = [tree.root]
    position = 1
    for node in pending:
        if position >= len(items):
            break
        left_value = items[position]
        position += 1
        if left_value is not None:
            node.left = TreeNode(left_value)
            pending.append(node.left)
        if position >= len(items):
            break
        right_value = items[position]
        position += 1
        if right_value is not None:
            node.right = TreeNode(right_value)
            pending.append(node.right)
    return tree