"""Measurements and shape checks over a binary tree."""

from __future__ import annotations

from typing import Iterator, Optional

from bintree.node import BinaryTreeNode


def _iter_nodes(tree: Optional[BinaryTreeNode]) -> Iterator[BinaryTreeNode]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def _levels(tree: Optional[BinaryTreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def height(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of edges on the longest downward path; 0 for None or a leaf."""
    if tree is None or tree.is_leaf():
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def size(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _iter_nodes(tree))


def leaves(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _iter_nodes(tree) if node.is_leaf())


def nodes(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _iter_nodes(tree) if not node.is_leaf())


def balance(tree: Optional[BinaryTreeNode]) -> int:
    """Return the level count of the left subtree minus that of the right."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[BinaryTreeNode]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def is_perfect(tree: Optional[BinaryTreeNode]) -> bool:
    """Return True if the tree is full and all leaves share the same depth."""
    if tree is None:
        return False

    expected = 0
    node: Optional[BinaryTreeNode] = tree
    while node is not None:
        expected += 1
        node = node.left

    def check(node: BinaryTreeNode, level: int) -> bool:
        if node.is_leaf():
            return expected == level + 1
        if node.left is None or node.right is None:
            return False
        return check(node.left, level + 1) and check(node.right, level + 1)

    return check(tree, 0)