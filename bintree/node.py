"""Binary tree node with parent links and the operations that act on one node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class BinaryTreeNode:
    """A node holding an integer, a link to its parent and links to two children.

    Creating a node does not attach it to ``parent``; the caller links it in.
    Nodes compare by identity.
    """

    value: int
    parent: Optional[BinaryTreeNode] = field(default=None, repr=False)
    left: Optional[BinaryTreeNode] = field(default=None, repr=False)
    right: Optional[BinaryTreeNode] = field(default=None, repr=False)

    def insert_left(self, value: int) -> BinaryTreeNode:
        """Insert a new left child; an existing left child becomes its left child."""
        node = BinaryTreeNode(value, parent=self, left=self.left)
        if self.left is not None:
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> BinaryTreeNode:
        """Insert a new right child; an existing right child becomes its right child."""
        node = BinaryTreeNode(value, parent=self, right=self.right)
        if self.right is not None:
            self.right.parent = node
        self.right = node
        return node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def sibling(self) -> Optional[BinaryTreeNode]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Optional[BinaryTreeNode]:
        """Return the sibling of this node's parent, or None."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        return parent.sibling()