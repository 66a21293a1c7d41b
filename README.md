# bintree

A small library for building and inspecting binary trees of integers.
Nodes keep links to their parent and to their children. Free functions walk a
tree, measure it and draw it as ASCII art.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintree.node import BinaryTreeNode

root = BinaryTreeNode(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)   # the new node takes 402 as its right child
```

A `BinaryTreeNode` has four attributes: `value`, `parent`, `left` and
`right`. If you pass `parent=` to the constructor, the new node records that
parent, but it is not attached to the parent. To attach it, set the parent's
`left` or `right` yourself. Nodes are compared by identity.

`insert_left(value)` and `insert_right(value)` create a node, attach it as the
left or right child, and return it. If that side already has a child, the old
child moves down one level and becomes the child of the new node on the same
side.

Each node can report where it sits in the tree:

- `is_leaf()`: True if the node has no children
- `is_root()`: True if the node has no parent
- `depth()`: the number of edges from the node up to the root
- `sibling()`: the other child of the node's parent, or `None`
- `uncle()`: the sibling of the node's parent, or `None`

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))   # [98, 12, 54, 128, 402]
list(inorder(root))    # [12, 54, 98, 128, 402]
list(postorder(root))  # [54, 12, 402, 128, 98]
```

Each traversal is a generator of node values. If the tree is `None`, it yields
nothing.

## Measures

```python
from bintree.measures import height, size, leaves, nodes, balance, is_full, is_perfect
```

- `height(tree)`: the number of edges on the longest downward path. It is 0 for
  `None` and for a single leaf.
- `size(tree)`: the number of nodes.
- `leaves(tree)`: the number of nodes that have no children.
- `nodes(tree)`: the number of nodes that have at least one child.
- `balance(tree)`: the number of levels in the left subtree minus the number of
  levels in the right subtree. It is 0 for `None`.
- `is_full(tree)`: True if every node has either zero or two children. It is
  False for `None`.
- `is_perfect(tree)`: True if the tree is full and all its leaves are at the
  same depth. It is False for `None`.

## Printing

```python
from bintree.printing import render, print_tree

print_tree(root)
```

Output:

```
  .-------(098)--.
(012)--.       (128)--.
     (054)          (402)
```

Each node is drawn as its value padded to three digits inside parentheses. The
picture has one line per level of the tree. `render(tree)` returns the same
picture as a string, with every line ending in a newline. For `None`,
`render` returns an empty string and `print_tree` prints nothing.