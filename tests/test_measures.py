import pytest

from bintree.measures import (
    balance,
    height,
    is_full,
    is_perfect,
    leaves,
    nodes,
    size,
)
from bintree.node import BinaryTreeNode
from bintree.traversal import preorder


def _sample():
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.right = BinaryTreeNode(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _left_chain(length):
    root = BinaryTreeNode(0)
    node = root
    for value in range(1, length):
        node = node.insert_left(value)
    return root, node


def _perfect(levels, start=1):
    root = BinaryTreeNode(start)
    frontier = [root]
    counter = start
    for _ in range(levels - 1):
        next_frontier = []
        for node in frontier:
            counter += 1
            next_frontier.append(node.insert_left(counter))
            counter += 1
            next_frontier.append(node.insert_right(counter))
        frontier = next_frontier
    return root


def test_height_sample():
    root = _sample()
    assert height(root) == 2
    assert height(root.right) == 1
    assert height(root.left.right) == 0


@pytest.mark.parametrize("length", [1, 2, 7])
def test_height_of_chain_is_edge_count(length):
    root, _ = _left_chain(length)
    assert height(root) == length - 1


def test_height_of_none():
    assert height(None) == 0


@pytest.mark.parametrize("length", [1, 4, 9])
def test_size_of_chain(length):
    root, _ = _left_chain(length)
    assert size(root) == length


def test_size_matches_traversal_length():
    root = _sample()
    assert size(root) == len(list(preorder(root)))
    assert size(root.right) == len(list(preorder(root.right)))
    assert size(None) == 0


def test_leaves_and_nodes_partition_the_tree():
    root = _sample()
    for subtree in (root, root.left, root.right, root.left.right):
        assert leaves(subtree) + nodes(subtree) == size(subtree)


def test_leaf_counts_on_single_node():
    leaf = BinaryTreeNode(7)
    assert leaves(leaf) == size(leaf)
    assert nodes(leaf) == 0
    assert leaves(None) == 0
    assert nodes(None) == 0


@pytest.mark.parametrize("levels", [1, 2, 3, 4])
def test_perfect_tree_counts(levels):
    root = _perfect(levels)
    assert leaves(root) == 2 ** (levels - 1)
    assert nodes(root) == 2 ** (levels - 1) - 1
    assert height(root) == levels - 1


@pytest.mark.parametrize("length", [1, 2, 6])
def test_chain_has_single_leaf(length):
    root, tail = _left_chain(length)
    assert leaves(root) == 1
    assert tail.is_leaf()


def test_balance_of_none_and_leaf():
    assert balance(None) == 0
    assert balance(BinaryTreeNode(1)) == 0


@pytest.mark.parametrize("length", [2, 3, 8])
def test_balance_of_left_chain_counts_left_nodes(length):
    root, _ = _left_chain(length)
    assert balance(root) == length - 1


def test_balance_is_antisymmetric_under_mirror():
    root = BinaryTreeNode(1)
    right = root.insert_right(2)
    right.insert_right(3)
    mirror = BinaryTreeNode(1)
    left = mirror.insert_left(2)
    left.insert_left(3)
    assert balance(root) == -balance(mirror)


@pytest.mark.parametrize("levels", [1, 2, 5])
def test_balance_of_perfect_tree_is_zero(levels):
    assert balance(_perfect(levels)) == 0


def test_is_full_sample():
    root = _sample()
    root.left.left = BinaryTreeNode(10, root.left)
    assert is_full(root) is False
    assert is_full(root.left) is True
    assert is_full(root.right) is False


def test_is_full_edge_cases():
    assert is_full(None) is False
    assert is_full(BinaryTreeNode(1)) is True


@pytest.mark.parametrize("levels", [1, 2, 3, 5])
def test_generated_perfect_trees_are_perfect_and_full(levels):
    root = _perfect(levels)
    assert is_perfect(root) is True
    assert is_full(root) is True


def test_full_but_uneven_tree_is_not_perfect():
    root = BinaryTreeNode(1)
    left = root.insert_left(2)
    root.insert_right(3)
    left.insert_left(4)
    left.insert_right(5)
    assert is_full(root) is True
    assert is_perfect(root) is False


def test_is_perfect_of_none():
    assert is_perfect(None) is False