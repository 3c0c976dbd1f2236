import pytest

from bintrees_kit.node import BinaryTreeNode


def sample():
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.left.left = BinaryTreeNode(6, root.left)
    root.left.right = BinaryTreeNode(16, root.left)
    root.right = BinaryTreeNode(402, root)
    root.right.left = BinaryTreeNode(256, root.right)
    root.right.right = BinaryTreeNode(512, root.right)
    return root


def chain(values):
    root = BinaryTreeNode(values[0])
    node = root
    for value in values[1:]:
        node = node.insert_left(value)
    return root, node


def test_constructor_links_parent_only():
    parent = BinaryTreeNode(1)
    child = BinaryTreeNode(2, parent)
    assert child.parent is parent
    assert parent.left is None and parent.right is None
    assert child.value == 2


def test_insert_left_into_empty_slot():
    root = BinaryTreeNode(98)
    new = root.insert_left(54)
    assert root.left is new
    assert new.parent is root
    assert new.value == 54


def test_insert_left_pushes_existing_child_down():
    root = BinaryTreeNode(98)
    old = root.insert_left(12)
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.right is None


def test_insert_right_pushes_existing_child_down():
    root = BinaryTreeNode(98)
    old = root.insert_right(402)
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.left is None


def test_traversal_orders():
    root = sample()
    assert list(root.preorder()) == [98, 12, 6, 16, 402, 256, 512]
    assert list(root.postorder()) == [6, 16, 12, 256, 512, 402, 98]
    assert list(root.inorder()) == sorted(root.preorder())


def test_counts_are_consistent():
    root = sample()
    assert root.size() == len(list(root.preorder()))
    assert root.leaves() + root.nodes() == root.size()
    # A full binary tree has one more leaf than internal nodes.
    assert root.leaves() == root.nodes() + 1


def test_single_node_counts():
    node = BinaryTreeNode(5)
    assert node.size() == 1
    assert node.leaves() == 1
    assert node.nodes() == 0


def test_height_and_depth_along_chain():
    values = [10, 20, 30, 40, 50]
    root, tail = chain(values)
    assert root.height() == len(values) - 1
    assert tail.depth() == len(values) - 1
    assert tail.height() == root.depth()


def test_perfect_tree_leaves_at_height():
    root = sample()
    leaves = [n for n in (root.left.left, root.left.right,
                          root.right.left, root.right.right)]
    assert all(leaf.depth() == root.height() for leaf in leaves)


@pytest.mark.parametrize("count", [1, 3, 6])
def test_balance_of_chains(count):
    left_root = BinaryTreeNode(0)
    right_root = BinaryTreeNode(0)
    for value in range(count):
        left_root.insert_left(value)
        right_root.insert_right(value)
    assert left_root.balance() == count
    assert right_root.balance() == -count


def test_balance_of_perfect_tree_is_even():
    root = sample()
    assert root.balance() == root.left.balance() == root.right.balance()
    assert root.balance() == 0


def test_is_full():
    root = sample()
    assert root.is_full()
    root.left.left.insert_right(7)
    assert not root.is_full()


def test_is_perfect():
    root = sample()
    assert root.is_perfect()
    assert BinaryTreeNode(1).is_perfect()
    root.right.right.insert_left(1)
    assert not root.is_perfect()


def test_unequal_leaf_depths_not_perfect():
    root = BinaryTreeNode(1)
    root.insert_left(2)
    right = root.insert_right(3)
    right.insert_left(4)
    right.insert_right(5)
    assert root.is_full()
    assert not root.is_perfect()


def test_sibling():
    root = sample()
    assert root.left.sibling() is root.right
    assert root.right.sibling() is root.left
    assert root.sibling() is None
    lone = BinaryTreeNode(1)
    only = lone.insert_left(2)
    assert only.sibling() is None


def test_uncle():
    root = sample()
    assert root.left.left.uncle() is root.right
    assert root.right.right.uncle() is root.left
    assert root.left.uncle() is None
    assert root.uncle() is None


def test_leaf_and_root_checks():
    root = sample()
    assert root.is_root()
    assert not root.is_leaf()
    assert root.left.left.is_leaf()
    assert not root.left.is_root()


def test_delete_subtree_unlinks_from_parent():
    root = sample()
    before = root.size()
    left = root.left
    removed = left.size()
    grandchild = left.left
    left.delete()
    assert root.left is None
    assert root.size() == before - removed
    assert left.parent is None
    assert grandchild.parent is None
    assert left.is_leaf()


def test_delete_whole_tree():
    root = sample()
    child = root.right
    root.delete()
    assert root.is_leaf()
    assert child.is_root() and child.is_leaf()