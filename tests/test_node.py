import pytest

from bintrees.node import Node


@pytest.fixture
def family():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def test_new_node_is_not_attached_to_parent():
    root = Node(98)
    child = Node(12, root)
    assert child.parent is root
    assert root.left is None and root.right is None
    assert child.left is None and child.right is None


def test_insert_left_into_empty_slot():
    root = Node(98)
    node = root.insert_left(54)
    assert root.left is node
    assert node.parent is root
    assert node.value == 54
    assert node.left is None and node.right is None


def test_insert_left_pushes_down_existing_child():
    root = Node(98)
    root.left = Node(12, root)
    old = root.left
    node = root.insert_left(54)
    assert root.left is node
    assert node.left is old
    assert old.parent is node
    assert node.right is None


def test_insert_right_pushes_down_existing_child():
    root = Node(98)
    root.right = Node(402, root)
    old = root.right
    node = root.insert_right(128)
    assert root.right is node
    assert node.right is old
    assert old.parent is node
    assert node.left is None


def test_insert_right_into_empty_slot():
    root = Node(98)
    node = root.insert_right(402)
    assert root.right is node and node.parent is root


def test_is_leaf():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    assert root.is_leaf() is False
    assert root.right.is_leaf() is False
    assert root.right.right.is_leaf() is True


def test_is_root():
    root = Node(98)
    root.right = Node(402, root)
    root.insert_right(128)
    assert root.is_root() is True
    assert root.right.is_root() is False
    assert root.right.right.is_root() is False


def test_depth_of_root_is_zero():
    assert Node(98).depth() == 0


def test_depth_grows_by_one_per_level():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    assert root.right.depth() == root.depth() + 1
    assert root.left.right.depth() == root.left.depth() + 1
    assert root.right.right.depth() == root.right.depth() + 1


def test_sibling(family):
    assert family.left.sibling() is family.right
    assert family.right.left.sibling() is family.right.right
    assert family.left.right.sibling() is family.left.left
    assert family.sibling() is None


def test_sibling_of_only_child_is_none():
    root = Node(1)
    child = root.insert_left(2)
    assert child.sibling() is None


def test_uncle(family):
    assert family.right.left.uncle() is family.left
    assert family.left.right.uncle() is family.right
    assert family.left.uncle() is None
    assert family.uncle() is None


def test_uncle_missing_when_parent_is_only_child():
    root = Node(1)
    parent = root.insert_left(2)
    child = parent.insert_left(3)
    assert child.uncle() is None