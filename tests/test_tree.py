import pytest

from bintree.tree import Node


@pytest.fixture
def perfect():
    root = Node(98)
    a = root.insert_left(12)
    b = root.insert_right(402)
    a.insert_left(6)
    a.insert_right(16)
    b.insert_left(256)
    b.insert_right(512)
    return root


def test_new_node_links():
    parent = Node(1)
    child = Node(2, parent)
    assert child.parent is parent
    assert child.left is None and child.right is None
    assert parent.left is None and parent.right is None


def test_insert_left_pushes_existing_down():
    root = Node(98)
    old = root.insert_left(12)
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.parent is root


def test_insert_right_pushes_existing_down():
    root = Node(98)
    old = root.insert_right(402)
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new


def test_insert_right_rejects_zero():
    with pytest.raises(ValueError):
        Node(1).insert_right(0)


def test_insert_left_accepts_zero():
    root = Node(1)
    assert root.insert_left(0).value == 0


def test_leaf_and_root(perfect):
    assert perfect.is_root()
    assert not perfect.is_leaf()
    assert perfect.left.left.is_leaf()
    assert not perfect.left.is_root()


def test_traversals(perfect):
    assert list(perfect.preorder()) == [98, 12, 6, 16, 402, 256, 512]
    assert list(perfect.inorder()) == sorted(perfect.preorder())
    assert list(perfect.postorder()) == [6, 16, 12, 256, 512, 402, 98]


def test_traversals_visit_every_node_once(perfect):
    assert sorted(perfect.preorder()) == sorted(perfect.postorder())
    assert len(list(perfect.inorder())) == perfect.size()


def test_height_and_depth(perfect):
    leaf = perfect.right.right
    assert leaf.height() == 0
    assert perfect.height() == leaf.depth()
    assert perfect.depth() == 0
    assert perfect.left.depth() == perfect.height() - perfect.left.height()


def test_counts(perfect):
    assert perfect.size() == 7
    assert perfect.leaves() + perfect.internal_nodes() == perfect.size()
    assert perfect.left.left.leaves() == 1
    assert perfect.left.left.internal_nodes() == 0


def test_balance_signs():
    root = Node(1)
    assert root.balance() == 0
    root.insert_left(2).insert_left(3)
    assert root.balance() > 0
    assert root.balance() == root.left.height() + 1
    other = Node(1)
    other.insert_right(2)
    assert other.balance() == -1


def test_full_and_perfect(perfect):
    assert perfect.is_full()
    assert perfect.is_perfect()
    perfect.left.left.insert_left(7)
    assert not perfect.is_full()
    assert not perfect.is_perfect()


def test_full_but_not_perfect():
    root = Node(1)
    root.insert_left(2)
    r = root.insert_right(3)
    r.insert_left(4)
    r.insert_right(5)
    assert root.is_full()
    assert not root.is_perfect()


def test_single_node_is_full_and_perfect():
    node = Node(5)
    assert node.is_full()
    assert node.is_perfect()


def test_sibling(perfect):
    assert perfect.left.sibling() is perfect.right
    assert perfect.right.sibling() is perfect.left
    assert perfect.sibling() is None


def test_sibling_missing():
    root = Node(1)
    child = root.insert_left(2)
    assert child.sibling() is None


def test_uncle(perfect):
    assert perfect.left.left.uncle() is perfect.right
    assert perfect.right.right.uncle() is perfect.left
    assert perfect.left.uncle() is None
    assert perfect.uncle() is None