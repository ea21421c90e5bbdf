"""Binary tree nodes with parent links, and measurements over them."""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child becomes its left child."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child becomes its right child.

        A value of zero is rejected.
        """
        if value == 0:
            raise ValueError("value must be non-zero")
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order."""
        yield self.value
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order."""
        if self.left is not None:
            yield from self.left.postorder()
        if self.right is not None:
            yield from self.right.postorder()
        yield self.value

    def height(self) -> int:
        """Number of edges on the longest downward path; a leaf has height 0."""
        left = 1 + self.left.height() if self.left is not None else 0
        right = 1 + self.right.height() if self.right is not None else 0
        return max(left, right)

    def depth(self) -> int:
        """Number of ancestors above this node."""
        return 0 if self.parent is None else 1 + self.parent.depth()

    def size(self) -> int:
        """Number of nodes in the subtree rooted here."""
        return 1 + sum(child.size() for child in self._children())

    def leaves(self) -> int:
        """Number of leaves in the subtree rooted here."""
        if self.is_leaf():
            return 1
        return sum(child.leaves() for child in self._children())

    def internal_nodes(self) -> int:
        """Number of nodes in the subtree that have at least one child."""
        if self.is_leaf():
            return 0
        return 1 + sum(child.internal_nodes() for child in self._children())

    def balance(self) -> int:
        """Height of the left subtree minus height of the right subtree."""
        return _levels(self.left) - _levels(self.right)

    def is_full(self) -> bool:
        """True if every node has either zero or two children."""
        if self.left is None and self.right is None:
            return True
        if self.left is not None and self.right is not None:
            return self.left.is_full() and self.right.is_full()
        return False

    def is_perfect(self) -> bool:
        """True if the tree is full and its root's subtrees have equal height."""
        return self.is_full() and self.balance() == 0

    def sibling(self) -> Node | None:
        """The other child of this node's parent, if any."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Node | None:
        """The sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right


def _levels(node: Node | None) -> int:
    """Number of nodes on the longest downward path; zero for no node."""
    if node is None:
        return 0
    return 1 + max(_levels(node.left), _levels(node.right))