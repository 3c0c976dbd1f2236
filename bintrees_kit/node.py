"""Binary tree nodes with parent links and the usual structural queries."""

from __future__ import annotations

from collections.abc import Iterator


class BinaryTreeNode:
    """A node holding an integer, linked to its parent and two children."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: BinaryTreeNode | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: BinaryTreeNode | None = None
        self.right: BinaryTreeNode | None = None

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.value!r})"

    def _children(self) -> list[BinaryTreeNode]:
        return [child for child in (self.left, self.right) if child is not None]

    def _walk(self) -> Iterator[BinaryTreeNode]:
        """Yield every node of this subtree in pre-order."""
        yield self
        for child in self._children():
            yield from child._walk()

    def insert_left(self, value: int) -> BinaryTreeNode:
        """Insert a new left child; an existing left child moves below it."""
        node = BinaryTreeNode(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> BinaryTreeNode:
        """Insert a new right child; an existing right child moves below it."""
        node = BinaryTreeNode(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def delete(self) -> None:
        """Detach this subtree from its parent and unlink all of its nodes."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        for node in list(self._walk()):
            node.parent = None
            node.left = None
            node.right = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order."""
        yield self.value
        for child in self._children():
            yield from child.preorder()

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order."""
        for child in self._children():
            yield from child.postorder()
        yield self.value

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        return max((1 + child.height() for child in self._children()), default=0)

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        return sum(1 for _ in self._walk())

    def leaves(self) -> int:
        return sum(1 for node in self._walk() if node.is_leaf())

    def nodes(self) -> int:
        """Count the nodes that have at least one child."""
        return sum(1 for node in self._walk() if not node.is_leaf())

    def balance(self) -> int:
        """Levels of the left subtree minus levels of the right subtree."""
        return _levels(self.left) - _levels(self.right)

    def is_full(self) -> bool:
        """True when every node has either zero or two children."""
        return all(len(node._children()) != 1 for node in self._walk())

    def is_perfect(self) -> bool:
        """True when the tree is full and all leaves sit at the same depth.

        The reference leaf depth is measured from the root of the whole tree.
        """
        leaf = self
        while not leaf.is_leaf():
            leaf = leaf.left if leaf.left is not None else leaf.right
        leaf_depth = leaf.depth()

        def check(node: BinaryTreeNode, level: int) -> bool:
            if node.is_leaf():
                return level == leaf_depth
            if node.left is None or node.right is None:
                return False
            return check(node.left, level + 1) and check(node.right, level + 1)

        return check(self, 0)

    def sibling(self) -> BinaryTreeNode | None:
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> BinaryTreeNode | None:
        if self.parent is None:
            return None
        return self.parent.sibling()


def _levels(node: BinaryTreeNode | None) -> int:
    if node is None:
        return 0
    return 1 + max(_levels(node.left), _levels(node.right))