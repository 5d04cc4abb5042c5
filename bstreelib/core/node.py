"""The binary search tree container for bstreelib.

A BinarySearchTree is a recursive variant: every position in the tree is
either Empty (no BSTNode) or a Node that owns exactly two child trees. The
only transition is Empty -> Node, triggered by insert().
"""

import logging
from typing import Generic, List, Optional, TypeVar

from .traverser import (
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BSTNode(Generic[T]):
    """An occupied tree position.

    Holds one value and exclusively owns its left and right subtrees.
    Children start out Empty.
    """

    __slots__ = ('value', 'left', 'right')

    def __init__(self, value: T):
        self.value = value
        self.left: 'BinarySearchTree[T]' = BinarySearchTree()
        self.right: 'BinarySearchTree[T]' = BinarySearchTree()

    def __repr__(self) -> str:
        return f"BSTNode(value={self.value!r})"


class BinarySearchTree(Generic[T]):
    """Unbalanced binary search tree over a partially ordered value type.

    Values smaller than a node go left, larger values go right. A value
    that compares neither smaller nor larger (an equal value, or an
    incomparable one such as ``float('nan')``) is silently dropped.

    Traversals return ``None`` for an empty tree and otherwise a list of
    the stored value objects themselves (no copies). The list is a snapshot;
    it does not track later insertions.

    Example:
        tree = BinarySearchTree()
        for value in (60, 12, 90):
            tree.insert(value)
        tree.in_order_traversal()  # [12, 60, 90]
    """

    __slots__ = ('_node',)

    def __init__(self):
        self._node: Optional[BSTNode[T]] = None

    @classmethod
    def new(cls) -> 'BinarySearchTree[T]':
        """Return a new, empty tree."""
        return cls()

    @property
    def node(self) -> Optional[BSTNode[T]]:
        """The node at this position, or None when the position is Empty."""
        return self._node

    def is_node(self) -> bool:
        """Check whether this position holds a value."""
        return self._node is not None

    def insert(self, value: T) -> None:
        """Insert a value, keeping the ordering invariant.

        Equal and incomparable values are discarded without any signal to
        the caller. Exceptions raised by the value's comparison operators
        propagate and leave the tree unchanged.

        Args:
            value: Value to store. Must support ``<`` and ``>`` against the
                values already in the tree.
        """
        node = self._node
        if node is None:
            self._node = BSTNode(value)
            return

        if value < node.value:
            node.left.insert(value)
        elif value > node.value:
            node.right.insert(value)
        else:
            logger.debug(
                "Discarding %r: neither less nor greater than stored %r",
                value, node.value
            )

    def is_empty(self) -> bool:
        """True if no value is stored anywhere in the tree."""
        return self.len() == 0

    def len(self) -> int:
        """Count the nodes in the tree.

        Walks the whole structure; there is no cached counter.
        """
        node = self._node
        if node is None:
            return 0
        return 1 + node.left.len() + node.right.len()

    def __len__(self) -> int:
        return self.len()

    def pre_order_traversal(self) -> Optional[List[T]]:
        """Values in node, left, right order. The root comes first."""
        return PreOrderTraverser().traverse(self)

    def in_order_traversal(self) -> Optional[List[T]]:
        """Values in left, node, right order, which is ascending order."""
        return InOrderTraverser().traverse(self)

    def post_order_traversal(self) -> Optional[List[T]]:
        """Values in left, right, node order. The root comes last."""
        return PostOrderTraverser().traverse(self)

    def breadth_first_traversal(self) -> Optional[List[T]]:
        """Values level by level, left to right within each level."""
        return BreadthFirstTraverser().traverse(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.in_order_traversal() or []!r})"
