"""Tree traversal strategies for bstreelib.

Traversers implement the different orders for walking a BinarySearchTree.
Each one produces an eager snapshot: a list of the stored values, or None
when the tree is empty.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, List, Optional, Union, TYPE_CHECKING

from ..config import TraversalStrategy

if TYPE_CHECKING:
    from .node import BinarySearchTree


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Subclasses only decide the visiting order; the empty-tree sentinel
    is handled here so every strategy reports it the same way.
    """

    def traverse(self, tree: 'BinarySearchTree') -> Optional[List[Any]]:
        """Traverse the tree starting from its root.

        Args:
            tree: Tree to walk

        Returns:
            None if the tree is empty, otherwise a list with one entry
            per node, referencing the stored values
        """
        if not tree.is_node():
            return None
        values: List[Any] = []
        self._collect(tree, values)
        return values

    @abstractmethod
    def _collect(self, tree: 'BinarySearchTree', values: List[Any]) -> None:
        """Append the values of ``tree`` to ``values`` in traversal order."""
        pass


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal.

    Visits a node before either of its subtrees, so the root is first.
    """

    def _collect(self, tree: 'BinarySearchTree', values: List[Any]) -> None:
        node = tree.node
        if node is None:
            return
        values.append(node.value)
        self._collect(node.left, values)
        self._collect(node.right, values)


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal.

    Visits the left subtree, then the node, then the right subtree. For a
    binary search tree this yields the values in ascending order.
    """

    def _collect(self, tree: 'BinarySearchTree', values: List[Any]) -> None:
        node = tree.node
        if node is None:
            return
        self._collect(node.left, values)
        values.append(node.value)
        self._collect(node.right, values)


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal.

    Visits both subtrees before the node, so the root is last.
    """

    def _collect(self, tree: 'BinarySearchTree', values: List[Any]) -> None:
        node = tree.node
        if node is None:
            return
        self._collect(node.left, values)
        self._collect(node.right, values)
        values.append(node.value)


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    Visits all nodes at depth N before any node at depth N+1, left to
    right within a level.
    """

    def _collect(self, tree: 'BinarySearchTree', values: List[Any]) -> None:
        # Only occupied positions are ever queued
        queue: Deque['BinarySearchTree'] = deque([tree])

        while queue:
            node = queue.popleft().node
            values.append(node.value)

            if node.left.is_node():
                queue.append(node.left)
            if node.right.is_node():
                queue.append(node.right)


_TRAVERSERS = {
    TraversalStrategy.PRE_ORDER: PreOrderTraverser,
    TraversalStrategy.IN_ORDER: InOrderTraverser,
    TraversalStrategy.POST_ORDER: PostOrderTraverser,
    TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
}


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: A TraversalStrategy, or one of its names/aliases
            (pre_order, in_order, post_order, bfs, level, ...)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    if not isinstance(strategy, TraversalStrategy):
        strategy = TraversalStrategy.from_name(strategy)
    return _TRAVERSERS[strategy]()
