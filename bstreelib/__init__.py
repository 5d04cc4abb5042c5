"""bstreelib - an unbalanced binary search tree with four traversal orders.

Quick start:
    from bstreelib import BinarySearchTree

    tree = BinarySearchTree()
    for value in (60, 12, 90, 4):
        tree.insert(value)

    tree.in_order_traversal()       # [4, 12, 60, 90]
    tree.breadth_first_traversal()  # [60, 12, 90, 4]

Equal or incomparable values are dropped on insert. Traversals of an
empty tree return None.
"""

import logging

__version__ = "0.1.0"

from .core.node import BinarySearchTree, BSTNode
from .core.traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .config import TraversalConfig, TraversalStrategy
from .api import build_tree, traverse_tree, count_nodes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "BinarySearchTree",
    "BSTNode",
    "TreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    # API
    "build_tree",
    "traverse_tree",
    "count_nodes",
]
