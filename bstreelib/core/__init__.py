"""Core components of bstreelib: the tree itself and its traversers."""

from .node import BinarySearchTree, BSTNode
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)

__all__ = [
    'BinarySearchTree',
    'BSTNode',
    'TreeTraverser',
    'PreOrderTraverser',
    'InOrderTraverser',
    'PostOrderTraverser',
    'BreadthFirstTraverser',
    'create_traverser',
]
