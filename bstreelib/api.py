"""High-level API for bstreelib.

Convenience functions for the common cases: building a tree from an
iterable and running a configured traversal.
"""

import logging
from typing import Any, Iterable, List, Optional, Union

from .config import TraversalConfig, TraversalStrategy
from .core.node import BinarySearchTree
from .core.traverser import create_traverser

logger = logging.getLogger(__name__)


def build_tree(values: Iterable[Any]) -> BinarySearchTree:
    """Build a tree by inserting values in iteration order.

    Duplicates and incomparable values are dropped exactly as
    BinarySearchTree.insert drops them.

    Args:
        values: Values to insert

    Returns:
        New BinarySearchTree
    """
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


def traverse_tree(tree: BinarySearchTree,
                  config: Optional[TraversalConfig] = None,
                  strategy: Optional[Union[TraversalStrategy, str]] = None) -> Optional[List[Any]]:
    """Traverse a tree according to a configuration.

    Args:
        tree: Tree to traverse
        config: Traversal configuration (default: in-order)
        strategy: Overrides config.strategy when given; accepts a
            TraversalStrategy or its name

    Returns:
        List of stored values in traversal order. For an empty tree,
        None, or [] when config.empty_as_list is set.

    Raises:
        ValueError: If the configuration is invalid or the strategy
            name is unknown

    Example:
        tree = build_tree([60, 12, 90])
        traverse_tree(tree, strategy="bfs")  # [60, 12, 90]
    """
    if config is None:
        config = TraversalConfig()

    errors = config.validate()
    if errors:
        raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

    traverser = create_traverser(strategy if strategy is not None else config.strategy)
    logger.debug("Traversing tree with %s", type(traverser).__name__)

    values = traverser.traverse(tree)
    if values is None and config.empty_as_list:
        return []
    return values


def count_nodes(tree: BinarySearchTree) -> int:
    """Count the values stored in a tree."""
    return len(tree)
