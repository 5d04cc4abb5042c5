"""Configuration system for bstreelib.

Defines how callers pick a traversal order and how empty trees are
reported by the high-level API.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class TraversalStrategy(Enum):
    """Order in which tree values are visited."""
    PRE_ORDER = "pre_order"          # Node before subtrees
    IN_ORDER = "in_order"            # Sorted order
    POST_ORDER = "post_order"        # Subtrees before node
    BREADTH_FIRST = "breadth_first"  # Level by level

    @classmethod
    def from_name(cls, name: str) -> 'TraversalStrategy':
        """Resolve a strategy from its value or a common alias.

        Args:
            name: Case-insensitive name such as "in_order", "dfs_pre" or "bfs"

        Returns:
            Matching TraversalStrategy

        Raises:
            ValueError: If the name is not recognized
        """
        key = str(name).lower()
        if key not in _ALIASES:
            raise ValueError(
                f"Unknown traversal strategy: {name}. "
                f"Choose from: {', '.join(_ALIASES.keys())}"
            )
        return _ALIASES[key]


_ALIASES = {
    'pre': TraversalStrategy.PRE_ORDER,
    'pre_order': TraversalStrategy.PRE_ORDER,
    'dfs_pre': TraversalStrategy.PRE_ORDER,
    'in': TraversalStrategy.IN_ORDER,
    'in_order': TraversalStrategy.IN_ORDER,
    'post': TraversalStrategy.POST_ORDER,
    'post_order': TraversalStrategy.POST_ORDER,
    'dfs_post': TraversalStrategy.POST_ORDER,
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'level': TraversalStrategy.BREADTH_FIRST,
    'level_order': TraversalStrategy.BREADTH_FIRST,
}


@dataclass
class TraversalConfig:
    """Configuration for a traversal run through the high-level API.

    The tree's own traversal methods always report an empty tree as None;
    ``empty_as_list`` lets API callers ask for ``[]`` instead.
    """

    strategy: TraversalStrategy = TraversalStrategy.IN_ORDER
    empty_as_list: bool = False

    @classmethod
    def sorted_values(cls) -> 'TraversalConfig':
        """Config that returns the values in ascending order."""
        return cls(strategy=TraversalStrategy.IN_ORDER)

    @classmethod
    def level_order(cls) -> 'TraversalConfig':
        """Config that returns the values level by level."""
        return cls(strategy=TraversalStrategy.BREADTH_FIRST)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(
                f"strategy must be a TraversalStrategy, got {self.strategy!r}"
            )

        if not isinstance(self.empty_as_list, bool):
            errors.append("empty_as_list must be a bool")

        return errors
