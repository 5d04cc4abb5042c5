"""Tests for the high-level API and configuration."""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import (
    BinarySearchTree,
    TraversalConfig,
    TraversalStrategy,
    build_tree,
    traverse_tree,
    count_nodes,
)


class TestBuildTree(unittest.TestCase):

    def test_inserts_in_iteration_order(self):
        tree = build_tree([60, 12, 90, 4, 1, 100, 37, 84])
        self.assertEqual(tree.pre_order_traversal(), [60, 12, 4, 1, 37, 90, 84, 100])

    def test_drops_duplicates(self):
        tree = build_tree([3, 1, 3, 2, 1])
        self.assertEqual(count_nodes(tree), 3)
        self.assertEqual(tree.in_order_traversal(), [1, 2, 3])

    def test_accepts_generators(self):
        tree = build_tree(x * x for x in range(5))
        self.assertEqual(tree.in_order_traversal(), [0, 1, 4, 9, 16])

    def test_empty_iterable(self):
        tree = build_tree([])
        self.assertTrue(tree.is_empty())


class TestTraverseTree(unittest.TestCase):

    def setUp(self):
        self.tree = build_tree([60, 12, 90, 4, 1, 100, 37, 84])

    def test_default_is_in_order(self):
        self.assertEqual(traverse_tree(self.tree), [1, 4, 12, 37, 60, 84, 90, 100])

    def test_config_strategy(self):
        config = TraversalConfig(strategy=TraversalStrategy.POST_ORDER)
        self.assertEqual(traverse_tree(self.tree, config), [1, 4, 37, 12, 84, 100, 90, 60])

    def test_strategy_overrides_config(self):
        config = TraversalConfig.sorted_values()
        self.assertEqual(
            traverse_tree(self.tree, config, strategy='bfs'),
            [60, 12, 90, 4, 37, 84, 100, 1]
        )

    def test_level_order_config(self):
        self.assertEqual(
            traverse_tree(self.tree, TraversalConfig.level_order()),
            self.tree.breadth_first_traversal()
        )

    def test_empty_tree_returns_none(self):
        self.assertIsNone(traverse_tree(BinarySearchTree()))

    def test_empty_as_list(self):
        config = TraversalConfig(empty_as_list=True)
        self.assertEqual(traverse_tree(BinarySearchTree(), config), [])

    def test_empty_as_list_ignored_for_populated_tree(self):
        config = TraversalConfig(empty_as_list=True)
        self.assertEqual(len(traverse_tree(self.tree, config)), 8)

    def test_invalid_config(self):
        config = TraversalConfig(strategy='in_order')
        with self.assertRaises(ValueError) as ctx:
            traverse_tree(self.tree, config)
        self.assertIn('Invalid configuration', str(ctx.exception))

    def test_unknown_strategy_name(self):
        with self.assertRaises(ValueError):
            traverse_tree(self.tree, strategy='sideways')

    def test_logs_chosen_traverser(self):
        with self.assertLogs('bstreelib.api', level='DEBUG') as captured:
            traverse_tree(self.tree, strategy=TraversalStrategy.PRE_ORDER)
        self.assertIn('PreOrderTraverser', captured.output[0])


class TestTraversalConfig(unittest.TestCase):

    def test_defaults(self):
        config = TraversalConfig()
        self.assertEqual(config.strategy, TraversalStrategy.IN_ORDER)
        self.assertFalse(config.empty_as_list)
        self.assertEqual(config.validate(), [])

    def test_validate_reports_every_problem(self):
        config = TraversalConfig(strategy='bfs', empty_as_list='yes')
        errors = config.validate()
        self.assertEqual(len(errors), 2)

    def test_strategy_from_name(self):
        self.assertEqual(TraversalStrategy.from_name('PRE_ORDER'), TraversalStrategy.PRE_ORDER)
        self.assertEqual(TraversalStrategy.from_name('level'), TraversalStrategy.BREADTH_FIRST)
        with self.assertRaises(ValueError):
            TraversalStrategy.from_name('random')


if __name__ == '__main__':
    unittest.main()
