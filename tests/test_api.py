"""Tests for the high-level functional API."""

import logging

import pytest

from avltreelib import (
    AvlTree,
    Node,
    InvariantViolationError,
    build_tree,
    traverse_tree,
    traverse_with_depth,
    get_tree_stats,
    validate_tree,
)


class TestBuildAndTraverse:
    
    def test_build_tree(self):
        tree = build_tree([20, 10, 30, 10])
        assert tree.size() == 3
        assert not tree.config.check_invariants
    
    def test_build_tree_none(self):
        assert build_tree(None).size() == 0
    
    def test_build_tree_checked(self):
        assert build_tree([3, 2, 1], check_invariants=True).config.check_invariants
    
    def test_traverse_tree_default_is_ascending(self):
        tree = AvlTree([30, 10, 20, 40])
        assert list(traverse_tree(tree)) == [10, 20, 30, 40]
    
    def test_traverse_tree_by_name(self):
        assert list(traverse_tree(AvlTree([10, 20, 30]), "bfs")) == [20, 10, 30]
    
    def test_traverse_with_depth(self):
        pairs = [(node.key, depth) for node, depth in traverse_with_depth(AvlTree([10, 20, 30]), "pre")]
        assert pairs == [(20, 0), (10, 1), (30, 1)]
    
    def test_traverse_max_depth(self, balanced_tree):
        assert list(traverse_tree(balanced_tree, "bfs", max_depth=1)) == [20, 10, 30]


class TestStats:
    
    def test_perfect_tree(self):
        stats = get_tree_stats(AvlTree(range(7)))
        assert stats['total_nodes'] == 7
        assert stats['leaf_nodes'] == 4
        assert stats['internal_nodes'] == 3
        assert stats['height'] == 2
        assert stats['depths'] == {0: 1, 1: 2, 2: 4}
        assert stats['min_nodes_for_height'] == 4
    
    def test_empty_tree(self):
        stats = get_tree_stats(AvlTree())
        assert stats['total_nodes'] == 0
        assert stats['height'] == -1
        assert stats['min_nodes_for_height'] == 0
        assert stats['depths'] == {}
    
    def test_height_agrees_with_tree(self, fibonacci_tree):
        stats = get_tree_stats(fibonacci_tree)
        assert stats['height'] == fibonacci_tree.height() == 4
        assert stats['total_nodes'] == stats['min_nodes_for_height'] == 12


class TestValidation:
    
    def test_valid_tree(self, balanced_tree):
        assert validate_tree(balanced_tree)
        balanced_tree.validate()
    
    def test_stale_parent_link_detected(self, balanced_tree):
        intruder = Node(99)
        # Bypass the link mutators to corrupt the structure
        balanced_tree.root.search(5)._left = intruder
        with pytest.raises(InvariantViolationError) as exc_info:
            balanced_tree.validate()
        assert exc_info.value.key == 99
        assert not validate_tree(balanced_tree)
    
    def test_order_violation_detected(self, balanced_tree):
        balanced_tree.root.search(5).set_left(Node(99))
        with pytest.raises(InvariantViolationError, match="out of order"):
            balanced_tree.validate()
    
    def test_imbalance_detected(self):
        tree = AvlTree([2, 1, 3])
        leaf = tree.root.search(3)
        leaf.set_right(Node(4))
        leaf.right.set_right(Node(5))
        with pytest.raises(InvariantViolationError, match="balance factor"):
            tree.validate()
    
    def test_size_counter_checked(self, balanced_tree):
        balanced_tree._size = 3
        with pytest.raises(InvariantViolationError, match="size counter"):
            balanced_tree.validate()
    
    def test_violation_is_logged(self, balanced_tree, caplog):
        balanced_tree._size = 0
        with caplog.at_level(logging.WARNING, logger="avltreelib.core.tree"):
            assert not validate_tree(balanced_tree)
        assert "invariant violated" in caplog.text
