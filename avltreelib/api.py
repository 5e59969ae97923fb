"""High-level API for avltreelib.

This module provides simple, functional interfaces for common operations on
an AvlTree. These functions wrap the object-oriented API for ease of use in
simple cases.
"""

from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Union

from .config import TraversalStrategy, TreeConfig
from .core.node import Node
from .core.traverser import create_traverser
from .core.tree import AvlTree
from .exceptions import InvariantViolationError


def build_tree(keys: Optional[Iterable[int]] = None,
               check_invariants: bool = False) -> AvlTree:
    """Build a tree from an iterable of keys, skipping duplicates.
    
    Example:
        >>> tree = build_tree([20, 10, 30, 10])
        >>> tree.size()
        3
    """
    return AvlTree(keys, config=TreeConfig(check_invariants=check_invariants))


def traverse_tree(
    tree: AvlTree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    max_depth: Optional[int] = None,
) -> Iterator[int]:
    """Yield the keys of ``tree`` in the order given by ``strategy``.
    
    Args:
        tree: Tree to walk
        strategy: Traversal strategy (in_order, pre_order, post_order, bfs)
        max_depth: Deepest level to visit (None = unlimited)
        
    Yields:
        Keys in traversal order
        
    Example:
        >>> list(traverse_tree(AvlTree([10, 20, 30]), "bfs"))
        [20, 10, 30]
    """
    for node, _ in traverse_with_depth(tree, strategy, max_depth):
        yield node.key


def traverse_with_depth(
    tree: AvlTree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    max_depth: Optional[int] = None,
) -> Iterator[Tuple[Node, int]]:
    """Like traverse_tree but yields ``(node, depth)`` tuples."""
    traverser = create_traverser(strategy)
    yield from traverser.traverse(tree.root, max_depth=max_depth)


def get_tree_stats(tree: AvlTree) -> Dict[str, Any]:
    """Get statistics about a tree.
    
    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, height,
        min_nodes_for_height and a per-depth node count
        
    Example:
        >>> stats = get_tree_stats(AvlTree(range(7)))
        >>> stats['height'], stats['leaf_nodes']
        (2, 4)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': -1,
        'depths': {}
    }
    
    for node, depth in traverse_with_depth(tree, TraversalStrategy.BREADTH_FIRST):
        stats['total_nodes'] += 1
        
        if node.is_leaf():
            stats['leaf_nodes'] += 1
        
        stats['height'] = max(stats['height'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1
    
    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['min_nodes_for_height'] = (
        AvlTree.min_nodes_for_height(stats['height'])
        if stats['height'] >= 0 else 0
    )
    
    return stats


def validate_tree(tree: AvlTree) -> bool:
    """Return True if every invariant of ``tree`` holds, False otherwise."""
    try:
        tree.validate()
    except InvariantViolationError:
        return False
    return True
