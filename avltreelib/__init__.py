"""avltreelib - Self-balancing AVL tree of unique integer keys.

avltreelib keeps a binary search tree balanced with the AVL invariant so
insertion, deletion and membership queries cost O(log n) in the worst case.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from avltreelib import AvlTree

    tree = AvlTree([20, 10, 30])
    tree.add(5)
    tree.contains(5)        # depth of 5, or -1
    list(tree)              # ascending keys
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core import (
    Node,
    AvlTree,
    AscendingIterator,
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .config import TreeConfig, TraversalStrategy
from .exceptions import (
    AvlTreeError,
    NoSuchElementError,
    UnsupportedOperationError,
    EmptyTreeError,
    InvariantViolationError,
)
from .api import (
    build_tree,
    traverse_tree,
    traverse_with_depth,
    get_tree_stats,
    validate_tree,
)

__all__ = [
    "__version__",
    # Core
    "Node",
    "AvlTree",
    "AscendingIterator",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    # Config
    "TreeConfig",
    "TraversalStrategy",
    # Errors
    "AvlTreeError",
    "NoSuchElementError",
    "UnsupportedOperationError",
    "EmptyTreeError",
    "InvariantViolationError",
    # API
    "build_tree",
    "traverse_tree",
    "traverse_with_depth",
    "get_tree_stats",
    "validate_tree",
]
