"""Core structures for avltreelib.

This module contains the node graph, the owning tree container, its
iterator and the traversal strategies.
"""

from .node import Node
from .tree import AvlTree
from .iterator import AscendingIterator
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)

__all__ = [
    "Node",
    "AvlTree",
    "AscendingIterator",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
]
